"""Render compiled bundles as HTML tags or inline blocks.

Paths and contents are substituted verbatim. Bundles are build output
under the operator's control, so nothing is escaped.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from django.utils.safestring import SafeString, mark_safe

from .compiler import CSS_EXTENSION, JS_EXTENSION
from .exceptions import AssetDecodeError, UnsupportedExtensionError
from .resolver import find_file, img_path

CSS_TAG_TEMPLATE = '<link href="{path}" rel="stylesheet" type="text/css" />'
JS_TAG_TEMPLATE = '<script src="{path}" type="text/javascript" ></script>'
CSS_INLINE_TEMPLATE = "<style>{content}</style>"
JS_INLINE_TEMPLATE = "<script>{content}</script>"


def tag(directory: str, name: str, extension: str) -> SafeString:
    """Render a <link> or <script src> tag pointing at the compiled file."""
    template = _select_template(
        extension, CSS_TAG_TEMPLATE, JS_TAG_TEMPLATE, kind="tag"
    )
    path = find_file(directory, name, extension, absolute=True)
    return mark_safe(template.format(path=path))  # noqa: S308


def inline(directory: str, name: str, extension: str) -> SafeString:
    """Render the compiled file's contents inside a <style> or <script> block."""
    template = _select_template(
        extension, CSS_INLINE_TEMPLATE, JS_INLINE_TEMPLATE, kind="inline"
    )
    path = find_file(directory, name, extension)
    try:
        content = Path(path).read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise AssetDecodeError(f"Cannot inline {path}: not valid UTF-8 ({e})") from e
    return mark_safe(template.format(content=content))  # noqa: S308


def css_tag(path: str, name: str) -> SafeString:
    return tag(path, name, CSS_EXTENSION)


def js_tag(path: str, name: str) -> SafeString:
    return tag(path, name, JS_EXTENSION)


def css_inline(path: str, name: str) -> SafeString:
    return inline(path, name, CSS_EXTENSION)


def js_inline(path: str, name: str) -> SafeString:
    return inline(path, name, JS_EXTENSION)


def _select_template(extension: str, css: str, js: str, kind: str) -> str:
    if extension.endswith("css"):
        return css
    if extension.endswith("js"):
        return js
    raise UnsupportedExtensionError(f"No {kind} template for ext {extension}")


TEMPLATE_FUNCTIONS: dict[str, Callable[..., Any]] = {
    "cssTag": css_tag,
    "cssInline": css_inline,
    "jsTag": js_tag,
    "jsInline": js_inline,
    "imgPath": img_path,
}
