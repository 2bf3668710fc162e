"""Compile source files into content-addressed bundles.

Pipeline: Read -> Build -> Hash -> Remove stale -> Write

Compilation is expected to run once per deploy from a single process.
Concurrent compiles of the same bundle are not locked and may leave zero
or two matching files behind.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from typing import Any

from .conf import get_setting
from .naming import bundle_filename, match_bundle
from .utils import get_builder

logger = logging.getLogger(__name__)

CSS_EXTENSION = ".min.css"
JS_EXTENSION = ".min.js"


def compile_css(output_dir: str, name: str, *paths: str) -> str:
    """Concatenate stylesheets into ``__<name>-<hash>.min.css``."""
    return compile_bundle(output_dir, name, CSS_EXTENSION, *paths)


def compile_js(output_dir: str, name: str, *paths: str) -> str:
    """Concatenate scripts into ``__<name>-<hash>.min.js``."""
    return compile_bundle(output_dir, name, JS_EXTENSION, *paths)


def compile_image(output_dir: str, name: str, extension: str, path: str) -> str:
    """Fingerprint a single file (image, favicon, ...) for long cache expiry.

    Goes through the configured builder like any other bundle, so the raw
    builder appends its blank-line separator to the file.
    """
    return compile_bundle(output_dir, name, extension, path)


def compile_bundle(output_dir: str, name: str, extension: str, *paths: str) -> str:
    """Main entry point: read, build, hash and write a bundle.

    Returns:
        Path of the written file.

    Raises:
        OSError: A source could not be read, a stale file could not be
            removed, or the bundle could not be written.
    """
    contents = read_sources(paths)
    builder = get_builder()
    data = builder.build(contents, extension)
    return publish(output_dir, name, extension, data)


def compile_definition(output_dir: str, bundle: dict[str, Any]) -> str:
    """Compile one entry of the BUNDLES setting."""
    name = bundle["name"]
    bundle_type = bundle["type"]
    sources = list(bundle.get("sources", []))

    if bundle_type == "css":
        return compile_css(output_dir, name, *sources)
    if bundle_type == "js":
        return compile_js(output_dir, name, *sources)
    if bundle_type == "img":
        if len(sources) != 1:
            raise ValueError(
                f"Image bundle {name!r} needs exactly one source, got {len(sources)}"
            )
        return compile_image(output_dir, name, bundle["extension"], sources[0])
    raise ValueError(f"Unknown bundle type {bundle_type!r} for bundle {name!r}")


def read_sources(paths: Iterable[str]) -> list[bytes]:
    """Read every source file fully, in order.

    Fails on the first unreadable path before anything on disk is touched.
    """
    contents: list[bytes] = []
    for path in paths:
        with open(path, "rb") as f:
            contents.append(f.read())
    return contents


def publish(output_dir: str, name: str, extension: str, data: bytes) -> str:
    """Write ``data`` as the only compiled file of the bundle.

    With DELETE_BEFORE_WRITE (the default) stale files are removed first,
    so a failed write leaves no file. Otherwise the new file is written
    first and the stale ones removed afterwards, so a reader may briefly
    see two files but never none.
    """
    dst = output_path(output_dir, name, data, extension)

    if get_setting("DELETE_BEFORE_WRITE"):
        remove_stale(output_dir, name, extension)
        _write(dst, data)
    else:
        _write(dst, data)
        remove_stale(output_dir, name, extension, keep=dst)

    logger.info("Compiled %s (%d bytes): %s", name, len(data), dst)
    return dst


def output_path(output_dir: str, name: str, data: bytes, extension: str) -> str:
    return os.path.join(output_dir, bundle_filename(name, data, extension))


def remove_stale(
    output_dir: str, name: str, extension: str, keep: str | None = None
) -> list[str]:
    """Delete every compiled file of a bundle except ``keep``.

    Stops at the first failing deletion; files removed before it stay removed.
    """
    keep_path = os.path.abspath(keep) if keep else None
    removed: list[str] = []
    for path in match_bundle(output_dir, name, extension):
        if keep_path is not None and os.path.abspath(path) == keep_path:
            continue
        os.remove(path)
        logger.debug("Removed stale bundle file %s", path)
        removed.append(path)
    return removed


def _write(dst: str, data: bytes) -> None:
    with open(dst, "wb") as f:
        f.write(data)
    os.chmod(dst, get_setting("FILE_MODE"))
