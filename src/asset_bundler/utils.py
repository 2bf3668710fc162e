"""Helpers for loading configured components."""

from __future__ import annotations

from importlib import import_module
from typing import Any

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .conf import get_setting


def get_builder(builder_path: str | None = None) -> Any:
    """Import and instantiate a builder class (defaults to the BUILDER setting)."""
    cls = import_class(builder_path or get_setting("BUILDER"))
    return cls()


def get_output_dir() -> str:
    """Return the configured OUTPUT_DIR, falling back to STATIC_ROOT."""
    output_dir: str | None = get_setting("OUTPUT_DIR") or getattr(
        settings, "STATIC_ROOT", None
    )
    if not output_dir:
        raise ImproperlyConfigured(
            "ASSET_BUNDLER['OUTPUT_DIR'] or STATIC_ROOT must be configured"
        )
    return str(output_dir)


def import_class(dotted_path: str) -> type:
    """Import a class from a dotted path string."""
    module_path, class_name = dotted_path.rsplit(".", 1)
    module = import_module(module_path)
    return getattr(module, class_name)  # type: ignore[no-any-return]
