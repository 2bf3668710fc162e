"""Configuration and settings for django-asset-bundler."""

from typing import Any

from django.conf import settings

DEFAULTS: dict[str, Any] = {
    # Directory compiled bundles are written to (falls back to STATIC_ROOT)
    "OUTPUT_DIR": None,
    # Builder that turns source contents into the bundle bytes
    "BUILDER": "asset_bundler.builders.raw.RawAssetBuilder",
    # Remove stale bundles before writing the new one (False: write first)
    "DELETE_BEFORE_WRITE": True,
    "FILE_MODE": 0o644,
    # Bundle definitions for the compile_assets command
    "BUNDLES": [],
}


_UNSET = object()


def get_setting(key: str, default: Any = _UNSET) -> Any:
    """Get a setting from ASSET_BUNDLER dict or return default."""
    user_settings: dict[str, Any] = getattr(settings, "ASSET_BUNDLER", {})
    fallback = DEFAULTS.get(key) if default is _UNSET else default
    return user_settings.get(key, fallback)
