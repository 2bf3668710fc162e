"""Exceptions raised while resolving and rendering compiled bundles."""

from __future__ import annotations


class AssetBundlerError(Exception):
    """Base class for django-asset-bundler errors."""


class AssetNotFoundError(AssetBundlerError):
    """No compiled file matches the requested bundle."""


class AmbiguousAssetError(AssetBundlerError):
    """More than one compiled file matches the requested bundle."""


class UnsupportedExtensionError(AssetBundlerError, ValueError):
    """No tag or inline template exists for the extension."""


class AssetDecodeError(AssetBundlerError, ValueError):
    """A compiled file to be inlined is not valid UTF-8."""
