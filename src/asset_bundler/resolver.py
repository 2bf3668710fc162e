"""Locate the compiled file of a bundle."""

from __future__ import annotations

import posixpath

from .exceptions import AmbiguousAssetError, AssetNotFoundError
from .naming import match_bundle


def find_file(directory: str, name: str, extension: str, absolute: bool = False) -> str:
    """Return the single compiled file of a bundle.

    Args:
        directory: Directory holding compiled files.
        name: Logical bundle name.
        extension: Bundle extension (e.g. ".min.css").
        absolute: Root the result at "/" so it can be used as a URL path,
            instead of returning it relative to the working directory.

    Raises:
        AssetNotFoundError: No file matches.
        AmbiguousAssetError: More than one file matches. There is no
            tie-break; this means cleanup failed or compiles raced.
    """
    files = match_bundle(directory, name, extension)

    if len(files) > 1:
        raise AmbiguousAssetError(
            f"More than one file found at {directory} with name {name}"
        )
    if not files:
        raise AssetNotFoundError(f"No files found at {directory} with name {name}")

    if absolute:
        return posixpath.normpath(posixpath.join("/", files[0]))
    return files[0]


def img_path(directory: str, name: str, extension: str) -> str:
    """Return the URL path of a compiled image."""
    return find_file(directory, name, extension, absolute=True)
