"""Content-addressed filenames for compiled bundles.

A compiled bundle is stored as ``__<name>-<md5 hex><extension>``. Every
file of a bundle, stale or current, matches ``__<name>-*<extension>``.
"""

from __future__ import annotations

import glob
import hashlib
import os


def compute_content_hash(content: bytes) -> str:
    """Compute the lowercase hex MD5 digest of content for bundle filenames."""
    return hashlib.md5(content, usedforsecurity=False).hexdigest()


def file_prefix(name: str) -> str:
    return f"__{name}-"


def bundle_filename(name: str, content: bytes, extension: str) -> str:
    return f"{file_prefix(name)}{compute_content_hash(content)}{extension}"


def bundle_pattern(directory: str, name: str, extension: str) -> str:
    """Return the glob pattern matching every compiled file of a bundle.

    The directory, name and extension are escaped so that only the hash
    position acts as a wildcard.
    """
    return os.path.join(
        glob.escape(directory),
        glob.escape(file_prefix(name)) + "*" + glob.escape(extension),
    )


def match_bundle(directory: str, name: str, extension: str) -> list[str]:
    """List compiled files of a bundle in ``directory``, sorted by path."""
    return sorted(glob.glob(bundle_pattern(directory, name, extension)))
