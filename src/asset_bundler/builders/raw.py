"""Raw asset builder that concatenates source files as-is."""

from __future__ import annotations

from .base import BaseAssetBuilder

SEPARATOR = b"\n\n"


class RawAssetBuilder(BaseAssetBuilder):
    """Simple builder that concatenates source contents unmodified.

    Every file is followed by a blank line, including the last one.
    """

    def build(self, contents: list[bytes], extension: str) -> bytes:
        return b"".join(content + SEPARATOR for content in contents)
