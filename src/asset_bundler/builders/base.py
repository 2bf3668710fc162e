"""Base class for asset builders."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseAssetBuilder(ABC):
    """Abstract base class for asset builders.

    Builders receive the raw bytes of every source file, in order, and
    produce the single buffer that gets hashed and written to disk. This is
    the hook for minification or any other transformation of a bundle.
    """

    @abstractmethod
    def build(self, contents: list[bytes], extension: str) -> bytes:
        """Build a bundle from source contents.

        Args:
            contents: Contents of each source file, in input order.
            extension: Target extension of the bundle (e.g. ".min.css").

        Returns:
            Bundle content as bytes.
        """
        ...
