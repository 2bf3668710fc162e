"""Tests for content-addressed bundle filenames."""

from __future__ import annotations

import hashlib
import os

from asset_bundler.naming import (
    bundle_filename,
    bundle_pattern,
    compute_content_hash,
    file_prefix,
    match_bundle,
)


class TestComputeContentHash:
    def test_is_lowercase_hex_md5(self):
        """compute_content_hash returns the 32-char lowercase hex MD5.

        Purpose: Verify the hash format used in compiled filenames.
        Category: Normal case
        Target: compute_content_hash(content)
        Technique: Equivalence partitioning
        Test data: Short CSS rule
        """
        result = compute_content_hash(b"body{color:red}")

        assert result == hashlib.md5(b"body{color:red}").hexdigest()
        assert len(result) == 32
        assert result == result.lower()

    def test_deterministic(self):
        assert compute_content_hash(b"abc") == compute_content_hash(b"abc")

    def test_sensitive_to_content(self):
        assert compute_content_hash(b"a{}") != compute_content_hash(b"b{}")

    def test_empty_content(self):
        assert compute_content_hash(b"") == "d41d8cd98f00b204e9800998ecf8427e"


class TestFilenames:
    def test_file_prefix(self):
        assert file_prefix("app") == "__app-"

    def test_bundle_filename(self):
        digest = hashlib.md5(b"x").hexdigest()

        assert bundle_filename("app", b"x", ".min.css") == f"__app-{digest}.min.css"

    def test_bundle_pattern(self):
        pattern = bundle_pattern("static", "app", ".min.js")

        assert pattern == os.path.join("static", "__app-*.min.js")

    def test_bundle_pattern_escapes_magic_characters(self):
        """Glob metacharacters in the directory or name are matched literally.

        Purpose: Verify that only the hash position is a wildcard.
        Category: Edge case
        Target: bundle_pattern(directory, name, extension)
        Technique: Error guessing
        Test data: Name containing "[" and "*"
        """
        pattern = bundle_pattern("out", "a[1]*", ".css")

        assert pattern == os.path.join("out", "__a[[]1][*]-*.css")


class TestMatchBundle:
    def test_returns_sorted_matches(self, output_dir):
        (output_dir / "__app-bbb.min.css").write_text("b")
        (output_dir / "__app-aaa.min.css").write_text("a")

        result = match_bundle(str(output_dir), "app", ".min.css")

        assert result == [
            str(output_dir / "__app-aaa.min.css"),
            str(output_dir / "__app-bbb.min.css"),
        ]

    def test_ignores_other_names_and_extensions(self, output_dir):
        """Only files with the bundle's prefix and extension match.

        Purpose: Verify that other bundles and other asset kinds sharing the
                 directory are not matched.
        Category: Normal case
        Target: match_bundle(directory, name, extension)
        Technique: Equivalence partitioning
        Test data: Files for another name, another extension, no prefix
        """
        (output_dir / "__app-aaa.min.css").write_text("a")
        (output_dir / "__vendor-aaa.min.css").write_text("v")
        (output_dir / "__app-aaa.min.js").write_text("j")
        (output_dir / "app.min.css").write_text("x")

        result = match_bundle(str(output_dir), "app", ".min.css")

        assert result == [str(output_dir / "__app-aaa.min.css")]

    def test_missing_directory_matches_nothing(self, tmp_path):
        assert match_bundle(str(tmp_path / "nope"), "app", ".min.css") == []
