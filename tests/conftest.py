"""Pytest fixtures for django-asset-bundler tests."""

import pytest


@pytest.fixture
def css_sources(tmp_path):
    """Two stylesheets, in bundle order."""
    src = tmp_path / "src"
    src.mkdir()
    red = src / "red.css"
    red.write_bytes(b"body{color:red}")
    blue = src / "blue.css"
    blue.write_bytes(b"p{color:blue}")
    return [str(red), str(blue)]


@pytest.fixture
def js_sources(tmp_path):
    """Two scripts, in bundle order."""
    src = tmp_path / "js"
    src.mkdir()
    first = src / "first.js"
    first.write_bytes(b"var a = 1;")
    second = src / "second.js"
    second.write_bytes(b'console.log("b");')
    return [str(first), str(second)]


@pytest.fixture
def output_dir(tmp_path):
    """Empty output directory for compiled bundles."""
    out = tmp_path / "out"
    out.mkdir()
    return out


@pytest.fixture
def in_tmp(tmp_path, monkeypatch):
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
