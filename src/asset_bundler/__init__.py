"""Content-addressed CSS/JS/image bundling for Django projects."""

__version__ = "0.1.0"
