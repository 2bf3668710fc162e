"""Django app configuration for django-asset-bundler."""

from django.apps import AppConfig


class AssetBundlerConfig(AppConfig):
    name = "asset_bundler"
    verbose_name = "Asset Bundler"
