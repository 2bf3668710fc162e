"""Template tags exposing compiled bundles to Django templates.

Usage::

    {% load asset_bundler %}
    {% cssTag "static" "app" %}
    {% jsInline "static" "app" %}
    <link rel="icon" href="{% imgPath "static" "favicon" ".ico" %}">

A missing or ambiguous bundle raises, failing the render.
"""

from __future__ import annotations

from django import template

from asset_bundler.render import TEMPLATE_FUNCTIONS

register = template.Library()

for tag_name, func in TEMPLATE_FUNCTIONS.items():
    register.simple_tag(func, name=tag_name)
