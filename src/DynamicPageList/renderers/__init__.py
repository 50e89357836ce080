"""Output renderers for parsed directives."""

from __future__ import annotations

from DynamicPageList.renderers.json import dumps, render_json

__all__ = ["dumps", "render_json"]
