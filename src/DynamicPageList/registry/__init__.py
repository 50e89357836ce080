"""Static parameter metadata."""

from __future__ import annotations

from DynamicPageList.registry.registry import MAX_RICHNESS, ParameterRegistry

__all__ = ["MAX_RICHNESS", "ParameterRegistry"]
