"""DynamicPageList directive parameter engine."""

from __future__ import annotations

from DynamicPageList.collaborators import WikiContext
from DynamicPageList.core.errors import (
    DirectiveError,
    ParameterPermissionError,
    ParameterValidationError,
    StructuralError,
    UnknownParameterError,
)
from DynamicPageList.core.selector import Selector
from DynamicPageList.core.specification import QuerySpecification
from DynamicPageList.directive import DirectiveParser, ParseResult
from DynamicPageList.processor import ParameterProcessor
from DynamicPageList.registry import ParameterRegistry
from DynamicPageList.sorter import sort_by_priority

__all__ = [
    "DirectiveError",
    "DirectiveParser",
    "ParameterPermissionError",
    "ParameterProcessor",
    "ParameterRegistry",
    "ParameterValidationError",
    "ParseResult",
    "QuerySpecification",
    "Selector",
    "StructuralError",
    "UnknownParameterError",
    "WikiContext",
    "sort_by_priority",
]
