"""JSON rendering of a parsed directive.

Turns a `ParseResult` into JSON-serializable Python objects so that the
query specification can be inspected or handed to a non-Python consumer.
"""

from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Mapping

from DynamicPageList.collaborators import PageTitle
from DynamicPageList.core.selector import Selector
from DynamicPageList.directive import ParseResult


def _plain(value: Any) -> Any:
    if isinstance(value, Selector):
        return {
            "AND": list(value.AND),
            "OR": list(value.OR),
            "regexp": list(value.regexp),
            "like": list(value.like),
        }
    if isinstance(value, PageTitle):
        return value.full_text
    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain(v) for v in value]
    return value


def render_json(result: ParseResult) -> dict[str, Any]:
    """Render a parse result into a JSON-serializable dict.

    Args:
        result: Parsed directive.

    Returns:
        A dict with the stored values, the derived flags and any issues.
    """
    spec = result.spec
    return {
        "values": {name: _plain(value) for name, value in sorted(spec.all_values().items())},
        "selection_criteria_found": spec.is_selection_criteria_found(),
        "open_references_conflict": spec.is_open_references_conflict(),
        "processed": list(spec.processed_parameters),
        "issues": [asdict(issue) for issue in result.issues],
    }


def dumps(result: ParseResult) -> str:
    return json.dumps(render_json(result), ensure_ascii=False, indent=2)
