"""Query specification accumulated while a directive is processed.

A `QuerySpecification` is created per directive, seeded with registry
defaults, mutated one parameter at a time and then frozen before being handed
to the query and rendering layers.
"""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any, Mapping

from DynamicPageList.core.errors import StructuralError


def _read_only(value: Any) -> Any:
    """Return an immutable equivalent of a stored value."""
    if isinstance(value, (list, tuple)):
        return tuple(_read_only(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(value)
    if isinstance(value, Mapping):
        return MappingProxyType({key: _read_only(item) for key, item in value.items()})
    return value


class QuerySpecification:
    """Validated parameter values plus the two derived selection flags."""

    __slots__ = ("_values", "_processed", "_selection_criteria_found", "_open_references_conflict", "_frozen")

    def __init__(self, defaults: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = copy.deepcopy(dict(defaults or {}))
        self._processed: dict[str, None] = {}
        self._selection_criteria_found = False
        self._open_references_conflict = False
        self._frozen = False

    def _check_mutable(self) -> None:
        if self._frozen:
            raise StructuralError("QuerySpecification is frozen")

    def set(self, name: str, value: Any) -> None:  # noqa: A003 - mirrors get()
        self._check_mutable()
        self._values[name] = value

    def get(self, name: str, default: Any = None) -> Any:
        return self._values.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def all_values(self) -> Mapping[str, Any]:
        """Return a read-only view of every stored value."""
        return MappingProxyType(self._values)

    def mark_processed(self, name: str) -> None:
        self._check_mutable()
        self._processed.setdefault(name, None)

    @property
    def processed_parameters(self) -> tuple[str, ...]:
        """Parameter names handled so far, in first-seen order."""
        return tuple(self._processed)

    def was_processed(self, name: str) -> bool:
        return name in self._processed

    def mark_selection_criteria_found(self) -> None:
        self._check_mutable()
        self._selection_criteria_found = True

    def mark_open_references_conflict(self) -> None:
        self._check_mutable()
        self._open_references_conflict = True

    def is_selection_criteria_found(self) -> bool:
        return self._selection_criteria_found

    def is_open_references_conflict(self) -> bool:
        return self._open_references_conflict

    def freeze(self) -> QuerySpecification:
        """Make the specification read-only and return it.

        Stored lists become tuples and dicts become read-only mappings, so
        values handed out by `get` and `all_values` cannot be changed either.
        """
        if not self._frozen:
            self._values = {name: _read_only(value) for name, value in self._values.items()}
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __repr__(self) -> str:
        return (
            f"QuerySpecification(processed={list(self._processed)}, "
            f"selection_criteria_found={self._selection_criteria_found}, "
            f"open_references_conflict={self._open_references_conflict})"
        )
