"""Parameter registry lookups."""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping

from DynamicPageList.core.descriptor import ParameterDescriptor
from DynamicPageList.registry.parameters import ALIASES, INTERNAL_DEFAULTS, PARAMETERS

MAX_RICHNESS = 4


class ParameterRegistry:
    """Immutable name -> descriptor table for one functional richness level.

    Lookups are case-sensitive on the canonical lower-case name; callers
    lower-case directive names before asking.
    """

    def __init__(
        self,
        *,
        richness: int = MAX_RICHNESS,
        parameters: Iterable[ParameterDescriptor] = PARAMETERS,
    ) -> None:
        if not 0 <= richness <= MAX_RICHNESS:
            raise ValueError(f"richness must be between 0 and {MAX_RICHNESS}")
        table: dict[str, ParameterDescriptor] = {}
        for descriptor in parameters:
            if descriptor.name in table:
                raise ValueError(f"Duplicate parameter descriptor: {descriptor.name}")
            if descriptor.richness <= richness:
                table[descriptor.name] = descriptor
        self.richness = richness
        self._table: Mapping[str, ParameterDescriptor] = MappingProxyType(table)

    def descriptor_for(self, name: str) -> ParameterDescriptor | None:
        return self._table.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def names(self) -> tuple[str, ...]:
        return tuple(self._table)

    def canonical_name(self, name: str) -> str:
        """Return the parameter whose handler serves `name` (itself unless aliased)."""
        return ALIASES.get(name, name)

    def defaults(self) -> dict[str, Any]:
        """Return the seed values for a fresh specification.

        Internal state comes first so that a registered parameter sharing a
        name with it keeps its own default.
        """
        seeded: dict[str, Any] = dict(INTERNAL_DEFAULTS)
        for descriptor in self._table.values():
            if descriptor.has_default():
                seeded[descriptor.name] = descriptor.default
        return seeded
