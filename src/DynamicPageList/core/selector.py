from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Sequence


@dataclass(frozen=True, slots=True)
class Selector:
    """Structured category or title filter.

    Buckets:

    - `AND`: exact keys that must all match
    - `OR`: exact keys of which any may match
    - `regexp`: regular expressions, OR-combined
    - `like`: SQL LIKE wildcard patterns, OR-combined

    Keys are stored in canonical underscore form. Instances are immutable,
    so a handler builds the merged value first and commits it in one step.
    """

    AND: Sequence[str] = ()
    OR: Sequence[str] = ()
    regexp: Sequence[str] = ()
    like: Sequence[str] = ()

    def with_terms(self, operator: str, terms: Iterable[str]) -> Selector:
        """Return a copy with `terms` appended to the AND or OR bucket."""
        if operator not in ("AND", "OR"):
            raise ValueError(f"Unsupported selector operator: {operator}")
        merged = tuple(getattr(self, operator)) + tuple(terms)
        return replace(self, **{operator: merged})

    def with_regexp(self, patterns: Iterable[str]) -> Selector:
        return replace(self, regexp=tuple(self.regexp) + tuple(patterns))

    def with_like(self, patterns: Iterable[str]) -> Selector:
        return replace(self, like=tuple(self.like) + tuple(patterns))
