from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Optional


class HandlerKind(Enum):
    """How a parameter's raw option is validated and stored."""

    GENERIC = "generic"
    CUSTOM = "custom"


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """Static validation rules for one directive parameter.

    The coercion flags are applied by the generic pipeline in a fixed order
    (see `ParameterProcessor`). Parameters tagged `HandlerKind.CUSTOM` skip
    that pipeline and are validated by their dedicated handler, which may
    still consult `values` and `default`.

    Attributes:
        name: Canonical lower-case parameter name.
        richness: Lowest functional richness level exposing this parameter.
        handler: Generic pipeline or custom handler.
        values: Closed set of allowed (lower-case) options.
        preserve_case: Skip lower-casing of the option.
        strip_html: Remove ``<...html...>`` tags.
        integer: Coerce to int.
        boolean: Coerce to bool.
        timestamp: Normalize through the timestamp collaborator.
        page_name_list: Parse a ``|``-separated page list.
        page_name_must_exist: Each listed page must resolve to a title.
        db_format: Replace spaces with underscores.
        pattern: Regular expression whose groups replace the option.
        default: Value seeded into every fresh specification.
        sets_criteria: Accepting this parameter counts as a selection filter.
        open_ref_conflict: Accepting this parameter conflicts with openreferences.
        permission: Capability the caller must hold.
    """

    name: str
    richness: int = 0
    handler: HandlerKind = HandlerKind.GENERIC
    values: Optional[FrozenSet[str]] = None
    preserve_case: bool = False
    strip_html: bool = False
    integer: bool = False
    boolean: bool = False
    timestamp: bool = False
    page_name_list: bool = False
    page_name_must_exist: bool = False
    db_format: bool = False
    pattern: Optional[str] = None
    default: Any = None
    sets_criteria: bool = False
    open_ref_conflict: bool = False
    permission: Optional[str] = None

    @property
    def is_custom(self) -> bool:
        return self.handler is HandlerKind.CUSTOM

    def has_default(self) -> bool:
        """Return whether seeding should apply `default`.

        `None` never seeds, and neither does `False` on a boolean parameter
        (absence already reads as false).
        """
        if self.default is None:
            return False
        return not (self.boolean and self.default is False)
