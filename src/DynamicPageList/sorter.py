"""Priority ordering of a directive's parameters.

Some handlers read state written by others: ``table`` lays out separators for
the labels ``include`` declared, ``ordermethod`` relies on category headings,
and so on. Authors cannot be expected to write parameters in a working order,
so these are moved to the front before processing.
"""

from __future__ import annotations

from typing import Final, Sequence

from DynamicPageList.core.errors import StructuralError

PRIORITY: Final[dict[str, int]] = {
    "distinct": 1,
    "openreferences": 2,
    "ignorecase": 3,
    "category": 4,
    "goal": 5,
    "ordercollation": 6,
    "ordermethod": 7,
    "includepage": 8,
    "include": 9,
}


def sort_by_priority(parameters: Sequence[tuple[str, str]]) -> list[tuple[str, str]]:
    """Move priority parameters to the front, leaving the rest in place.

    Priority pairs are ordered by their rank; repeated lines of one parameter
    keep their written order. All other pairs follow in their original order.

    Args:
        parameters: ``(name, value)`` pairs in directive order.

    Returns:
        Reordered pairs.

    Raises:
        StructuralError: If `parameters` is not a list or tuple of pairs.
    """
    if not isinstance(parameters, (list, tuple)):
        raise StructuralError(f"Expected a list of (name, value) pairs, got {type(parameters).__name__}")
    for pair in parameters:
        if not isinstance(pair, tuple) or len(pair) != 2:
            raise StructuralError(f"Malformed parameter pair: {pair!r}")

    first = sorted((pair for pair in parameters if pair[0] in PRIORITY), key=lambda pair: PRIORITY[pair[0]])
    rest = [pair for pair in parameters if pair[0] not in PRIORITY]
    return first + rest
