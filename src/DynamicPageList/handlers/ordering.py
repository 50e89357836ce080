"""Ordering, de-duplication and result-count handlers."""

from __future__ import annotations

from DynamicPageList.handlers.base import HandlerContext
from DynamicPageList.options import coerce_integer, filter_boolean, INVALID

STRICT = "strict"


def handle_ordermethod(ctx: HandlerContext, option: str) -> bool:
    """Accept a comma-separated list of order methods, all or nothing."""
    methods = [method.strip().lower() for method in option.split(",")]
    allowed = ctx.descriptor.values or frozenset()
    if not set(methods) <= allowed:
        return False
    ctx.spec.set("ordermethod", methods)
    if methods[0] != "none":
        ctx.spec.mark_open_references_conflict()
    return True


def handle_ordercollation(ctx: HandlerContext, option: str) -> bool:
    option = option.strip()
    if option == "bridge":
        # Sort card-game pages by suit symbol instead of a collation.
        ctx.spec.set("ordersuitsymbols", True)
    elif option:
        ctx.spec.set("ordercollation", option)
    else:
        return False
    return True


def handle_distinct(ctx: HandlerContext, option: str) -> bool:
    """Store True, False or "strict"."""
    option = option.strip().lower()
    if option == STRICT:
        ctx.spec.set("distinct", STRICT)
        return True
    value = filter_boolean(option)
    if value is INVALID:
        return False
    ctx.spec.set("distinct", value)
    return True


def handle_count(ctx: HandlerContext, option: str) -> bool:
    count = coerce_integer(option)
    if count is INVALID or count <= 0:
        return False
    settings = ctx.settings
    if not settings.allow_unlimited_results and count > settings.max_result_count:
        return False
    ctx.spec.set("count", count)
    return True
