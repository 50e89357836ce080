"""Flag-set, caching and diagnostics handlers."""

from __future__ import annotations

from DynamicPageList.handlers.base import HandlerContext
from DynamicPageList.options import filter_boolean, INVALID

_ALL = "all"
_NONE = "none"


def handle_flag_set(ctx: HandlerContext, option: str) -> bool:
    """Parse ``reset=``/``eliminate=`` token lists into a flag mapping.

    ``all`` and ``none`` switch every known flag on or off; other tokens
    switch on a single flag. The result merges into what earlier lines of
    the same directive accumulated.
    """
    known = ctx.descriptor.values or frozenset()
    flags = sorted(known - {_ALL, _NONE})
    update: dict[str, bool] = {}
    for token in option.split(","):
        token = token.strip().lower()
        if not token:
            continue
        if token not in known:
            return False
        if token in (_ALL, _NONE):
            update = dict.fromkeys(flags, token == _ALL)
        else:
            update[token] = True

    merged = dict(ctx.spec.get(ctx.descriptor.name) or {})
    merged.update(update)
    ctx.spec.set(ctx.descriptor.name, merged)
    return True


def handle_allowcachedresults(ctx: HandlerContext, option: str) -> bool:
    spec = ctx.spec
    if spec.get("execandexit") is not None:
        # The directive exits early, so its cached output would be stale.
        spec.set("allowcachedresults", False)
        return True

    option = option.strip().lower()
    if option == "yes+warn":
        spec.set("allowcachedresults", True)
        spec.set("warncachedresults", True)
        return True
    value = filter_boolean(option)
    if value is INVALID:
        return False
    spec.set("allowcachedresults", value)
    return True


def handle_debug(ctx: HandlerContext, option: str) -> bool:
    option = option.strip()
    if option not in (ctx.descriptor.values or ()):
        return False
    level = int(option)
    ctx.spec.set("debug", level)
    ctx.wiki.diagnostics.set_verbosity(level)
    return True
