"""Title, namespace and scroll handlers."""

from __future__ import annotations

from DynamicPageList.collaborators import ucfirst
from DynamicPageList.core.selector import Selector
from DynamicPageList.handlers.base import Handler, HandlerContext
from DynamicPageList.options import coerce_integer, filter_boolean, INVALID, to_db_key


def _escaped_patterns(option: str) -> list[str]:
    # Stored keys use underscores, so a literal space in a pattern must match "_".
    return option.replace(" ", "\\_").split("|")


def handle_title(ctx: HandlerContext, option: str) -> bool:
    titles = ctx.wiki.titles
    title = titles.resolve_title(option)
    if title is None:
        return False

    spec = ctx.spec
    current: Selector = spec.get("title") or Selector()

    # The first exact title replaces any namespace= filter; later titles add their own namespaces.
    namespaces = list(spec.get("namespace") or []) if current.OR else []
    namespace = titles.title_namespace(title)
    if namespace not in namespaces:
        namespaces.append(namespace)
    spec.set("namespace", namespaces)
    spec.set("title", current.with_terms("OR", [to_db_key(titles.title_canonical_text(title))]))

    spec.set("mode", "userformat")
    spec.set("ordermethod", [])
    spec.mark_selection_criteria_found()
    spec.mark_open_references_conflict()
    return True


def handle_nottitle(ctx: HandlerContext, option: str) -> bool:
    titles = ctx.wiki.titles
    title = titles.resolve_title(option)
    if title is None:
        return False
    current: Selector = ctx.spec.get("nottitle") or Selector()
    ctx.spec.set("nottitle", current.with_terms("OR", [to_db_key(titles.title_canonical_text(title))]))
    ctx.spec.mark_selection_criteria_found()
    return True


def _title_pattern_handler(target: str, bucket: str) -> Handler:
    def handler(ctx: HandlerContext, option: str) -> bool:
        patterns = _escaped_patterns(option)
        current: Selector = ctx.spec.get(target) or Selector()
        merged = current.with_regexp(patterns) if bucket == "regexp" else current.with_like(patterns)
        ctx.spec.set(target, merged)
        ctx.spec.mark_selection_criteria_found()
        return True

    handler.__name__ = f"handle_{target}{'match' if bucket == 'like' else bucket}"
    return handler


handle_titleregexp = _title_pattern_handler("title", "regexp")
handle_titlematch = _title_pattern_handler("title", "like")
handle_nottitleregexp = _title_pattern_handler("nottitle", "regexp")
handle_nottitlematch = _title_pattern_handler("nottitle", "like")


def _namespace_handler(*, restricted: bool) -> Handler:
    def handler(ctx: HandlerContext, option: str) -> bool:
        allowed = ctx.settings.allowed_namespaces if restricted else None
        resolved: list[int] = []
        for name in option.split("|"):
            name = name.strip()
            index = ctx.wiki.namespaces.namespace_index(name)
            if index is None or (allowed is not None and name not in allowed):
                return False
            resolved.append(index)

        merged = list(ctx.spec.get(ctx.descriptor.name) or [])
        for index in resolved:
            if index not in merged:
                merged.append(index)
        ctx.spec.set(ctx.descriptor.name, merged)
        ctx.spec.mark_selection_criteria_found()
        return True

    handler.__name__ = "handle_namespace" if restricted else "handle_notnamespace"
    return handler


handle_namespace = _namespace_handler(restricted=True)
handle_notnamespace = _namespace_handler(restricted=False)


def _scroll_title(value: str) -> str:
    return ucfirst(value).replace(" ", "_")


def handle_scroll(ctx: HandlerContext, option: str) -> bool:
    """Enable scrolling and pull the window bounds from the request.

    Never fails: an unusable option simply leaves scrolling off.
    """
    enabled = filter_boolean(option) is True
    spec = ctx.spec
    spec.set("scroll", enabled)
    if not enabled:
        return True

    request = ctx.wiki.request
    find_title = request.request_value("DPL_findTitle", "")
    if find_title:
        title_gt = "=_" + _scroll_title(find_title)
    else:
        title_gt = _scroll_title(request.request_value("DPL_fromTitle", ""))
    spec.set("titlegt", title_gt)
    spec.set("titlelt", _scroll_title(request.request_value("DPL_toTitle", "")))
    spec.set("scrolldir", request.request_value("DPL_scrollDir", ""))

    count = coerce_integer(request.request_value("DPL_count", ""))
    if count is not INVALID and count > 0:
        spec.set("count", count)
    return True
