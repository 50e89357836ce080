"""Category selection handlers.

``category=`` accepts a small boolean language::

    category=+Animals|Plants     # OR, and use the matches as headings
    category=-Minerals           # OR, explicitly not headings
    category=Mammals&Endangered  # AND
    category=*Animals            # direct subcategories of Animals
    category=**Animals           # subcategories two levels down
    category=_none_              # uncategorized pages

Repeated lines merge into the same `Selector`; one expression is either all
AND or all OR, an ``&`` anywhere switching the whole expression to AND.
"""

from __future__ import annotations

import html

from DynamicPageList.core.selector import Selector
from DynamicPageList.handlers.base import Handler, HandlerContext
from DynamicPageList.options import to_db_key
from DynamicPageList.utils.log import log

UNCATEGORIZED = "_none_"


def _unique_merge(existing: list[str], new: list[str]) -> list[str]:
    out = list(existing)
    for item in new:
        if item not in out:
            out.append(item)
    return out


def _category_key(ctx: HandlerContext, name: str) -> str | None:
    title = ctx.wiki.titles.resolve_title(name)
    if title is None:
        return None
    return to_db_key(ctx.wiki.titles.title_canonical_text(title))


def _expand_term(ctx: HandlerContext, term: str) -> list[str]:
    if term.startswith("*") and len(term) >= 2:
        if term[1] == "*":
            parent, depth = term[2:], 2
        else:
            parent, depth = term[1:], 1
        names = ctx.wiki.categories.subcategories_of(parent, depth)
        log.debug("category: %s expands to %d subcategories at depth %d", parent, len(names), depth)
    else:
        names = [term]

    keys: list[str] = []
    for name in names:
        key = _category_key(ctx, name)
        if key is not None:
            keys.append(key)
    return keys


def handle_category(ctx: HandlerContext, option: str) -> bool:
    option = option.strip()
    if not option:
        return False

    heading = not_heading = False
    if option.startswith("+"):
        heading = True
        option = option.lstrip("+")
    if option.startswith("-"):
        not_heading = True
        option = option.lstrip("-")

    # Entities such as &amp; would otherwise read as the AND operator.
    option = html.unescape(option)
    if "&" in option:
        operator, terms = "AND", option.split("&")
    else:
        operator, terms = "OR", option.split("|")

    categories: list[str] = []
    include_uncategorized = False
    for term in terms:
        term = term.strip()
        if term == UNCATEGORIZED or term == "":
            include_uncategorized = True
            categories.append("")
        else:
            categories.extend(_expand_term(ctx, term))

    if not categories:
        return False

    spec = ctx.spec
    current: Selector = spec.get("category") or Selector()
    spec.set("category", current.with_terms(operator, categories))
    if include_uncategorized:
        spec.set("includeuncat", True)
    if heading:
        spec.set("catheadings", _unique_merge(spec.get("catheadings", []), categories))
    if not_heading:
        spec.set("catnotheadings", _unique_merge(spec.get("catnotheadings", []), categories))
    spec.mark_selection_criteria_found()
    spec.mark_open_references_conflict()
    return True


def _pattern_handler(target: str, bucket: str, *, split: bool) -> Handler:
    def handler(ctx: HandlerContext, option: str) -> bool:
        patterns = option.split("|") if split else [option]
        current: Selector = ctx.spec.get(target) or Selector()
        merged = current.with_regexp(patterns) if bucket == "regexp" else current.with_like(patterns)
        ctx.spec.set(target, merged)
        ctx.spec.mark_selection_criteria_found()
        ctx.spec.mark_open_references_conflict()
        return True

    handler.__name__ = f"handle_{target}{'match' if bucket == 'like' else bucket}"
    return handler


handle_categoryregexp = _pattern_handler("category", "regexp", split=False)
handle_categorymatch = _pattern_handler("category", "like", split=True)
handle_notcategoryregexp = _pattern_handler("notcategory", "regexp", split=False)
handle_notcategorymatch = _pattern_handler("notcategory", "like", split=True)


def handle_notcategory(ctx: HandlerContext, option: str) -> bool:
    key = _category_key(ctx, option)
    if key is None:
        return False
    current: Selector = ctx.spec.get("notcategory") or Selector()
    ctx.spec.set("notcategory", current.with_terms("OR", [key]))
    ctx.spec.mark_selection_criteria_found()
    ctx.spec.mark_open_references_conflict()
    return True
