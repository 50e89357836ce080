"""Output layout handlers: mode, user formats, section inclusion and tables."""

from __future__ import annotations

from DynamicPageList.handlers.base import Handler, HandlerContext, put
from DynamicPageList.options import replace_newline_escapes, strip_html_tags

LINE_BREAK = "<br/>"
PAGE_LINK_CELL = "[[%PAGE%|%TITLE%]]\n|"
ROW_START = "\n|-\n|"
CELL_START = "\n|"
TABLE_END = "\n|}"
RULE_SEPARATOR = "\n----\n"
BREAK_SEPARATOR = "<br/>\n"


def _use_userformat(ctx: HandlerContext) -> None:
    ctx.spec.set("mode", "userformat")
    ctx.spec.set("inlinetext", "")


def handle_mode(ctx: HandlerContext, option: str) -> bool:
    mode = option.strip().lower()
    if mode not in (ctx.descriptor.values or ()):
        return False
    if mode == "none":
        # 'none' is inline mode with a line break between items.
        ctx.spec.set("mode", "inline")
        ctx.spec.set("inlinetext", LINE_BREAK)
    elif mode == "userformat":
        _use_userformat(ctx)
    else:
        ctx.spec.set("mode", mode)
    return True


def handle_format(ctx: HandlerContext, option: str) -> bool:
    """Split a user format into header, item start, item end and footer."""
    option = replace_newline_escapes(strip_html_tags(option))
    ctx.spec.set("listseparators", option.split(",", 3))
    _use_userformat(ctx)
    return True


def handle_include(ctx: HandlerContext, option: str) -> bool:
    if not option.strip():
        return False
    ctx.spec.set("incpage", True)
    ctx.spec.set("seclabels", option.split(","))
    return True


def _section_match_handler(target: str, *, parsed: bool) -> Handler:
    def handler(ctx: HandlerContext, option: str) -> bool:
        if parsed:
            ctx.spec.set("incparsed", True)
        ctx.spec.set(target, option.split(","))
        return True

    handler.__name__ = f"handle_{target}{'parsed' if parsed else ''}"
    return handler


handle_includematch = _section_match_handler("seclabelsmatch", parsed=False)
handle_includematchparsed = _section_match_handler("seclabelsmatch", parsed=True)
handle_includenotmatch = _section_match_handler("seclabelsnotmatch", parsed=False)
handle_includenotmatchparsed = _section_match_handler("seclabelsnotmatch", parsed=True)


def handle_secseparators(ctx: HandlerContext, option: str) -> bool:
    ctx.spec.set(ctx.descriptor.name, replace_newline_escapes(option).split(","))
    return True


handle_multisecseparators = handle_secseparators


def handle_table(ctx: HandlerContext, option: str) -> bool:
    """Derive a wiki table layout from ``class,column header,...``.

    The first token holds the table attributes (``class=wikitable`` when
    empty). A second token of ``-`` suppresses the generated page-link column;
    an empty one gets the default column label. Section separators are then
    laid out for every label already declared by ``include``.
    """
    page_link = PAGE_LINK_CELL
    header = ""
    for position, column in enumerate(option.split(",")):
        if position == 0:
            header = "{|" + (column or "class=wikitable")
            continue
        if position == 1 and column == "-":
            page_link = ""
            continue
        if position == 1 and column == "":
            column = ctx.settings.article_label
        header += f"\n!{column}"

    spec = ctx.spec
    labels: list[str] = list(spec.get("seclabels") or [])
    section_separators: list[str] = list(spec.get("secseparators") or [])
    multi_separators: list[str] = list(spec.get("multisecseparators") or [])
    for index, label in enumerate(labels):
        if index == 0:
            put(section_separators, 0, ROW_START + page_link)
            put(section_separators, 1, "")
            put(multi_separators, 0, ROW_START + page_link)
        else:
            put(section_separators, 2 * index, CELL_START)
            put(section_separators, 2 * index + 1, "")
            put(multi_separators, index, RULE_SEPARATOR if label.startswith("#") else BREAK_SEPARATOR)

    spec.set("defaulttemplatesuffix", "")
    _use_userformat(ctx)
    spec.set("listseparators", [header, "", "", TABLE_END])
    spec.set("secseparators", section_separators)
    spec.set("multisecseparators", multi_separators)
    spec.set("table", replace_newline_escapes(option))
    return True


def handle_tablerow(ctx: HandlerContext, option: str) -> bool:
    option = replace_newline_escapes(option.strip())
    ctx.spec.set("tablerow", option.split(",") if option else [])
    return True


def handle_replaceintitle(ctx: HandlerContext, option: str) -> bool:
    """Store ``pattern,replacement`` for rewriting displayed titles."""
    parts = option.split(",", 1)
    if len(parts) > 1:
        parts[1] = strip_html_tags(parts[1])
    ctx.spec.set("replaceintitle", parts)
    return True
