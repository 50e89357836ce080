"""Static parameter table.

One `ParameterDescriptor` per directive parameter, grouped by the functional
richness level that first exposes it. Level 0 is the subset compatible with
the classic intersection extension, level 4 unlocks everything.
"""

from __future__ import annotations

from typing import Any, Final

from DynamicPageList.core.descriptor import HandlerKind, ParameterDescriptor
from DynamicPageList.core.selector import Selector

CUSTOM: Final = HandlerKind.CUSTOM

MODES: Final = frozenset(
    {"category", "definition", "gallery", "inline", "none", "ordered", "subpage", "unordered", "userformat"}
)
ORDER_METHODS: Final = frozenset(
    {
        "counter",
        "size",
        "category",
        "sortkey",
        "categoryadd",
        "firstedit",
        "lastedit",
        "pagetouched",
        "pagesel",
        "title",
        "titlewithoutnamespace",
        "user",
        "none",
    }
)
RESET_FLAGS: Final = frozenset({"all", "none", "categories", "templates", "links", "images"})
ELIMINATE_FLAGS: Final = frozenset({"all", "none", "categories", "templates", "links", "images", "linksto"})
DEBUG_LEVELS: Final = frozenset({"0", "1", "2", "3", "4", "5"})


def _p(name: str, richness: int, **kwargs: Any) -> ParameterDescriptor:
    values = kwargs.pop("values", None)
    if values is not None:
        kwargs["values"] = frozenset(values)
    return ParameterDescriptor(name=name, richness=richness, **kwargs)


def _flag(name: str, richness: int, **kwargs: Any) -> ParameterDescriptor:
    return _p(name, richness, boolean=True, default=kwargs.pop("default", False), **kwargs)


def _text(name: str, richness: int, **kwargs: Any) -> ParameterDescriptor:
    return _p(name, richness, strip_html=True, preserve_case=True, default=kwargs.pop("default", ""), **kwargs)


def _user(name: str, richness: int) -> ParameterDescriptor:
    return _p(
        name,
        richness,
        preserve_case=True,
        db_format=True,
        sets_criteria=True,
        open_ref_conflict=True,
    )


def _pages(name: str, richness: int, *, must_exist: bool = True) -> ParameterDescriptor:
    return _p(
        name,
        richness,
        page_name_list=True,
        page_name_must_exist=must_exist,
        sets_criteria=True,
        open_ref_conflict=True,
    )


def _revision_time(name: str, richness: int) -> ParameterDescriptor:
    return _p(name, richness, timestamp=True, db_format=True, sets_criteria=True, open_ref_conflict=True)


PARAMETERS: Final[tuple[ParameterDescriptor, ...]] = (
    # Level 0: selection and output basics.
    _p("category", 0, handler=CUSTOM, default=Selector(), sets_criteria=True, open_ref_conflict=True),
    _p("notcategory", 0, handler=CUSTOM, default=Selector(), sets_criteria=True, open_ref_conflict=True),
    _p("namespace", 0, handler=CUSTOM, default=[], sets_criteria=True),
    _p("count", 0, handler=CUSTOM),
    _p("mode", 0, handler=CUSTOM, values=MODES, default="unordered"),
    _p("order", 0, values=("ascending", "descending"), default="ascending"),
    _p("ordermethod", 0, handler=CUSTOM, values=ORDER_METHODS, default=["titlewithoutnamespace"]),
    _p("redirects", 0, values=("include", "exclude", "only"), default="exclude"),
    _p("hiddencategories", 0, values=("include", "exclude", "only"), default="include"),
    _p("stablepages", 0, values=("include", "exclude", "only"), default="include"),
    _p("qualitypages", 0, values=("include", "exclude", "only"), default="include"),
    _flag("shownamespace", 0, default=True),
    _flag("showcurid", 0),
    _flag("addfirstcategorydate", 0, open_ref_conflict=True),
    _flag("suppresserrors", 0),
    # Level 1: presentation and scrolling.
    _p("notnamespace", 1, handler=CUSTOM, default=[], sets_criteria=True),
    _p("title", 1, handler=CUSTOM, default=Selector(), sets_criteria=True, open_ref_conflict=True),
    _p("titlegt", 1, preserve_case=True, db_format=True, default=""),
    _p("titlelt", 1, preserve_case=True, db_format=True, default=""),
    _p("titlemaxlength", 1, integer=True),
    _p("offset", 1, integer=True, default=0),
    _p("randomcount", 1, integer=True),
    _p("randomseed", 1, integer=True),
    _p("columns", 1, integer=True, default=1),
    _p("rows", 1, integer=True, default=1),
    _p("rowsize", 1, integer=True, default=0),
    _p("rowcolformat", 1, strip_html=True, preserve_case=True, default=""),
    _p("distinct", 1, handler=CUSTOM, values=("true", "false", "strict"), default=True),
    _p("ordercollation", 1, handler=CUSTOM),
    _p("format", 1, handler=CUSTOM, strip_html=True),
    _p("listseparators", 1, handler=CUSTOM, strip_html=True),
    _text("inlinetext", 1, default="&#160;-&#160;"),
    _text("resultsheader", 1),
    _text("resultsfooter", 1),
    _text("noresultsheader", 1),
    _text("noresultsfooter", 1),
    _text("oneresultheader", 1),
    _text("oneresultfooter", 1),
    _p("userdateformat", 1, preserve_case=True, strip_html=True, default="Y-m-d H:i:s"),
    _p("replaceintitle", 1, handler=CUSTOM),
    _p("scroll", 1, handler=CUSTOM, boolean=True, default=False),
    _flag("escapelinks", 1, default=True),
    _p("debug", 1, handler=CUSTOM, values=DEBUG_LEVELS, default=2),
    _p("allowcachedresults", 1, handler=CUSTOM, boolean=True, default=False),
    _p("execandexit", 1, preserve_case=True, strip_html=True),
    # Level 2: content inclusion, tables, link and revision filters.
    _p("include", 2, handler=CUSTOM),
    _p("includepage", 2, handler=CUSTOM),
    _p("includematch", 2, handler=CUSTOM),
    _p("includematchparsed", 2, handler=CUSTOM),
    _p("includenotmatch", 2, handler=CUSTOM),
    _p("includenotmatchparsed", 2, handler=CUSTOM),
    _p("includemaxlength", 2, integer=True),
    _flag("includesubpages", 2, default=True),
    _flag("includetrim", 2),
    _p("secseparators", 2, handler=CUSTOM, default=[]),
    _p("multisecseparators", 2, handler=CUSTOM, default=[]),
    _p("dominantsection", 2, integer=True, default=-1),
    _p("table", 2, handler=CUSTOM, default=""),
    _p("tablerow", 2, handler=CUSTOM, default=[]),
    _p("tablesortcol", 2, integer=True, default=0),
    _p("headingmode", 2, values=("none", "unordered", "ordered", "definition", "h2", "h3", "h4"), default="none"),
    _flag("headingcount", 2),
    _flag("ignorecase", 2),
    _p("goal", 2, values=("pages", "categories"), default="pages", open_ref_conflict=True),
    _pages("linksto", 2),
    _pages("notlinksto", 2),
    _pages("linksfrom", 2),
    _pages("notlinksfrom", 2),
    _pages("uses", 2),
    _pages("notuses", 2),
    _pages("usedby", 2),
    _pages("imageused", 2),
    _pages("imagecontainer", 2),
    _pages("linkstoexternal", 2, must_exist=False),
    _user("createdby", 2),
    _user("notcreatedby", 2),
    _user("modifiedby", 2),
    _user("notmodifiedby", 2),
    _user("lastmodifiedby", 2),
    _user("notlastmodifiedby", 2),
    _p("categoriesminmax", 2, pattern=r"^(\d*),?(\d*)$"),
    _p("minoredits", 2, values=("include", "exclude"), default="include", open_ref_conflict=True),
    _p("minrevisions", 2, integer=True),
    _p("maxrevisions", 2, integer=True),
    _flag("skipthispage", 2, default=True),
    _flag("addcategories", 2, open_ref_conflict=True),
    _flag("addauthor", 2, open_ref_conflict=True),
    _flag("addcontribution", 2, open_ref_conflict=True),
    _flag("addeditdate", 2, open_ref_conflict=True),
    _flag("addexternallink", 2, open_ref_conflict=True),
    _flag("addlasteditor", 2, open_ref_conflict=True),
    _flag("addpagecounter", 2, open_ref_conflict=True),
    _flag("addpagesize", 2, open_ref_conflict=True),
    _flag("addpagetoucheddate", 2, open_ref_conflict=True),
    _flag("adduser", 2, open_ref_conflict=True),
    _p("listattr", 2, strip_html=True, preserve_case=True, default=""),
    _p("itemattr", 2, strip_html=True, preserve_case=True, default=""),
    _p("hlistattr", 2, strip_html=True, preserve_case=True, default=""),
    _p("hitemattr", 2, strip_html=True, preserve_case=True, default=""),
    _p("reset", 2, handler=CUSTOM, values=RESET_FLAGS, default={}),
    # Level 3: pattern matching and link-graph mode.
    _p("categoryregexp", 3, handler=CUSTOM, sets_criteria=True, open_ref_conflict=True),
    _p("categorymatch", 3, handler=CUSTOM, sets_criteria=True, open_ref_conflict=True),
    _p("notcategoryregexp", 3, handler=CUSTOM, sets_criteria=True, open_ref_conflict=True),
    _p("notcategorymatch", 3, handler=CUSTOM, sets_criteria=True, open_ref_conflict=True),
    _p("titleregexp", 3, handler=CUSTOM, sets_criteria=True),
    _p("titlematch", 3, handler=CUSTOM, sets_criteria=True),
    _p("nottitle", 3, handler=CUSTOM, default=Selector(), sets_criteria=True),
    _p("nottitleregexp", 3, handler=CUSTOM, sets_criteria=True),
    _p("nottitlematch", 3, handler=CUSTOM, sets_criteria=True),
    _revision_time("firstrevisionsince", 3),
    _revision_time("lastrevisionbefore", 3),
    _revision_time("allrevisionsbefore", 3),
    _revision_time("allrevisionssince", 3),
    _p("articlecategory", 3, preserve_case=True, db_format=True, open_ref_conflict=True),
    _flag("openreferences", 3),
    # Level 4: maintenance operations.
    _p("eliminate", 4, handler=CUSTOM, values=ELIMINATE_FLAGS, default={}),
    _p("updaterules", 4, preserve_case=True, permission="dpl_param_update_rules"),
    _p("deleterules", 4, boolean=True, default=False, permission="dpl_param_delete_rules"),
)

# Internal state that handlers read and write but directives cannot set by name.
INTERNAL_DEFAULTS: Final[dict[str, Any]] = {
    "defaulttemplatesuffix": ".default",
    "catheadings": [],
    "catnotheadings": [],
    "includeuncat": False,
    "incpage": False,
    "incparsed": False,
    "seclabels": [],
    "seclabelsmatch": [],
    "seclabelsnotmatch": [],
    "listseparators": [],
    "ordersuitsymbols": False,
    "warncachedresults": False,
    "scrolldir": "",
}

# Directive names that are handled by another parameter's handler.
ALIASES: Final[dict[str, str]] = {
    "listseparators": "format",
    "includepage": "include",
}
