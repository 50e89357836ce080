"""Custom parameter handlers.

`HANDLERS` maps each custom parameter's canonical name to its handler. The
processor binds it against the registry when it is constructed, so a custom
descriptor without a handler is caught at load time.
"""

from __future__ import annotations

from typing import Final, Mapping

from DynamicPageList.handlers.base import Handler, HandlerContext
from DynamicPageList.handlers.category import (
    handle_category,
    handle_categorymatch,
    handle_categoryregexp,
    handle_notcategory,
    handle_notcategorymatch,
    handle_notcategoryregexp,
)
from DynamicPageList.handlers.flags import handle_allowcachedresults, handle_debug, handle_flag_set
from DynamicPageList.handlers.layout import (
    handle_format,
    handle_include,
    handle_includematch,
    handle_includematchparsed,
    handle_includenotmatch,
    handle_includenotmatchparsed,
    handle_mode,
    handle_multisecseparators,
    handle_replaceintitle,
    handle_secseparators,
    handle_table,
    handle_tablerow,
)
from DynamicPageList.handlers.ordering import (
    handle_count,
    handle_distinct,
    handle_ordercollation,
    handle_ordermethod,
)
from DynamicPageList.handlers.title import (
    handle_namespace,
    handle_notnamespace,
    handle_nottitle,
    handle_nottitlematch,
    handle_nottitleregexp,
    handle_scroll,
    handle_title,
    handle_titlematch,
    handle_titleregexp,
)

HANDLERS: Final[Mapping[str, Handler]] = {
    "category": handle_category,
    "categoryregexp": handle_categoryregexp,
    "categorymatch": handle_categorymatch,
    "notcategory": handle_notcategory,
    "notcategoryregexp": handle_notcategoryregexp,
    "notcategorymatch": handle_notcategorymatch,
    "namespace": handle_namespace,
    "notnamespace": handle_notnamespace,
    "title": handle_title,
    "titleregexp": handle_titleregexp,
    "titlematch": handle_titlematch,
    "nottitle": handle_nottitle,
    "nottitleregexp": handle_nottitleregexp,
    "nottitlematch": handle_nottitlematch,
    "scroll": handle_scroll,
    "count": handle_count,
    "ordermethod": handle_ordermethod,
    "ordercollation": handle_ordercollation,
    "distinct": handle_distinct,
    "mode": handle_mode,
    "format": handle_format,
    "include": handle_include,
    "includematch": handle_includematch,
    "includematchparsed": handle_includematchparsed,
    "includenotmatch": handle_includenotmatch,
    "includenotmatchparsed": handle_includenotmatchparsed,
    "secseparators": handle_secseparators,
    "multisecseparators": handle_multisecseparators,
    "table": handle_table,
    "tablerow": handle_tablerow,
    "replaceintitle": handle_replaceintitle,
    "allowcachedresults": handle_allowcachedresults,
    "reset": handle_flag_set,
    "eliminate": handle_flag_set,
    "debug": handle_debug,
}

__all__ = ["HANDLERS", "Handler", "HandlerContext"]
