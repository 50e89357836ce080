"""Option normalization primitives.

Each function is total: it never raises on bad directive text and instead
returns the `INVALID` marker, leaving the decision to the caller.
"""

from __future__ import annotations

import re
from typing import Any, Final

from DynamicPageList.collaborators import PageTitle, TitleResolver


class _Invalid:
    __slots__ = ()

    def __repr__(self) -> str:
        return "INVALID"

    def __bool__(self) -> bool:
        return False


INVALID: Final = _Invalid()

_TRUE_VALUES: Final = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final = frozenset({"0", "false", "no", "off", ""})

_HTML_TAG_RE = re.compile(r"<.*?html.*?>", re.IGNORECASE | re.DOTALL)
_NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def filter_boolean(raw: Any) -> bool | _Invalid:
    """Interpret a conventional boolean-like value.

    Args:
        raw: String, int or bool from the directive or a default.

    Returns:
        The boolean, or `INVALID` when the value is not boolean-like.
    """
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw != 0 if raw in (0, 1) else INVALID
    if raw is None:
        return False
    text = str(raw).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    return INVALID


def strip_html_tags(text: str) -> str:
    """Remove tag-like substrings mentioning "html", e.g. ``<html>`` or ``</HTML >``."""
    return _HTML_TAG_RE.sub("", text)


def is_numeric(raw: Any) -> bool:
    if isinstance(raw, bool):
        return False
    if isinstance(raw, (int, float)):
        return True
    return bool(_NUMERIC_RE.match(str(raw)))


def coerce_integer(raw: Any, default: Any = None) -> int | _Invalid:
    """Truncate a numeric value toward zero.

    Args:
        raw: Raw option.
        default: Fallback used when `raw` is not numeric.

    Returns:
        The integer, the integer form of `default`, or `INVALID`.
    """
    if is_numeric(raw):
        try:
            return int(float(raw))
        except OverflowError:
            return INVALID
    if default is not None and is_numeric(default):
        return int(float(default))
    return INVALID


def resolve_page_name_list(
    raw: str,
    *,
    must_exist: bool,
    titles: TitleResolver,
) -> list[PageTitle] | list[str] | _Invalid:
    """Split a ``|``-separated page list.

    Entries are trimmed, lose one trailing backslash and are skipped when
    empty. With `must_exist`, every entry must parse as a title and a single
    failure invalidates the list.
    """
    pages: list[Any] = []
    for entry in str(raw).strip().split("|"):
        page = entry.strip()
        if page.endswith("\\"):
            page = page[:-1].rstrip()
        if not page:
            continue
        if must_exist:
            title = titles.resolve_title(page)
            if title is None:
                return INVALID
            pages.append(title)
        else:
            pages.append(page)
    return pages


def to_db_key(text: str) -> str:
    return text.replace(" ", "_")


def replace_newline_escapes(text: str) -> str:
    """Turn the two characters ``\\n`` into a real line break."""
    return text.replace("\\n", "\n")

