"""Interfaces to the wiki host, plus small in-memory implementations.

The processor never talks to a content store directly. Everything it needs
from the host (title parsing, namespace lookup, category tree walking,
timestamp parsing, request arguments, permissions, diagnostics) comes through
the protocols below, bundled into a `WikiContext`.

The static implementations are what the CLI and the tests use.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Mapping, Protocol, Sequence

from dateutil import parser as dt_parser

from DynamicPageList.utils.log import log, set_verbosity


@dataclass(frozen=True, slots=True)
class PageTitle:
    """A parsed page title.

    Attributes:
        namespace: Namespace index (0 is the main namespace).
        text: Canonical title text without namespace prefix, spaces kept.
        prefix: Namespace name as written in full titles ("" for main).
    """

    namespace: int
    text: str
    prefix: str = ""

    @property
    def full_text(self) -> str:
        return f"{self.prefix}:{self.text}" if self.prefix else self.text


class TitleResolver(Protocol):
    def resolve_title(self, text: str) -> PageTitle | None:
        """Parse `text` into a title, or None when it is not a valid title."""
        raise NotImplementedError

    def title_namespace(self, title: PageTitle) -> int:
        raise NotImplementedError

    def title_canonical_text(self, title: PageTitle) -> str:
        raise NotImplementedError


class NamespaceResolver(Protocol):
    def namespace_index(self, name: str) -> int | None:
        """Return the namespace index for a (localized) name, or None."""
        raise NotImplementedError


class CategoryTree(Protocol):
    def subcategories_of(self, category: str, depth: int) -> Sequence[str]:
        """Return subcategory names `depth` (1 or 2) levels below `category`."""
        raise NotImplementedError


class TimestampNormalizer(Protocol):
    def normalize_timestamp(self, text: str) -> str | None:
        """Return a 14-digit ``YYYYMMDDHHMMSS`` timestamp, or None if invalid."""
        raise NotImplementedError


class RequestContext(Protocol):
    def request_value(self, key: str, default: str = "") -> str:
        raise NotImplementedError


class PermissionChecker(Protocol):
    def caller_has_capability(self, name: str) -> bool:
        raise NotImplementedError


class Diagnostics(Protocol):
    def set_verbosity(self, level: int) -> None:
        raise NotImplementedError


DEFAULT_NAMESPACES: Mapping[str, int] = {
    "": 0,
    "Talk": 1,
    "User": 2,
    "User talk": 3,
    "Project": 4,
    "Project talk": 5,
    "File": 6,
    "File talk": 7,
    "MediaWiki": 8,
    "MediaWiki talk": 9,
    "Template": 10,
    "Template talk": 11,
    "Help": 12,
    "Help talk": 13,
    "Category": 14,
    "Category talk": 15,
}

_ILLEGAL_TITLE_CHARS = re.compile(r"[#<>\[\]|{}\x00-\x1f\x7f]")
_WS_RE = re.compile(r"[\s_]+")


def ucfirst(text: str) -> str:
    return text[:1].upper() + text[1:]


class StaticNamespaces:
    """Namespace lookup over a fixed name -> index table (case-insensitive)."""

    def __init__(self, namespaces: Mapping[str, int] | None = None) -> None:
        table = DEFAULT_NAMESPACES if namespaces is None else namespaces
        self._by_name = {self._fold(name): idx for name, idx in table.items()}
        self._names = {idx: name for name, idx in table.items()}

    @staticmethod
    def _fold(name: str) -> str:
        return _WS_RE.sub(" ", name).strip().lower()

    def namespace_index(self, name: str) -> int | None:
        return self._by_name.get(self._fold(name))

    def namespace_name(self, index: int) -> str:
        return self._names.get(index, "")


class SimpleTitleResolver:
    """Title parsing in the wiki's usual normalization rules.

    Underscores and runs of whitespace collapse to one space, the first
    letter is upper-cased, a known namespace prefix is split off, and titles
    containing characters that can never appear in a page name are rejected.
    """

    def __init__(self, namespaces: StaticNamespaces | None = None) -> None:
        self.namespaces = namespaces or StaticNamespaces()

    def resolve_title(self, text: str) -> PageTitle | None:
        value = _WS_RE.sub(" ", text or "").strip()
        if value.startswith(":"):
            value = value[1:].strip()
        if not value or _ILLEGAL_TITLE_CHARS.search(value):
            return None

        namespace = 0
        prefix = ""
        if ":" in value:
            head, tail = value.split(":", 1)
            index = self.namespaces.namespace_index(head)
            if index is not None and index != 0:
                namespace = index
                prefix = self.namespaces.namespace_name(index)
                value = tail.strip()
        if not value:
            return None
        return PageTitle(namespace=namespace, text=ucfirst(value), prefix=prefix)

    def title_namespace(self, title: PageTitle) -> int:
        return title.namespace

    def title_canonical_text(self, title: PageTitle) -> str:
        return title.text


class StaticCategoryTree:
    """Category tree backed by a category -> direct subcategories mapping."""

    def __init__(self, tree: Mapping[str, Iterable[str]] | None = None) -> None:
        self._tree = {self._key(k): [str(v) for v in vs] for k, vs in (tree or {}).items()}

    @staticmethod
    def _key(name: str) -> str:
        return ucfirst(name.strip().replace("_", " "))

    def subcategories_of(self, category: str, depth: int) -> Sequence[str]:
        direct = list(self._tree.get(self._key(category), ()))
        if depth < 2:
            return direct
        out: list[str] = []
        for child in direct:
            for grandchild in self._tree.get(self._key(child), ()):
                if grandchild not in out:
                    out.append(grandchild)
        return out


class DateutilTimestampNormalizer:
    """Parse free-form dates with dateutil into the 14-digit wiki form."""

    def normalize_timestamp(self, text: str) -> str | None:
        value = (text or "").strip()
        if not value:
            return None
        if value.isdigit() and len(value) == 14:
            return value
        try:
            parsed: datetime = dt_parser.parse(value)
        except (ValueError, OverflowError) as e:
            log.debug("Unparseable timestamp %r: %s", value, e)
            return None
        return parsed.strftime("%Y%m%d%H%M%S")


@dataclass(slots=True)
class MappingRequest:
    """Request arguments from a plain mapping."""

    values: Mapping[str, str] = field(default_factory=dict)

    def request_value(self, key: str, default: str = "") -> str:
        return str(self.values.get(key, default))


@dataclass(slots=True)
class StaticPermissions:
    """Capability check against a fixed set of granted rights."""

    granted: frozenset[str] = frozenset()

    def caller_has_capability(self, name: str) -> bool:
        return name in self.granted


class LoggingDiagnostics:
    """Route directive debug levels to the package logger."""

    def __init__(self) -> None:
        self.level: int | None = None

    def set_verbosity(self, level: int) -> None:
        self.level = level
        set_verbosity(level)


@dataclass(slots=True)
class WikiContext:
    """All host collaborators needed to process one directive."""

    titles: TitleResolver = field(default_factory=SimpleTitleResolver)
    namespaces: NamespaceResolver = field(default_factory=StaticNamespaces)
    categories: CategoryTree = field(default_factory=StaticCategoryTree)
    timestamps: TimestampNormalizer = field(default_factory=DateutilTimestampNormalizer)
    request: RequestContext = field(default_factory=MappingRequest)
    permissions: PermissionChecker = field(default_factory=StaticPermissions)
    diagnostics: Diagnostics = field(default_factory=LoggingDiagnostics)
