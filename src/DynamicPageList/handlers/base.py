from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from DynamicPageList.collaborators import WikiContext
from DynamicPageList.core.descriptor import ParameterDescriptor
from DynamicPageList.core.settings import EngineSettings
from DynamicPageList.core.specification import QuerySpecification


@dataclass(slots=True)
class HandlerContext:
    """Everything a custom handler may read or write for one parameter.

    Attributes:
        spec: Specification being built.
        name: Parameter name as written in the directive (may be an alias).
        descriptor: Registry entry for `name`.
        wiki: Host collaborators.
        settings: Site-wide limits.
    """

    spec: QuerySpecification
    name: str
    descriptor: ParameterDescriptor
    wiki: WikiContext
    settings: EngineSettings


# A handler validates the raw option and commits it, returning False on rejection.
# Handlers must not write anything before they know the option is acceptable.
Handler = Callable[[HandlerContext, str], bool]


def put(items: list[str], index: int, value: str) -> None:
    """Assign `items[index]`, padding with empty strings as needed."""
    while len(items) <= index:
        items.append("")
    items[index] = value
