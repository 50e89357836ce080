"""Factory functions for CLI component creation.

Centralizes component instantiation so the runner only deals with an
`AppConfig` and the per-invocation request arguments and rights.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from DynamicPageList.collaborators import (
    MappingRequest,
    SimpleTitleResolver,
    StaticCategoryTree,
    StaticNamespaces,
    StaticPermissions,
    WikiContext,
)
from DynamicPageList.config import AppConfig
from DynamicPageList.directive import DirectiveParser
from DynamicPageList.processor import ParameterProcessor
from DynamicPageList.registry import ParameterRegistry


def create_wiki_context(
    config: AppConfig,
    *,
    request: Mapping[str, str] | None = None,
    granted: Iterable[str] = (),
) -> WikiContext:
    """Create host collaborators backed by the configured static tables.

    Args:
        config: Application configuration.
        request: Request arguments visible to ``scroll``.
        granted: Rights held by the caller.

    Returns:
        A WikiContext for one directive.
    """
    namespaces = StaticNamespaces(config.wiki.namespaces)
    return WikiContext(
        titles=SimpleTitleResolver(namespaces),
        namespaces=namespaces,
        categories=StaticCategoryTree(config.wiki.category_tree),
        request=MappingRequest(dict(request or {})),
        permissions=StaticPermissions(frozenset(granted)),
    )


def create_directive_parser(config: AppConfig, wiki: WikiContext) -> DirectiveParser:
    """Create a directive parser for the configured richness level and policies."""
    processor = ParameterProcessor(
        ParameterRegistry(richness=config.wiki.functional_richness),
        wiki=wiki,
        settings=config.wiki.engine_settings(),
    )
    return DirectiveParser(
        processor=processor,
        on_unknown_parameter=config.parser.on_unknown_parameter,
        on_invalid_value=config.parser.on_invalid_value,
    )
