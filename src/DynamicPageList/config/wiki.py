"""Wiki domain configuration: site limits and the static host tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DynamicPageList.collaborators import DEFAULT_NAMESPACES
from DynamicPageList.config.common import (
    expect_bool,
    expect_int,
    expect_mapping,
    expect_str,
    expect_str_list,
    get_required_value,
    get_section,
)
from DynamicPageList.core.settings import EngineSettings
from DynamicPageList.registry import MAX_RICHNESS


@dataclass(frozen=True, slots=True)
class WikiConfig:
    """Store validated wiki limits and lookup tables."""

    functional_richness: int
    max_result_count: int
    allow_unlimited_results: bool
    allowed_namespaces: tuple[str, ...] | None
    article_label: str
    namespaces: Mapping[str, int]
    category_tree: Mapping[str, tuple[str, ...]]

    def engine_settings(self) -> EngineSettings:
        return EngineSettings(
            max_result_count=self.max_result_count,
            allow_unlimited_results=self.allow_unlimited_results,
            allowed_namespaces=self.allowed_namespaces,
            article_label=self.article_label,
        )


def load_wiki(raw: Mapping[str, Any]) -> WikiConfig:
    """Load wiki domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed wiki configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "wiki", required=True)

    allowed_raw = section.get("allowed_namespaces")
    allowed = None
    if allowed_raw is not None:
        allowed = tuple(expect_str_list(allowed_raw, "wiki.allowed_namespaces"))

    return WikiConfig(
        functional_richness=expect_int(
            get_required_value(section, "functional_richness", "wiki.functional_richness"),
            "wiki.functional_richness",
        ),
        max_result_count=expect_int(
            get_required_value(section, "max_result_count", "wiki.max_result_count"),
            "wiki.max_result_count",
        ),
        allow_unlimited_results=expect_bool(
            get_required_value(section, "allow_unlimited_results", "wiki.allow_unlimited_results"),
            "wiki.allow_unlimited_results",
        ),
        allowed_namespaces=allowed,
        article_label=expect_str(section.get("article_label", "Article"), "wiki.article_label"),
        namespaces=_parse_namespaces(section.get("namespaces")),
        category_tree=_parse_category_tree(section.get("category_tree")),
    )


def check_wiki(config: WikiConfig) -> None:
    """Validate wiki domain constraints.

    Args:
        config: Parsed wiki configuration.

    Raises:
        ValueError: If values violate wiki constraints.
    """
    if not 0 <= config.functional_richness <= MAX_RICHNESS:
        raise ValueError(f"wiki.functional_richness must be between 0 and {MAX_RICHNESS}")
    if config.max_result_count <= 0:
        raise ValueError("wiki.max_result_count must be positive")
    if not config.article_label.strip():
        raise ValueError("wiki.article_label must not be empty")
    if config.allowed_namespaces is not None:
        unknown = [name for name in config.allowed_namespaces if name not in config.namespaces]
        if unknown:
            raise ValueError(f"wiki.allowed_namespaces has unknown namespaces: {unknown}")


def _parse_namespaces(value: Any) -> Mapping[str, int]:
    if value is None:
        return dict(DEFAULT_NAMESPACES)
    table = expect_mapping(value, "wiki.namespaces")
    return {name: expect_int(idx, f"wiki.namespaces.{name}") for name, idx in table.items()}


def _parse_category_tree(value: Any) -> Mapping[str, tuple[str, ...]]:
    if value is None:
        return {}
    tree = expect_mapping(value, "wiki.category_tree")
    return {
        parent: tuple(expect_str_list(children, f"wiki.category_tree.{parent}"))
        for parent, children in tree.items()
    }
