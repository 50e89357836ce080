"""Parser domain configuration: what to do with rejected parameters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DynamicPageList.config.common import expect_str, get_section

_ALLOWED_POLICIES = {"warn", "abort"}


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Store validated failure policies."""

    on_unknown_parameter: str
    on_invalid_value: str


def load_parser(raw: Mapping[str, Any]) -> ParserConfig:
    """Load parser policies; the section is optional and defaults to warn."""
    section = get_section(raw, "parser", required=False)
    return ParserConfig(
        on_unknown_parameter=expect_str(
            section.get("on_unknown_parameter", "warn"), "parser.on_unknown_parameter"
        ).lower(),
        on_invalid_value=expect_str(section.get("on_invalid_value", "warn"), "parser.on_invalid_value").lower(),
    )


def check_parser(config: ParserConfig) -> None:
    """Validate parser policies.

    Args:
        config: Parsed parser configuration.

    Raises:
        ValueError: If a policy is not warn/abort.
    """
    if config.on_unknown_parameter not in _ALLOWED_POLICIES:
        raise ValueError(f"parser.on_unknown_parameter must be one of {sorted(_ALLOWED_POLICIES)}")
    if config.on_invalid_value not in _ALLOWED_POLICIES:
        raise ValueError(f"parser.on_invalid_value must be one of {sorted(_ALLOWED_POLICIES)}")
