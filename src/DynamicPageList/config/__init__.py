from __future__ import annotations

"""Public configuration API for DynamicPageList."""

from DynamicPageList.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from DynamicPageList.config.parser import ParserConfig
from DynamicPageList.config.runtime import RuntimeConfig
from DynamicPageList.config.wiki import WikiConfig

__all__ = [
    "RuntimeConfig",
    "WikiConfig",
    "ParserConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
