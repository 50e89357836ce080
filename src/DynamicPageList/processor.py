"""Per-parameter validation and dispatch.

`ParameterProcessor.process` takes one ``(name, raw value)`` pair and either
commits a validated value to the `QuerySpecification` or reports rejection.
Custom parameters go to their handler; all others run the generic pipeline:

1. allowed-value check (case-insensitive)
2. lower-casing (unless case is preserved or the value is a page list)
3. HTML tag stripping
4. integer coercion
5. boolean filtering
6. timestamp normalization
7. page-name-list resolution (appends a group per directive line)
8. pattern match, the captured groups replacing the value
9. database key formatting

The first invalid stage rejects the parameter and nothing is committed.
"""

from __future__ import annotations

import re
from typing import Any, Mapping

from DynamicPageList.collaborators import WikiContext
from DynamicPageList.core.descriptor import ParameterDescriptor
from DynamicPageList.core.errors import ParameterPermissionError, StructuralError
from DynamicPageList.core.settings import EngineSettings
from DynamicPageList.core.specification import QuerySpecification
from DynamicPageList.handlers import HANDLERS, Handler, HandlerContext
from DynamicPageList.options import (
    INVALID,
    coerce_integer,
    filter_boolean,
    resolve_page_name_list,
    strip_html_tags,
    to_db_key,
)
from DynamicPageList.registry import ParameterRegistry
from DynamicPageList.utils.log import log


class ParameterProcessor:
    """Validate directive parameters into a query specification."""

    def __init__(
        self,
        registry: ParameterRegistry | None = None,
        *,
        wiki: WikiContext | None = None,
        settings: EngineSettings | None = None,
        handlers: Mapping[str, Handler] = HANDLERS,
    ) -> None:
        self.registry = registry or ParameterRegistry()
        self.wiki = wiki or WikiContext()
        self.settings = settings or EngineSettings()
        self._handlers = self._bind_handlers(handlers)
        self._patterns: dict[str, re.Pattern[str]] = {}
        for name in self.registry.names():
            descriptor = self.registry.descriptor_for(name)
            if descriptor is not None and descriptor.pattern:
                self._patterns[name] = re.compile(descriptor.pattern)

    def _bind_handlers(self, handlers: Mapping[str, Handler]) -> dict[str, Handler]:
        bound: dict[str, Handler] = {}
        for name in self.registry.names():
            descriptor = self.registry.descriptor_for(name)
            if descriptor is None or not descriptor.is_custom:
                continue
            handler = handlers.get(self.registry.canonical_name(name))
            if handler is None:
                raise ValueError(f"No handler registered for custom parameter: {name}")
            bound[name] = handler
        return bound

    def new_specification(self) -> QuerySpecification:
        """Create a specification seeded with registry defaults."""
        defaults = self.registry.defaults()
        spec = QuerySpecification(defaults)
        debug_level = defaults.get("debug")
        if debug_level is not None:
            self.wiki.diagnostics.set_verbosity(int(debug_level))
        return spec

    def process(self, spec: QuerySpecification, name: str, raw_value: Any) -> bool:
        """Validate one parameter and commit it to `spec`.

        Args:
            spec: Specification being built.
            name: Lower-case parameter name.
            raw_value: Option text as written in the directive.

        Returns:
            True when the value was accepted, False when it was rejected or
            the parameter is unknown.

        Raises:
            ParameterPermissionError: The caller lacks the parameter's permission.
            StructuralError: `name` is not a string.
        """
        if not isinstance(name, str):
            raise StructuralError(f"Parameter name must be a string, got {type(name).__name__}")
        descriptor = self.registry.descriptor_for(name)
        if descriptor is None:
            log.debug("Unknown parameter: %s", name)
            return False

        if descriptor.permission and not self.wiki.permissions.caller_has_capability(descriptor.permission):
            raise ParameterPermissionError(name, descriptor.permission)

        spec.mark_processed(name)
        option = "" if raw_value is None else str(raw_value)

        handler = self._handlers.get(name)
        if handler is not None:
            ctx = HandlerContext(spec=spec, name=name, descriptor=descriptor, wiki=self.wiki, settings=self.settings)
            accepted = handler(ctx, option)
        else:
            accepted = self._run_pipeline(spec, descriptor, option)

        if accepted:
            log.debug("Accepted %s=%r", name, option)
        return accepted

    def _run_pipeline(self, spec: QuerySpecification, descriptor: ParameterDescriptor, option: str) -> bool:
        value = self._coerce(spec, descriptor, option)
        if value is INVALID:
            return False

        spec.set(descriptor.name, value)
        if descriptor.sets_criteria:
            spec.mark_selection_criteria_found()
        if descriptor.open_ref_conflict:
            spec.mark_open_references_conflict()
        return True

    def _coerce(self, spec: QuerySpecification, descriptor: ParameterDescriptor, option: str) -> Any:
        if descriptor.values is not None and option.lower() not in descriptor.values:
            return INVALID

        value: Any = option
        if not descriptor.preserve_case and not descriptor.page_name_list:
            value = value.lower()

        if descriptor.strip_html:
            value = strip_html_tags(value)

        if descriptor.integer:
            value = coerce_integer(value, descriptor.default)
            if value is INVALID:
                return INVALID

        if descriptor.boolean:
            value = filter_boolean(value)
            if value is INVALID:
                return INVALID

        if descriptor.timestamp:
            value = self.wiki.timestamps.normalize_timestamp(value)
            if value is None:
                return INVALID

        if descriptor.page_name_list:
            pages = resolve_page_name_list(
                value,
                must_exist=descriptor.page_name_must_exist,
                titles=self.wiki.titles,
            )
            if pages is INVALID:
                return INVALID
            groups = spec.get(descriptor.name)
            value = [*groups, pages] if isinstance(groups, list) else [pages]

        pattern = self._patterns.get(descriptor.name)
        if pattern is not None:
            match = pattern.search(value)
            if match is None:
                return INVALID
            value = [group or "" for group in match.groups()]

        if descriptor.db_format:
            value = [to_db_key(v) for v in value] if isinstance(value, list) else to_db_key(value)

        return value
