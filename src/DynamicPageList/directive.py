"""End-to-end directive parsing.

Turns directive text into a frozen `QuerySpecification`::

    category=Animals
    namespace=Help|Project
    ordermethod=lastedit

Each line is one ``name=value`` pair. Names are lower-cased, pairs are put
in priority order and processed one by one; rejected pairs are either
collected as issues or abort the directive, depending on the policy.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from DynamicPageList.core.errors import ParameterValidationError, UnknownParameterError
from DynamicPageList.core.specification import QuerySpecification
from DynamicPageList.processor import ParameterProcessor
from DynamicPageList.sorter import sort_by_priority
from DynamicPageList.utils.log import log

Policy = Literal["warn", "abort"]

_OPEN_REFERENCES = "openreferences"


@dataclass(frozen=True, slots=True)
class DirectiveIssue:
    """A problem found in a directive that did not abort it.

    Attributes:
        kind: One of "unknown", "invalid", "syntax", "conflict", "noselection".
        message: Human-readable description.
        name: Parameter name when the issue is tied to one.
        value: Raw value when the issue is tied to one.
    """

    kind: str
    message: str
    name: str | None = None
    value: str | None = None


@dataclass(slots=True)
class ParseResult:
    """Outcome of parsing one directive."""

    spec: QuerySpecification
    issues: list[DirectiveIssue] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.issues


def tokenize(text: str) -> tuple[list[tuple[str, str]], list[DirectiveIssue]]:
    """Split directive text into ``(name, value)`` pairs.

    Blank lines are skipped. Lines without ``=`` are reported as syntax
    issues. Only the first ``=`` separates name and value.

    Args:
        text: Directive body.

    Returns:
        Pairs in written order and any syntax issues.
    """
    pairs: list[tuple[str, str]] = []
    issues: list[DirectiveIssue] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        if "=" not in stripped:
            issues.append(DirectiveIssue(kind="syntax", message=f"line {lineno}: expected name=value"))
            continue
        name, value = stripped.split("=", 1)
        pairs.append((name.strip().lower(), value.strip()))
    return pairs, issues


@dataclass(slots=True)
class DirectiveParser:
    """Fold a directive's parameters into a query specification.

    Attributes:
        processor: Per-parameter validator.
        on_unknown_parameter: "warn" records unknown names, "abort" raises.
        on_invalid_value: "warn" records rejected values, "abort" raises.
    """

    processor: ParameterProcessor = field(default_factory=ParameterProcessor)
    on_unknown_parameter: Policy = "warn"
    on_invalid_value: Policy = "warn"

    def parse(self, text: str) -> ParseResult:
        pairs, issues = tokenize(text)
        result = self.parse_pairs(pairs)
        result.issues[:0] = issues
        return result

    def parse_pairs(self, pairs: list[tuple[str, str]]) -> ParseResult:
        """Process already tokenized pairs.

        Raises:
            UnknownParameterError: Unknown name under the "abort" policy.
            ParameterValidationError: Rejected value under the "abort" policy.
            ParameterPermissionError: Missing capability (always fatal).
            StructuralError: `pairs` is not a list of pairs.
        """
        ordered = sort_by_priority(pairs)
        spec = self.processor.new_specification()
        issues: list[DirectiveIssue] = []

        for name, value in ordered:
            if self.processor.registry.descriptor_for(name) is None:
                if self.on_unknown_parameter == "abort":
                    raise UnknownParameterError(name, value)
                log.warning("Ignoring unknown parameter: %s", name)
                issues.append(
                    DirectiveIssue(kind="unknown", message=f"unknown parameter '{name}'", name=name, value=value)
                )
                continue

            if not self.processor.process(spec, name, value):
                if self.on_invalid_value == "abort":
                    raise ParameterValidationError(name, value)
                log.warning("Rejected %s=%r", name, value)
                issues.append(
                    DirectiveIssue(kind="invalid", message=f"invalid value for '{name}'", name=name, value=value)
                )

        issues.extend(check_consistency(spec))
        return ParseResult(spec=spec.freeze(), issues=issues)


def check_consistency(spec: QuerySpecification) -> list[DirectiveIssue]:
    """Report conflicts between parameters that were each valid on their own."""
    issues: list[DirectiveIssue] = []
    if spec.get(_OPEN_REFERENCES) and spec.is_open_references_conflict():
        issues.append(
            DirectiveIssue(
                kind="conflict",
                message="openreferences cannot be combined with category, title or ordering selection",
                name=_OPEN_REFERENCES,
            )
        )
    if not spec.is_selection_criteria_found():
        issues.append(DirectiveIssue(kind="noselection", message="no selection criteria given"))
    return issues
