"""Error types raised while turning a directive into a query specification."""

from __future__ import annotations


class DirectiveError(ValueError):
    """Base class for directive processing failures."""


class ParameterValidationError(DirectiveError):
    """A single ``name=value`` pair was rejected.

    Only raised when the caller's policy is to abort on rejected values;
    the processor itself reports these as ``False``.
    """

    def __init__(self, name: str, value: str, reason: str = "invalid value") -> None:
        super().__init__(f"{name}: {reason} ({value!r})")
        self.name = name
        self.value = value
        self.reason = reason


class UnknownParameterError(ParameterValidationError):
    """The parameter name is not registered at the active richness level."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(name, value, reason="unknown parameter")


class ParameterPermissionError(DirectiveError):
    """The caller lacks the capability a parameter requires.

    Fatal: the whole directive is aborted.
    """

    def __init__(self, name: str, permission: str) -> None:
        super().__init__(f"{name} requires the '{permission}' permission")
        self.name = name
        self.permission = permission


class StructuralError(TypeError):
    """Caller programming error, e.g. a non-list parameter batch."""
