"""
Centralized exception hierarchy for porttracker.

All errors raised by the package derive from PortTrackerError, so callers
can catch a single base class at the outer boundary.

Hierarchy:
- PortTrackerError
  - ConfigError
  - ValidationError
  - ApiError              (the "remote API call failed" kind)
  - BindingError          (batch failure naming the first failing binding)
    - ExposeError
    - UnexposeError
"""

from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from .domain.entities import PortBinding


__all__ = [
    "API_ERROR_MESSAGE",
    "ApiError",
    "BindingError",
    "BindingFailure",
    "ConfigError",
    "ExposeError",
    "PortTrackerError",
    "UnexposeError",
    "ValidationError",
]


API_ERROR_MESSAGE = "remote API call failed"


class PortTrackerError(Exception):
    """Base exception for all porttracker errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


class ConfigError(PortTrackerError):
    """Configuration is missing or invalid."""


class ValidationError(PortTrackerError):
    """A binding or protocol key could not be parsed."""


class ApiError(PortTrackerError):
    """
    The Exposure Service did not confirm a call.

    Raised for non-2xx responses, transport errors and timeouts alike.
    The tracker treats every ApiError the same way for aggregation.
    """

    def __init__(
        self,
        detail: str = "",
        status_code: int | None = None,
        body: str = "",
        cause: Exception | None = None,
    ):
        message = f"{API_ERROR_MESSAGE}: {detail}" if detail else API_ERROR_MESSAGE
        super().__init__(message, cause=cause)
        self.detail = detail
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return self.message


BindingFailure = tuple["PortBinding", Exception]


class BindingError(PortTrackerError):
    """
    One or more bindings in a batch failed.

    The error names the first failure in processing order. Every failure,
    including the first, is kept in ``failures``.
    """

    action = "processing"

    def __init__(
        self,
        binding: PortBinding,
        cause: Exception,
        failures: list[BindingFailure] | None = None,
    ):
        super().__init__(
            f"failed {self.action} {binding} calling API: {cause}",
            cause=cause,
        )
        self.binding = binding
        self.failures: list[BindingFailure] = failures or [(binding, cause)]

    def __str__(self) -> str:
        return self.message

    @property
    def is_api_error(self) -> bool:
        """Check whether the first failure came from the Exposure Service."""
        return isinstance(self.cause, ApiError)

    @property
    def failed_bindings(self) -> list[PortBinding]:
        """All failing bindings, in processing order."""
        return [binding for binding, _ in self.failures]


class ExposeError(BindingError):
    """Exposing one or more bindings failed during add()."""

    action = "exposing"


class UnexposeError(BindingError):
    """Unexposing one or more bindings failed during remove()."""

    action = "unexposing"
