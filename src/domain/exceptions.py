"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
validation and service failures without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class FormValidationError(RegistrationError):
    """Registration input failed one or more field rules."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(", ".join(sorted(errors)))
        self.errors = errors


class RegistrationServiceError(RegistrationError):
    """Registration endpoint call failed (connectivity, status, or business error)."""

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message or "Registration service error")
        self.message = message
        self.status_code = status_code
