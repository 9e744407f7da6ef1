"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the submission flow
requires from its collaborators. Adapters implement these protocols.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from .registration_schema import RegistrationPayload

# Opaque shapes agreed with the authentication service
User = Mapping[str, Any]
AuthTokens = Mapping[str, Any]


@dataclass(frozen=True)
class RegisteredAccount:
    """Successful registration response: the new user and session tokens."""

    user: User
    tokens: AuthTokens


class RegistrationEndpoint(Protocol):
    """Port interface for the remote registration call."""

    async def register(self, payload: RegistrationPayload) -> RegisteredAccount:
        """
        Create an account on the authentication service.

        Args:
            payload: Registration data without form-only fields

        Returns:
            The created user and its session tokens

        Raises:
            RegistrationServiceError: On connectivity, status, or business failures.
                The error's ``message`` carries the server-supplied text, if any.
        """
        ...


class SessionStore(Protocol):
    """Port interface for session establishment."""

    def login(self, user: User, tokens: AuthTokens) -> None:
        """
        Activate an authenticated session.

        The session is active when this returns.
        """
        ...


class Navigator(Protocol):
    """Port interface for view transitions."""

    def go_to(self, destination: str) -> None:
        """Request a transition to destination (fire-and-forget)."""
        ...


class ErrorReporter(Protocol):
    """Port interface for failure diagnostics."""

    def report(self, error: BaseException) -> None:
        """Receive the raw error of a failed submission."""
        ...
