"""
In-memory session adapter - Implements SessionStore protocol.

Holds the active user and tokens for one registration form. The form
backend keeps one store per form; a browser front end would persist the
tokens itself.
"""

import logging

from src.domain.ports import AuthTokens, User

logger = logging.getLogger(__name__)


class InMemorySessionStore:
    """
    Implements SessionStore protocol in process memory.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._user: User | None = None
        self._tokens: AuthTokens | None = None

    def login(self, user: User, tokens: AuthTokens) -> None:
        """Activate the session. Tokens are kept but never logged."""
        self._user = user
        self._tokens = tokens
        logger.info("[SESSION] Logged in user: %s", user.get("email", user.get("id")))

    def logout(self) -> None:
        self._user = None
        self._tokens = None

    @property
    def user(self) -> User | None:
        return self._user

    @property
    def tokens(self) -> AuthTokens | None:
        return self._tokens

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None
