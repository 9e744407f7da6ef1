"""
HTTP registration adapter - Implements RegistrationEndpoint protocol.

This module calls the remote authentication service with httpx.
Every failure is translated into RegistrationServiceError so the
submission controller only has one error type to surface:

- Transport errors (connect, timeout): no message, generic text is shown
- Non-2xx responses: the body's ``message`` field, when the service sends one
- 2xx responses missing ``user`` or ``tokens``: no message
"""

import logging
from typing import Any

import httpx

from src.domain.exceptions import RegistrationServiceError
from src.domain.ports import RegisteredAccount
from src.domain.registration_schema import RegistrationPayload

logger = logging.getLogger(__name__)


def _json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _server_message(body: Any) -> str | None:
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class HttpRegistrationEndpoint:
    """
    Implements RegistrationEndpoint protocol via httpx.AsyncClient.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The client is owned by the caller (created and closed in app lifespan).
    """

    def __init__(self, client: httpx.AsyncClient, register_path: str = "/auth/register") -> None:
        """
        Initialize endpoint with a shared HTTP client.

        Args:
            client: AsyncClient configured with the auth service base URL and timeout
            register_path: Path of the registration route on the auth service
        """
        self._client = client
        self._register_path = register_path

    async def register(self, payload: RegistrationPayload) -> RegisteredAccount:
        """
        POST the payload and parse the ``{user, tokens}`` envelope.

        Raises:
            RegistrationServiceError: On any transport, status, or envelope failure
        """
        try:
            response = await self._client.post(self._register_path, json=payload.to_dict())
        except httpx.HTTPError as exc:
            logger.warning("Auth service unreachable: %s", exc)
            raise RegistrationServiceError() from exc

        body = _json_body(response)
        if response.is_error:
            logger.warning("Auth service rejected registration: status=%s", response.status_code)
            raise RegistrationServiceError(_server_message(body), status_code=response.status_code)

        if not (
            isinstance(body, dict)
            and isinstance(body.get("user"), dict)
            and isinstance(body.get("tokens"), dict)
        ):
            logger.warning("Auth service returned malformed registration response")
            raise RegistrationServiceError(status_code=response.status_code)

        return RegisteredAccount(user=body["user"], tokens=body["tokens"])
