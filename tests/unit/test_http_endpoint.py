"""
Unit tests for HttpRegistrationEndpoint adapter.

Uses httpx.MockTransport in place of the authentication service to verify
the request shape and the translation of every failure into
RegistrationServiceError.
"""

import json
from collections.abc import Callable

import httpx
import pytest

from src.adapters.http.auth_service import HttpRegistrationEndpoint
from src.domain.exceptions import RegistrationServiceError
from src.domain.ports import RegisteredAccount
from src.domain.registration_schema import RegistrationPayload
from tests.conftest import TOKENS, USER

PAYLOAD = RegistrationPayload(email="a@b.com", password="Abcdefg1!", name="Jo")

Handler = Callable[[httpx.Request], httpx.Response]


def make_client(handler: Handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), base_url="http://auth.test")


class TestRequest:
    """Tests for the outbound request."""

    @pytest.mark.asyncio
    async def test_posts_payload_as_json(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(201, json={"user": USER, "tokens": TOKENS})

        async with make_client(handler) as client:
            await HttpRegistrationEndpoint(client).register(PAYLOAD)

        assert len(requests) == 1
        assert requests[0].method == "POST"
        assert requests[0].url == "http://auth.test/auth/register"
        assert json.loads(requests[0].content) == {"email": "a@b.com", "password": "Abcdefg1!", "name": "Jo"}

    @pytest.mark.asyncio
    async def test_custom_register_path(self) -> None:
        paths: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            paths.append(request.url.path)
            return httpx.Response(200, json={"user": USER, "tokens": TOKENS})

        async with make_client(handler) as client:
            await HttpRegistrationEndpoint(client, register_path="/api/v2/signup").register(PAYLOAD)

        assert paths == ["/api/v2/signup"]


class TestSuccessResponse:
    """Tests for parsing the success envelope."""

    @pytest.mark.asyncio
    async def test_returns_user_and_tokens(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(201, json={"user": USER, "tokens": TOKENS})

        async with make_client(handler) as client:
            account = await HttpRegistrationEndpoint(client).register(PAYLOAD)

        assert account == RegisteredAccount(user=USER, tokens=TOKENS)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [{"user": USER}, {"tokens": TOKENS}, {"user": "u-1", "tokens": TOKENS}, [USER, TOKENS]],
    )
    async def test_malformed_envelope_raises(self, body: object) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=body)

        async with make_client(handler) as client:
            with pytest.raises(RegistrationServiceError) as exc_info:
                await HttpRegistrationEndpoint(client).register(PAYLOAD)

        assert exc_info.value.message is None
        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_non_json_success_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>ok</html>")

        async with make_client(handler) as client:
            with pytest.raises(RegistrationServiceError):
                await HttpRegistrationEndpoint(client).register(PAYLOAD)


class TestErrorResponse:
    """Tests for non-2xx responses."""

    @pytest.mark.asyncio
    async def test_server_message_is_carried(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(409, json={"message": "Email already registered"})

        async with make_client(handler) as client:
            with pytest.raises(RegistrationServiceError) as exc_info:
                await HttpRegistrationEndpoint(client).register(PAYLOAD)

        assert exc_info.value.message == "Email already registered"
        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(500, text="Internal Server Error"),
            httpx.Response(400, json={"message": 123}),
            httpx.Response(400, json={"message": ""}),
            httpx.Response(503, json={"detail": "Service unavailable"}),
        ],
    )
    async def test_missing_or_unusable_message(self, response: httpx.Response) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return response

        async with make_client(handler) as client:
            with pytest.raises(RegistrationServiceError) as exc_info:
                await HttpRegistrationEndpoint(client).register(PAYLOAD)

        assert exc_info.value.message is None
        assert exc_info.value.status_code == response.status_code


class TestTransportErrors:
    """Tests for connectivity failures."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error_type", [httpx.ConnectError, httpx.ReadTimeout])
    async def test_transport_error_raises_without_message(self, error_type: type[httpx.HTTPError]) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise error_type("unreachable", request=request)

        async with make_client(handler) as client:
            with pytest.raises(RegistrationServiceError) as exc_info:
                await HttpRegistrationEndpoint(client).register(PAYLOAD)

        assert exc_info.value.message is None
        assert exc_info.value.status_code is None
        assert isinstance(exc_info.value.__cause__, error_type)
