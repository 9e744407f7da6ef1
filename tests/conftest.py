"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Valid and invalid registration input
- Registered account responses
- Mocked collaborator ports
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.domain.ports import RegisteredAccount
from src.domain.registration_schema import RegistrationInput

VALID_FORM = {
    "email": "a@b.com",
    "password": "Abcdefg1!",
    "name": "Jo",
    "confirmPassword": "Abcdefg1!",
}

INVALID_FORM = {
    "email": "bad",
    "password": "short",
    "name": "",
    "confirmPassword": "",
}

USER = {"id": "u-1", "email": "a@b.com", "name": "Jo"}
TOKENS = {"accessToken": "access-token", "refreshToken": "refresh-token"}


@pytest.fixture
def valid_input() -> RegistrationInput:
    return RegistrationInput.from_form(VALID_FORM)


@pytest.fixture
def invalid_input() -> RegistrationInput:
    return RegistrationInput.from_form(INVALID_FORM)


@pytest.fixture
def account() -> RegisteredAccount:
    return RegisteredAccount(user=USER, tokens=TOKENS)


@pytest.fixture
def endpoint(account: RegisteredAccount) -> Mock:
    """Registration endpoint whose register() succeeds by default."""
    mock = Mock()
    mock.register = AsyncMock(return_value=account)
    return mock


@pytest.fixture
def session_store() -> Mock:
    return Mock()


@pytest.fixture
def navigator() -> Mock:
    return Mock()
