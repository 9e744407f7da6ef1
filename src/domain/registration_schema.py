"""
Registration schema - Composite validation over the registration form.

Field rules run first, then schema-level rules that depend on sibling
fields. Each failure is attached to a named field so the form can show it
inline. Validation is pure: it can run on every keystroke.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from .password_policy import PasswordPolicy

FIELD_EMAIL = "email"
FIELD_PASSWORD = "password"
FIELD_NAME = "name"
FIELD_CONFIRM_PASSWORD = "confirmPassword"

FORM_FIELDS = (FIELD_EMAIL, FIELD_PASSWORD, FIELD_NAME, FIELD_CONFIRM_PASSWORD)

EMAIL_INVALID = "Invalid email"
NAME_REQUIRED = "Name is required"
CONFIRM_PASSWORD_REQUIRED = "Confirm Password is required"
PASSWORDS_DONT_MATCH = "Passwords don't match"

# local-part@domain where the domain contains a dot, no whitespace
_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True)
class RegistrationInput:
    """Everything the user typed into the registration form."""

    email: str
    password: str
    name: str
    confirm_password: str

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "RegistrationInput":
        """
        Build input from form field names.

        Raises:
            KeyError: If a form field is missing
            TypeError: If a form field is not a string
        """
        values = {}
        for name in FORM_FIELDS:
            value = form[name]
            if not isinstance(value, str):
                raise TypeError(f"Form field {name!r} must be a string, got {type(value).__name__}")
            values[name] = value
        return cls(
            email=values[FIELD_EMAIL],
            password=values[FIELD_PASSWORD],
            name=values[FIELD_NAME],
            confirm_password=values[FIELD_CONFIRM_PASSWORD],
        )


@dataclass(frozen=True)
class RegistrationPayload:
    """The registration data actually sent to the authentication service."""

    email: str
    password: str
    name: str

    def to_dict(self) -> dict[str, str]:
        return {"email": self.email, "password": self.password, "name": self.name}


def to_payload(data: RegistrationInput) -> RegistrationPayload:
    """Strip form-only fields (password confirmation) from the input."""
    return RegistrationPayload(email=data.email, password=data.password, name=data.name)


def is_valid_email(value: str) -> bool:
    return _EMAIL.fullmatch(value) is not None


FieldRule = Callable[[RegistrationInput], list[str]]


@dataclass(frozen=True)
class RegistrationSchema:
    """
    Validates a RegistrationInput into a mapping of field name to messages.

    An empty mapping means the input may be submitted.
    """

    password_policy: PasswordPolicy = field(default_factory=PasswordPolicy)

    def validate(self, data: RegistrationInput) -> dict[str, list[str]]:
        errors: dict[str, list[str]] = {}
        for name, rule in self._field_rules() + self._cross_field_rules():
            messages = rule(data)
            if messages:
                errors.setdefault(name, []).extend(messages)
        return errors

    def validate_field(self, data: RegistrationInput, name: str) -> list[str]:
        """
        Errors for a single field, for live feedback while typing.

        Raises:
            ValueError: If name is not a registration form field
        """
        if name not in FORM_FIELDS:
            raise ValueError(f"Unknown registration field: {name}")
        return self.validate(data).get(name, [])

    def is_valid(self, data: RegistrationInput) -> bool:
        return not self.validate(data)

    def _field_rules(self) -> list[tuple[str, FieldRule]]:
        return [
            (FIELD_EMAIL, self._check_email),
            (FIELD_PASSWORD, self._check_password),
            (FIELD_NAME, self._check_name),
            (FIELD_CONFIRM_PASSWORD, self._check_confirm_password),
        ]

    def _cross_field_rules(self) -> list[tuple[str, FieldRule]]:
        # Mismatch is reported on the confirmation, the field users fix
        return [(FIELD_CONFIRM_PASSWORD, self._check_passwords_match)]

    def _check_email(self, data: RegistrationInput) -> list[str]:
        return [] if is_valid_email(data.email) else [EMAIL_INVALID]

    def _check_password(self, data: RegistrationInput) -> list[str]:
        return self.password_policy.evaluate(data.password)

    def _check_name(self, data: RegistrationInput) -> list[str]:
        return [] if data.name.strip() else [NAME_REQUIRED]

    def _check_confirm_password(self, data: RegistrationInput) -> list[str]:
        return [] if data.confirm_password else [CONFIRM_PASSWORD_REQUIRED]

    def _check_passwords_match(self, data: RegistrationInput) -> list[str]:
        if not data.confirm_password or data.confirm_password == data.password:
            return []
        return [PASSWORDS_DONT_MATCH]
