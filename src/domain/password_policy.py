"""
Password policy - Declarative complexity rules for new passwords.

Rules are evaluated in declared order and all of them report, except the
emptiness rule which stops evaluation: checking strength on an empty string
would only repeat the same complaint.

This is a UX convenience; the authentication service enforces its own policy.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, field

PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_WEAK = "Must contain at least 8 characters with both letters and numbers"
PASSWORD_NEEDS_SPECIAL = "Add at least 1 special character for better security"

MIN_LENGTH = 8
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

_DIGIT = re.compile(r"[0-9]")
_LETTER = re.compile(r"[a-zA-Z]")
_SPECIAL = re.compile("[" + re.escape(SPECIAL_CHARACTERS) + "]")


def is_strong(candidate: str) -> bool:
    """Length of at least 8 with at least one ASCII digit and one ASCII letter."""
    return (
        len(candidate) >= MIN_LENGTH
        and _DIGIT.search(candidate) is not None
        and _LETTER.search(candidate) is not None
    )


def has_special_character(candidate: str) -> bool:
    return _SPECIAL.search(candidate) is not None


@dataclass(frozen=True)
class PasswordRule:
    """A named predicate and the message emitted when it does not hold."""

    name: str
    check: Callable[[str], bool]
    message: str


DEFAULT_RULES = (
    PasswordRule("strength", is_strong, PASSWORD_TOO_WEAK),
    PasswordRule("special_character", has_special_character, PASSWORD_NEEDS_SPECIAL),
)


@dataclass(frozen=True)
class PasswordPolicy:
    """
    Evaluates a password candidate against an ordered rule set.

    The emptiness check always runs first and is not part of ``rules``;
    an empty candidate yields exactly one message.
    """

    rules: tuple[PasswordRule, ...] = field(default=DEFAULT_RULES)

    def evaluate(self, candidate: str) -> list[str]:
        """
        Return violation messages for the candidate.

        Args:
            candidate: Raw password as typed

        Returns:
            Messages in rule order; empty list means the password is acceptable
        """
        if len(candidate) == 0:
            return [PASSWORD_REQUIRED]
        return [rule.message for rule in self.rules if not rule.check(candidate)]

    def is_valid(self, candidate: str) -> bool:
        return not self.evaluate(candidate)
