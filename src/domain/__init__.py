"""
Domain layer - Pure registration logic with zero framework imports.

This package contains the registration form's validation rules and the
submission state machine. It defines its own port interfaces for the
authentication service, session, and navigation collaborators.
"""

from .exceptions import FormValidationError, RegistrationError, RegistrationServiceError
from .password_policy import PasswordPolicy, PasswordRule
from .ports import (
    ErrorReporter,
    Navigator,
    RegisteredAccount,
    RegistrationEndpoint,
    SessionStore,
)
from .registration_schema import (
    RegistrationInput,
    RegistrationPayload,
    RegistrationSchema,
    to_payload,
)
from .submission import (
    SubmissionController,
    SubmissionFailure,
    SubmissionResult,
    SubmissionState,
    SubmissionSuccess,
)

__all__ = [
    "ErrorReporter",
    "FormValidationError",
    "Navigator",
    "PasswordPolicy",
    "PasswordRule",
    "RegisteredAccount",
    "RegistrationEndpoint",
    "RegistrationError",
    "RegistrationInput",
    "RegistrationPayload",
    "RegistrationSchema",
    "RegistrationServiceError",
    "SessionStore",
    "SubmissionController",
    "SubmissionFailure",
    "SubmissionResult",
    "SubmissionState",
    "SubmissionSuccess",
    "to_payload",
]
