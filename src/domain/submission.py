"""
Submission controller - Registration submit state machine.

Submission lifecycle
====================

    idle (pending=False) --submit--> pending (pending=True, last_error cleared)
    pending --endpoint success--> idle (last_error=None), session + navigation
    pending --endpoint failure--> idle (last_error=<message>)

A submit issued while pending is ignored. The guard is checked and set
before the first await, so concurrent submits on one event loop produce a
single endpoint call.

Service failures end here: they become ``last_error`` and a
SubmissionFailure, and are never re-raised. Validation failures raise
FormValidationError without touching the network. Anything else is a defect
and propagates.
"""

import logging
from dataclasses import dataclass, field

from .exceptions import FormValidationError
from .ports import AuthTokens, ErrorReporter, Navigator, RegistrationEndpoint, SessionStore, User
from .registration_schema import RegistrationInput, RegistrationSchema, to_payload

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"
DEFAULT_DESTINATION = "/dashboard"


@dataclass(frozen=True)
class SubmissionState:
    """Observable snapshot of the controller."""

    pending: bool = False
    last_error: str | None = None


@dataclass(frozen=True)
class SubmissionSuccess:
    user: User
    tokens: AuthTokens


@dataclass(frozen=True)
class SubmissionFailure:
    message: str


SubmissionResult = SubmissionSuccess | SubmissionFailure


def error_message(error: BaseException) -> str:
    """Server-supplied message of an error, or the generic fallback."""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return GENERIC_ERROR_MESSAGE


@dataclass
class SubmissionController:
    """
    Orchestrates one registration form's submissions.

    Owns its SubmissionState exclusively; callers observe it through
    ``state``.
    """

    endpoint: RegistrationEndpoint
    session_store: SessionStore
    navigator: Navigator
    error_reporter: ErrorReporter | None = None
    schema: RegistrationSchema = field(default_factory=RegistrationSchema)
    destination: str = DEFAULT_DESTINATION
    _state: SubmissionState = field(default_factory=SubmissionState, init=False, repr=False)

    @property
    def state(self) -> SubmissionState:
        return self._state

    def can_submit(self, terms_accepted: bool) -> bool:
        """Submit is offered only once the terms are accepted and nothing is in flight."""
        return terms_accepted and not self._state.pending

    async def submit(self, data: RegistrationInput) -> SubmissionResult | None:
        """
        Validate, register, then establish the session and navigate.

        Args:
            data: Registration form input

        Returns:
            SubmissionSuccess or SubmissionFailure; None if a submission
            was already in flight and this call was ignored

        Raises:
            FormValidationError: If the input fails the registration schema
        """
        if self._state.pending:
            logger.info("Registration submit ignored: submission already in flight")
            return None

        self._state = SubmissionState(pending=True, last_error=None)
        try:
            errors = self.schema.validate(data)
            if errors:
                raise FormValidationError(errors)

            payload = to_payload(data)
            logger.info("Submitting registration for %s", payload.email)
            try:
                account = await self.endpoint.register(payload)
            except Exception as error:
                return self._fail(error)

            self.session_store.login(account.user, account.tokens)
            self.navigator.go_to(self.destination)
            self._state = SubmissionState()
            logger.info("Registration complete for %s", payload.email)
            return SubmissionSuccess(user=account.user, tokens=account.tokens)
        finally:
            if self._state.pending:
                self._state = SubmissionState(last_error=self._state.last_error)

    def _fail(self, error: Exception) -> SubmissionFailure:
        message = error_message(error)
        logger.error("Registration error: %s", error)
        self._state = SubmissionState(last_error=message)
        if self.error_reporter is not None:
            try:
                self.error_reporter.report(error)
            except Exception:
                # Diagnostics must not mask the registration failure
                logger.exception("Error reporter failed while reporting %s", type(error).__name__)
        return SubmissionFailure(message=message)
