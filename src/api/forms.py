"""
Form registry - One submission controller per open registration form.

Each browser form gets its own controller, session store, and navigator,
so the at-most-one-in-flight guard applies per form.
"""

import logging
import secrets
from dataclasses import dataclass

from src.adapters.navigation.console import ConsoleNavigator
from src.adapters.session.memory import InMemorySessionStore
from src.domain.ports import ErrorReporter, RegistrationEndpoint
from src.domain.submission import DEFAULT_DESTINATION, SubmissionController

logger = logging.getLogger(__name__)


class UnknownForm(KeyError):
    """No registration form is open under this id."""


@dataclass
class FormSession:
    form_id: str
    controller: SubmissionController
    session_store: InMemorySessionStore
    navigator: ConsoleNavigator


class FormRegistry:
    """Creates and looks up registration forms."""

    def __init__(
        self,
        endpoint: RegistrationEndpoint,
        destination: str = DEFAULT_DESTINATION,
        error_reporter: ErrorReporter | None = None,
    ) -> None:
        self._endpoint = endpoint
        self._destination = destination
        self._error_reporter = error_reporter
        self._forms: dict[str, FormSession] = {}

    def open(self) -> FormSession:
        form_id = secrets.token_hex(16)
        session_store = InMemorySessionStore()
        navigator = ConsoleNavigator()
        controller = SubmissionController(
            endpoint=self._endpoint,
            session_store=session_store,
            navigator=navigator,
            error_reporter=self._error_reporter,
            destination=self._destination,
        )
        form = FormSession(form_id, controller, session_store, navigator)
        self._forms[form_id] = form
        logger.info("Opened registration form %s", form_id)
        return form

    def get(self, form_id: str) -> FormSession:
        """
        Raises:
            UnknownForm: If no form is open under form_id
        """
        try:
            return self._forms[form_id]
        except KeyError:
            raise UnknownForm(form_id) from None

    def close(self, form_id: str) -> None:
        self._forms.pop(form_id, None)

    def __len__(self) -> int:
        return len(self._forms)
