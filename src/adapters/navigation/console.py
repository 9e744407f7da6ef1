"""
Console navigator adapter - Implements Navigator protocol.

This module provides a console-based implementation of the domain's
navigator port. It logs each requested view transition and remembers
the latest destination so the form backend can hand it to the browser.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleNavigator:
    """
    Implements Navigator protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self.history: list[str] = []

    def go_to(self, destination: str) -> None:
        """
        Record and log a view transition.

        Args:
            destination: Route path to navigate to (e.g. "/dashboard")
        """
        self.history.append(destination)
        logger.info("[NAVIGATE] %s", destination)

    @property
    def current(self) -> str | None:
        return self.history[-1] if self.history else None
