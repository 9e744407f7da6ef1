"""
Logging error reporter adapter - Implements ErrorReporter protocol.

Writes the raw error of a failed submission, with traceback, to the
application log for diagnostics.
"""

import logging

logger = logging.getLogger(__name__)


class LoggingErrorReporter:
    """
    Implements ErrorReporter protocol via logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def report(self, error: BaseException) -> None:
        status_code = getattr(error, "status_code", None)
        logger.error(
            "Registration failure reported: %s (status=%s)",
            type(error).__name__,
            status_code,
            exc_info=(type(error), error, error.__traceback__),
        )
