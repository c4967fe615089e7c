import logging
from enum import IntEnum

LOGGER = logging.getLogger(__name__)


class Severity(IntEnum):
    TRANSACTION = 1
    ADDON = 2


class ErrorReporter:

    def report(self, message: str, code: str, severity: Severity):
        raise NotImplementedError(f"[{self.__class__.__name__}] report() must be implemented")


class LoggingErrorReporter(ErrorReporter):
    """Surfaces errors through the log. Nothing is kept once the record is emitted."""

    def __init__(self, logger: logging.Logger = LOGGER):
        self.logger = logger

    def report(self, message: str, code: str, severity: Severity):
        self.logger.error(f'[{code}] ({severity.name}) {message}')
