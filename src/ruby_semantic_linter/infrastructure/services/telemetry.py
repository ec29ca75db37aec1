"""TelemetryPort over the standard logging module."""

import logging

LOGGER_NAME = "ruby_semantic_linter"


class LoggingTelemetry:
    """Progress at DEBUG, problems at WARNING and ERROR, all on one named logger."""

    def __init__(self, name: str = LOGGER_NAME) -> None:
        self.logger = logging.getLogger(name)

    def step(self, message: str) -> None:
        self.logger.debug(message)

    def warning(self, message: str) -> None:
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.logger.error(message)
