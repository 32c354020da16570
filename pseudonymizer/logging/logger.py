import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging for the pseudonymization engine.

    Records go to stderr by default: stdout carries anonymized text when the
    engine runs from the command line. Raw entity text is only ever passed to
    ``debug`` so that production log levels never contain PII.
    """

    _logger: logging.Logger = logging.getLogger("pseudonymizer")

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach a single stream handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def debug_enabled(cls) -> bool:
        """Whether debug records would be emitted (guards costly formatting)."""
        return cls._logger.isEnabledFor(logging.DEBUG)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
