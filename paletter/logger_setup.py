"""
Logging setup for applications embedding paletter.

The library itself only creates module loggers; call ``ConfigureLogger``
once from the application to see their output.
"""

import logging
import os
from logging.handlers import RotatingFileHandler


class ConfigureLogger:
    """
    Attach a console handler and, optionally, a rotating file handler to
    the ``paletter`` logger.
    """

    def __init__(
        self,
        level: int | str = logging.INFO,
        log_file: str | None = None,
        file_level: int | str = logging.WARNING,
        max_bytes: int = 1_000_000,
        backup_count: int = 3,
        logger_name: str = "paletter",
    ):
        self.logger = logging.getLogger(logger_name)
        self.logger.setLevel(logging.DEBUG)  # handlers filter

        self._setup_console_handler(level)
        if log_file:
            self._setup_file_handler(log_file, file_level, max_bytes, backup_count)

    def _setup_console_handler(self, level):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        self.logger.addHandler(console_handler)

    def _setup_file_handler(self, path, level, max_bytes, backup_count):
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        file_handler = RotatingFileHandler(path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        self.logger.addHandler(file_handler)

    @classmethod
    def from_config(cls, config: dict) -> "ConfigureLogger":
        section = config.get("logging", {})
        return cls(level=str(section.get("level", "INFO")).upper(), log_file=section.get("file"))
