# -*- coding: utf-8 -*-
"""Logging Service Implementation.

Copyright 2026
SPDX-License-Identifier: Apache-2.0

Logger factory shared by every oauthgate module. Console output uses either a
plain text formatter or a JSON formatter depending on ``settings.log_format``;
an optional rotating file handler always writes JSON.
"""

# Standard
import logging
from logging.handlers import RotatingFileHandler
import os
from typing import Dict, Optional

# Third-Party
from pythonjsonlogger import jsonlogger

# First-Party
from oauthgate.config import settings
from oauthgate.models import LogLevel

# Create a text formatter
text_formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

# Create a JSON formatter
json_formatter = jsonlogger.JsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")

# Global handlers will be created lazily
_file_handler: Optional[RotatingFileHandler] = None
_text_handler: Optional[logging.StreamHandler] = None


def _get_file_handler() -> RotatingFileHandler:
    """Get or create the file handler.

    Returns:
        RotatingFileHandler: The file handler for JSON logging.

    Raises:
        ValueError: If file logging is disabled or no log file specified.
    """
    global _file_handler  # pylint: disable=global-statement
    if _file_handler is None:
        if not settings.log_to_file or not settings.log_file:
            raise ValueError("File logging is disabled or no log file specified")

        if settings.log_folder:
            os.makedirs(settings.log_folder, exist_ok=True)
            log_path = os.path.join(settings.log_folder, settings.log_file)
        else:
            log_path = settings.log_file

        _file_handler = RotatingFileHandler(log_path, maxBytes=1024 * 1024, backupCount=5)
        _file_handler.setFormatter(json_formatter)
    return _file_handler


def _get_text_handler() -> logging.StreamHandler:
    """Get or create the console handler.

    Returns:
        logging.StreamHandler: The stream handler for console logging.
    """
    global _text_handler  # pylint: disable=global-statement
    if _text_handler is None:
        _text_handler = logging.StreamHandler()
        _text_handler.setFormatter(json_formatter if settings.log_format == "json" else text_formatter)
    return _text_handler


class LoggingService:
    """Logger factory with level management.

    Loggers are registered per service instance; ``set_level`` applies to
    every logger the instance has handed out.
    """

    def __init__(self, level: Optional[LogLevel] = None):
        """Initialize logging service.

        Args:
            level: Starting level; defaults to ``settings.log_level``.
        """
        self._level = level or LogLevel(settings.log_level.lower())
        self._loggers: Dict[str, logging.Logger] = {}

    @property
    def level(self) -> LogLevel:
        """Current minimum level.

        Returns:
            LogLevel: The level applied to registered loggers.
        """
        return self._level

    def get_logger(self, name: str) -> logging.Logger:
        """Get or create logger instance.

        Args:
            name: Logger name

        Returns:
            Logger instance

        Examples:
            >>> from oauthgate.services.logging_service import LoggingService
            >>> service = LoggingService()
            >>> logger = service.get_logger('test')
            >>> import logging
            >>> isinstance(logger, logging.Logger)
            True
        """
        if name not in self._loggers:
            logger = logging.getLogger(name)

            if _get_text_handler() not in logger.handlers:
                logger.addHandler(_get_text_handler())

            if settings.log_to_file and settings.log_file:
                try:
                    handler = _get_file_handler()
                    if handler not in logger.handlers:
                        logger.addHandler(handler)
                except (OSError, ValueError) as e:
                    logging.getLogger(__name__).warning(f"Failed to add file handler to logger {name}: {e}")

            logger.setLevel(getattr(logging, self._level.upper()))

            self._loggers[name] = logger

        return self._loggers[name]

    def set_level(self, level: LogLevel) -> None:
        """Set minimum log level on all registered loggers.

        Args:
            level: New log level

        Examples:
            >>> from oauthgate.services.logging_service import LoggingService
            >>> from oauthgate.models import LogLevel
            >>> service = LoggingService()
            >>> service.set_level(LogLevel.DEBUG)
            >>> service.level is LogLevel.DEBUG
            True
        """
        self._level = level
        log_level = getattr(logging, level.upper())
        for logger in self._loggers.values():
            logger.setLevel(log_level)
