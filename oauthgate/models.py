# -*- coding: utf-8 -*-
"""Location: ./oauthgate/models.py
Copyright 2026
SPDX-License-Identifier: Apache-2.0

Shared enums used across oauthgate.
"""

# Standard
from enum import Enum


class LogLevel(str, Enum):
    """Log severity levels understood by the logging service.

    Examples:
        >>> LogLevel.INFO.upper()
        'INFO'
        >>> LogLevel("warning") is LogLevel.WARNING
        True
    """

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"
