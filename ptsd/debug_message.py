"""Reporting of graphics-driver debug messages through the framework log."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, Tuple

from .logger import LOGGER_NAME

_log = logging.getLogger(LOGGER_NAME)


class DebugSource(IntEnum):
    API = 0x8246
    WINDOW_SYSTEM = 0x8247
    SHADER_COMPILER = 0x8248
    THIRD_PARTY = 0x8249
    APPLICATION = 0x824A
    OTHER = 0x824B


class DebugType(IntEnum):
    ERROR = 0x824C
    DEPRECATED_BEHAVIOR = 0x824D
    UNDEFINED_BEHAVIOR = 0x824E
    PORTABILITY = 0x824F
    PERFORMANCE = 0x8250
    OTHER = 0x8251
    MARKER = 0x8268


class DebugSeverity(IntEnum):
    HIGH = 0x9146
    MEDIUM = 0x9147
    LOW = 0x9148
    NOTIFICATION = 0x826B


_SOURCE_NAMES = {
    DebugSource.API: "API",
    DebugSource.WINDOW_SYSTEM: "WINDOW SYSTEM",
    DebugSource.SHADER_COMPILER: "SHADER COMPILER",
    DebugSource.THIRD_PARTY: "THIRD PARTY",
    DebugSource.APPLICATION: "APPLICATION",
}

_TYPE_NAMES = {
    DebugType.ERROR: "ERROR",
    DebugType.DEPRECATED_BEHAVIOR: "DEPRECATED BEHAVIOR",
    DebugType.UNDEFINED_BEHAVIOR: "UNDEFINED BEHAVIOR",
    DebugType.PORTABILITY: "PORTABILITY",
    DebugType.PERFORMANCE: "PERFORMANCE",
    DebugType.OTHER: "OTHER",
    DebugType.MARKER: "MARKER",
}

_SEVERITY_NAMES = {
    DebugSeverity.HIGH: "HIGH",
    DebugSeverity.MEDIUM: "MEDIUM",
    DebugSeverity.LOW: "LOW",
    DebugSeverity.NOTIFICATION: "NOTIFICATION",
}

# Log level and header for each severity; HIGH and MEDIUM carry a colon.
_SEVERITY_LOGGING = {
    DebugSeverity.HIGH: (logging.ERROR, "OpenGL Severity: {}"),
    DebugSeverity.MEDIUM: (logging.WARNING, "OpenGL Severity: {}"),
    DebugSeverity.LOW: (logging.INFO, "OpenGL Severity {}"),
    DebugSeverity.NOTIFICATION: (logging.DEBUG, "OpenGL Severity {}"),
}

_UNKNOWN = "UNKNOWN"


def describe_debug_message(source: int, type_: int, severity: int) -> Tuple[str, str, str]:
    """Readable names for a message's source, type and severity."""
    return (
        _SOURCE_NAMES.get(source, _UNKNOWN),
        _TYPE_NAMES.get(type_, _UNKNOWN),
        _SEVERITY_NAMES.get(severity, _UNKNOWN),
    )


def debug_message_callback(
    source: int,
    type_: int,
    id_: int,
    severity: int,
    length: int,
    message: Any,
    data: Any,
) -> None:
    """Log a driver debug message at the level its severity calls for.

    ``length`` and ``data`` are accepted to match the driver's signature
    and otherwise ignored.
    """
    source_name, type_name, severity_name = describe_debug_message(source, type_, severity)
    if isinstance(message, (bytes, bytearray)):
        message = bytes(message).decode("utf-8", errors="replace")

    level, header = _SEVERITY_LOGGING.get(
        severity, (logging.DEBUG, "OpenGL Severity Unknown")
    )
    _log.log(level, "%s", header.format(severity_name))
    _log.log(level, " ID: %s", id_)
    _log.log(level, " Source: %s", source_name)
    _log.log(level, " Type: %s", type_name)
    _log.log(level, " Message: %s", message)