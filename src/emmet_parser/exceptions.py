"""Emmet Exceptions

Errors raised while parsing abbreviations or loading configuration.
"""

from __future__ import annotations


class EmmetError(Exception):
    """Base exception for all emmet_parser errors."""

    def __init__(self, message: str, position: int | None = None):
        self.message = message
        self.position = position
        super().__init__(message)


class InvalidSyntax(EmmetError):
    """Raised when an identifier or number is missing where one is expected."""

    def __init__(self, detail: str, position: int | None = None):
        self.detail = detail
        super().__init__(f"Invalid syntax: {detail}", position)


class UnclosedBracket(EmmetError):
    """Raised when `[`, `{` or a quoted value is never closed."""

    def __init__(self, bracket: str, position: int | None = None):
        self.bracket = bracket
        message = "Unclosed bracket"
        if position is not None:
            message += f": '{bracket}' opened at position {position}"
        super().__init__(message, position)


class InvalidAttribute(EmmetError):
    """Raised when an attribute list or one of its attributes is malformed."""

    def __init__(self, detail: str = "", position: int | None = None):
        self.detail = detail
        message = "Invalid attribute syntax"
        if detail:
            message += f": {detail}"
        super().__init__(message, position)


class ConfigError(EmmetError):
    """Raised when a configuration file cannot be read or validated."""

    pass
