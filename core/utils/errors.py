"""Custom exceptions for core logic."""

from __future__ import annotations


class ArgumentCountError(Exception):
    """Raised when the command line carries no arguments at all."""

    def __init__(self, count: int) -> None:
        # "error_" keeps argument errors distinguishable from template errors.
        super().__init__(f"error_: invalid number of arguments: {count}")
        self.count = count


class ConfigError(ValueError):
    """Raised when an engine configuration file cannot be loaded."""


class PlaceholderError(Exception):
    """Base class for malformed `{search\\D}` placeholders.

    The message is multi-line and always starts with ``error:`` so callers can
    tell it apart from argument errors.
    """

    def __init__(self, detail: str, *, url: str, placeholder: str | None = None) -> None:
        super().__init__(f"error: {detail}\n  URL:\n  {url}")
        self.detail = detail
        self.url = url
        self.placeholder = placeholder


class PlaceholderPositionError(PlaceholderError):
    """Raised when the first placeholder starts the URL."""

    def __init__(self, *, url: str, placeholder: str) -> None:
        super().__init__(
            "{search\\D}\n  placeholder cannot be at the very\n  beginning of a URL;",
            url=url,
            placeholder=placeholder,
        )


class MissingDelimiterError(PlaceholderError):
    """Raised when the `\\D` segment of a placeholder is empty."""

    def __init__(self, *, url: str, placeholder: str) -> None:
        super().__init__(
            "delimiter D\n  missing for {search\\D} placeholder;",
            url=url,
            placeholder=placeholder,
        )


class DelimiterTooLongError(PlaceholderError):
    """Raised when a delimiter exceeds the configured length."""

    def __init__(self, *, url: str, placeholder: str, delimiter: str, limit: int) -> None:
        super().__init__(
            "delimiter D\n  for {search\\D} placeholder too long;\n"
            f"  Length: {len(delimiter)} (maximum {limit})\n"
            f'  Delimiter: "{delimiter}"',
            url=url,
            placeholder=placeholder,
        )
        self.delimiter = delimiter
        self.limit = limit


class InvalidDelimiterError(PlaceholderError):
    """Raised when the delimiter is a single space."""

    def __init__(self, *, url: str, placeholder: str, delimiter: str) -> None:
        super().__init__(
            "delimiter D\n  for {search\\D} placeholder cannot\n"
            f'  be a space; Delimiter: "{delimiter}"',
            url=url,
            placeholder=placeholder,
        )
        self.delimiter = delimiter


class PlaceholderCountError(PlaceholderError):
    """Raised when a URL holds more placeholders than allowed."""

    def __init__(self, *, url: str, placeholder: str, limit: int) -> None:
        super().__init__(
            f"cannot use\n  more than {limit} {{search\\D}}\n  placeholders;",
            url=url,
            placeholder=placeholder,
        )
        self.limit = limit


class InvalidOptionsError(PlaceholderError):
    """Raised when the option string does not follow the option grammar."""

    def __init__(self, *, url: str, placeholder: str) -> None:
        super().__init__(
            f"one or more\n  invalid options in placeholder\n  {placeholder};",
            url=url,
            placeholder=placeholder,
        )


class QueryPositionRangeError(PlaceholderError):
    """Raised when `!N` points outside the allowed query positions."""

    def __init__(self, *, url: str, placeholder: str, position: int, limit: int) -> None:
        super().__init__(
            f"search query\n  position {position} in placeholder\n  {placeholder}\n"
            f"  out of range; valid range is 1-{limit};",
            url=url,
            placeholder=placeholder,
        )
        self.position = position
        self.limit = limit


class MissingWordPositionError(PlaceholderError):
    """Raised for a bare `!W` option."""

    def __init__(self, *, url: str, placeholder: str) -> None:
        super().__init__(
            f'position P\n  missing for option "!W[P]" in\n  placeholder {placeholder};',
            url=url,
            placeholder=placeholder,
        )
