"""Placeholder scanning, validation, and option parsing for URL templates.

Supported placeholder format is exactly ``{search<options>\\<delimiter>}``:
- ``<options>`` is zero or more of ``!N``, ``!W<P>``, ``!U[P]``, ``!C``, ``!R``,
  ``!M`` with no separators.
- ``<delimiter>`` replaces the spaces of the query and is required.
"""

from __future__ import annotations

import re

from core.templates.models import (
    AllWords,
    EngineConfig,
    OptionSet,
    PlaceholderToken,
    Positions,
    ScanResult,
)
from core.utils.errors import (
    DelimiterTooLongError,
    InvalidDelimiterError,
    InvalidOptionsError,
    MissingDelimiterError,
    MissingWordPositionError,
    PlaceholderCountError,
    PlaceholderPositionError,
    QueryPositionRangeError,
)

_PLACEHOLDER_RE = re.compile(r"(.*?)(\{search([^\\]*)\\([^}]*)\})", re.DOTALL)
_OPTION_BODY = r"[0-9]{1,2}|[WU][0-9]{0,2}|[CRM]"
_OPTIONS_RE = re.compile(rf"(?:!(?:{_OPTION_BODY}))*")
_OPTION_RE = re.compile(rf"!({_OPTION_BODY})")


def scan_placeholders(url: str) -> ScanResult:
    """Find placeholders left to right, keeping the literal text around them."""

    result = ScanResult()
    cursor = 0

    for occurrence_index, match in enumerate(_PLACEHOLDER_RE.finditer(url), start=1):
        result.tokens.append(
            PlaceholderToken(
                preceding_text=match.group(1),
                option_string=match.group(3),
                delimiter=match.group(4),
                occurrence_index=occurrence_index,
                text=match.group(2),
            )
        )
        cursor = match.end()

    result.trailing_text = url[cursor:]
    return result


def validate_placeholder(token: PlaceholderToken, url: str, config: EngineConfig) -> None:
    """Reject placeholders that break position, delimiter, or count rules."""

    if token.occurrence_index == 1 and token.preceding_text == "":
        raise PlaceholderPositionError(url=url, placeholder=token.text)
    if token.delimiter == "":
        raise MissingDelimiterError(url=url, placeholder=token.text)
    if len(token.delimiter) > config.max_delimiter_length:
        raise DelimiterTooLongError(
            url=url,
            placeholder=token.text,
            delimiter=token.delimiter,
            limit=config.max_delimiter_length,
        )
    if token.delimiter == " ":
        raise InvalidDelimiterError(url=url, placeholder=token.text, delimiter=token.delimiter)
    if token.occurrence_index > config.max_placeholders:
        raise PlaceholderCountError(url=url, placeholder=token.text, limit=config.max_placeholders)


def parse_options(token: PlaceholderToken, url: str, config: EngineConfig) -> OptionSet:
    """Parse the option string of a placeholder into an OptionSet.

    Args:
        token: Scanned placeholder.
        url: URL the placeholder belongs to, used in error messages.
        config: Engine configuration providing the query position range.

    Returns:
        OptionSet with positional options in the order they were written.
    """

    if not _OPTIONS_RE.fullmatch(token.option_string):
        raise InvalidOptionsError(url=url, placeholder=token.text)

    query_position: int | None = None
    word_positions: list[int] = []
    uppercase_positions: list[int] = []
    uppercase_all = False
    flags: set[str] = set()

    for match in _OPTION_RE.finditer(token.option_string):
        option = match.group(1)
        kind, digits = option[0], option[1:]

        if option.isdigit():
            position = int(option)
            if not 1 <= position <= config.max_placeholders:
                raise QueryPositionRangeError(
                    url=url,
                    placeholder=token.text,
                    position=position,
                    limit=config.max_placeholders,
                )
            query_position = position
        elif kind == "W":
            if not digits:
                raise MissingWordPositionError(url=url, placeholder=token.text)
            word_positions.append(int(digits) - 1)
        elif kind == "U":
            if digits:
                uppercase_positions.append(int(digits) - 1)
            else:
                uppercase_all = True
        else:
            flags.add(kind)

    return OptionSet(
        query_position=query_position,
        word_positions=tuple(word_positions),
        uppercase=AllWords() if uppercase_all else Positions(tuple(uppercase_positions)),
        capitalize="C" in flags,
        reverse="R" in flags,
        strip_commas="M" in flags,
    )
