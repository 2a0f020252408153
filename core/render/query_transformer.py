"""Search query selection and word-level transforms."""

from __future__ import annotations

import re

from core.render.escaper import escape_section
from core.templates.models import AllWords, EngineConfig, OptionSet, PlaceholderToken, Positions

_WORD_RE = re.compile(r"\S+\s*")
_WHITESPACE_SPLIT_RE = re.compile(r"(\s+)")
_WORD_START_RE = re.compile(r"\b(\w)")
_ENCODED_COMMA = "%2C"
_WHITESPACE_RE = re.compile(r"\s")


def select_query(
    queries: tuple[str, ...], token: PlaceholderToken, options: OptionSet
) -> str | None:
    """Pick the query for a placeholder; None when no query exists at that index."""

    position = options.query_position or token.occurrence_index
    index = position - 1
    if index >= len(queries):
        return None
    return queries[index]


def transform_query(query: str, options: OptionSet) -> str:
    """Apply word filter, case, reverse and comma options in fixed order."""

    if options.word_positions:
        words = _WORD_RE.findall(query)
        query = "".join(words[pos] for pos in options.word_positions if _has_word(words, pos))
        query = query.rstrip()

    if isinstance(options.uppercase, AllWords):
        query = query.upper()
    elif isinstance(options.uppercase, Positions) and options.uppercase.indexes:
        words = _WORD_RE.findall(query)
        for pos in options.uppercase.indexes:
            if _has_word(words, pos):
                words[pos] = words[pos].upper()
        query = "".join(words)

    if options.capitalize:
        query = _WORD_START_RE.sub(lambda match: match.group(1).upper(), query)

    if options.reverse:
        query = "".join(reversed(_WHITESPACE_SPLIT_RE.split(query)))

    if options.strip_commas:
        # Runs before escaping, so only an already encoded comma is removed.
        query = query.replace(_ENCODED_COMMA, "")

    return query


def render_query(query: str, delimiter: str, config: EngineConfig) -> str:
    """Escape a transformed query and put the delimiter in place of its whitespace."""

    escaped = escape_section(query, config.query_unsafe_chars)
    return _WHITESPACE_RE.sub(lambda _match: delimiter, escaped)


def _has_word(words: list[str], pos: int) -> bool:
    # Position 0 from "!W0"/"!U0" becomes -1 and selects the last word.
    return -len(words) <= pos < len(words)
