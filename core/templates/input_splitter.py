"""Splitting of raw command line arguments into URL entries and queries."""

from __future__ import annotations

import re

from core.templates.models import EngineConfig, UrlEntry


def split_url_entries(raw_urls: str, config: EngineConfig) -> list[UrlEntry]:
    """Split the URL argument into entries, each with its data suffix separated.

    Leading entry delimiters (and the spaces around them) are dropped so that no
    empty entries open the list. Trailing empty entries are dropped as well.
    """

    delimiter = re.escape(config.entry_delimiter)
    trimmed = re.sub(rf"^(?:\s*{delimiter}\s*)*", "", raw_urls)
    parts = _drop_trailing_empty(trimmed.split(config.entry_delimiter))
    return [separate_entry(part, config) for part in parts]


def separate_entry(raw_entry: str, config: EngineConfig) -> UrlEntry:
    """Split off everything from the first data delimiter onward."""

    index = raw_entry.find(config.data_delimiter)
    if index < 0:
        return UrlEntry(url=raw_entry)
    return UrlEntry(url=raw_entry[:index], data=raw_entry[index:])


def split_queries(fragments: list[str], config: EngineConfig) -> tuple[str, ...]:
    """Join query fragments with spaces and split them into ordered queries.

    The first non-empty query always lands at index 0; empty queries after it
    are kept so positions stay stable.
    """

    delimiter = re.escape(config.query_delimiter)
    source = " ".join(fragments).strip()
    source = re.sub(rf"^(?:\s*{delimiter}\s*)*", "", source)
    if not source:
        return ()
    return tuple(_drop_trailing_empty(re.split(rf"\s*{delimiter}\s*", source)))


def _drop_trailing_empty(parts: list[str]) -> list[str]:
    while parts and parts[-1] == "":
        parts.pop()
    return parts
