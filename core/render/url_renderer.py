"""Substitution of placeholders in one URL entry."""

from __future__ import annotations

import logging

from core.render.escaper import escape_section
from core.render.query_transformer import render_query, select_query, transform_query
from core.templates.models import EngineConfig, UrlEntry
from core.templates.placeholder_parser import parse_options, scan_placeholders, validate_placeholder
from core.utils.errors import PlaceholderError
from core.utils.log_events import log_event

logger = logging.getLogger("searchurl.engine")


def render_url(entry: UrlEntry, queries: tuple[str, ...], config: EngineConfig) -> str:
    """Replace every placeholder of entry and reattach its data suffix.

    Raises:
        PlaceholderError: on the first malformed placeholder.
    """

    url = entry.url
    scan = scan_placeholders(url)
    parts: list[str] = []

    log_event(logger, logging.DEBUG, "entry", url=url, placeholders=len(scan.tokens))

    for token in scan.tokens:
        try:
            validate_placeholder(token, url, config)
            options = parse_options(token, url, config)
        except PlaceholderError as exc:
            log_event(
                logger,
                logging.DEBUG,
                "rejected",
                url=url,
                placeholder=token.text,
                error_type=type(exc).__name__,
            )
            raise

        parts.append(escape_section(token.preceding_text, config.url_unsafe_chars))

        query = select_query(queries, token, options)
        log_event(
            logger,
            logging.DEBUG,
            "placeholder",
            occurrence=token.occurrence_index,
            options=token.option_string,
            delimiter=token.delimiter,
            query_index=(options.query_position or token.occurrence_index) - 1,
        )
        if query is None:
            log_event(logger, logging.DEBUG, "query_missing", placeholder=token.text)
            continue

        parts.append(render_query(transform_query(query, options), token.delimiter, config))

    if scan.trailing_text:
        parts.append(escape_section(scan.trailing_text, config.url_unsafe_chars))

    if entry.data is not None:
        parts.append(entry.data)

    return "".join(parts)
