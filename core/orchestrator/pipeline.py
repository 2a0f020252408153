"""Orchestration pipeline: arguments -> URL entries -> substituted URLs."""

from __future__ import annotations

import logging

from core.render.url_renderer import render_url
from core.templates.input_splitter import split_queries, split_url_entries
from core.templates.models import EngineConfig
from core.utils.errors import ArgumentCountError
from core.utils.log_events import log_event

logger = logging.getLogger("searchurl.engine")


class SearchUrlParser:
    """Replace `{search\\D}` placeholders in URL lists with search queries."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def run(self, args: list[str]) -> str | None:
        """Process raw command line arguments.

        The first argument holds the URLs, all others are query fragments.
        Returns None when the URL list is empty.
        """

        if len(args) < 1:
            raise ArgumentCountError(len(args))
        return self.substitute(args[0], args[1:])

    def substitute(self, raw_urls: str, query_fragments: list[str]) -> str | None:
        """Substitute every URL entry of raw_urls, joined back with the entry delimiter."""

        entries = split_url_entries(raw_urls, self.config)
        if not entries:
            log_event(logger, logging.DEBUG, "empty_url_list")
            return None

        queries = split_queries(query_fragments, self.config)
        log_event(logger, logging.DEBUG, "start", entries=len(entries), queries=len(queries))

        rendered = [render_url(entry, queries, self.config) for entry in entries]
        return self.config.entry_delimiter.join(rendered)
