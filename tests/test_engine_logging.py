from __future__ import annotations

import logging

import pytest

from core.orchestrator.pipeline import SearchUrlParser
from core.utils.errors import MissingDelimiterError


def test_engine_logs_placeholder_events(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="searchurl.engine")

    SearchUrlParser().run(["https://x/?a={search!W1\\+}&b={search\\+}", "alpha beta"])

    messages = [record.message for record in caplog.records if record.name == "searchurl.engine"]
    assert any('"event":"start"' in message for message in messages)
    assert any(
        '"event":"entry"' in message and '"placeholders":2' in message for message in messages
    )
    assert any(
        '"event":"placeholder"' in message and '"options":"!W1"' in message
        for message in messages
    )
    assert any('"event":"query_missing"' in message for message in messages)


def test_engine_logs_rejected_placeholder(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.DEBUG, logger="searchurl.engine")

    with pytest.raises(MissingDelimiterError):
        SearchUrlParser().run(["x{search\\}", "q"])

    messages = [record.message for record in caplog.records if record.name == "searchurl.engine"]
    assert any(
        '"event":"rejected"' in message and "MissingDelimiterError" in message
        for message in messages
    )


def test_engine_is_silent_above_debug(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="searchurl.engine")

    SearchUrlParser().run(["https://x/?q={search\\+}", "a"])

    assert not [record for record in caplog.records if record.name == "searchurl.engine"]
