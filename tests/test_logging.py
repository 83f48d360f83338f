"""
Tests for structured logging configuration
"""

import json

from bookshelf.logging import (
    RequestContextFilter,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
)


def test_generate_request_id_is_compact_and_unique():
    ids = {generate_request_id() for _ in range(100)}

    assert len(ids) == 100
    assert all(len(request_id) == 14 for request_id in ids)
    assert all("=" not in request_id for request_id in ids)


def test_request_context_round_trip():
    request_id = set_request_context("req-123")

    assert request_id == "req-123"
    assert get_request_id() == "req-123"

    clear_request_context()
    assert get_request_id() is None


def test_set_request_context_generates_id():
    request_id = set_request_context()

    assert get_request_id() == request_id
    clear_request_context()


def test_request_context_filter_adds_request_id():
    set_request_context("req-456")
    try:
        event = RequestContextFilter()(None, "info", {"event": "hello"})
    finally:
        clear_request_context()

    assert event == {"event": "hello", "request_id": "req-456"}


def test_request_context_filter_without_request():
    assert RequestContextFilter()(None, "info", {"event": "hello"}) == {"event": "hello"}


def test_production_logging_emits_json(capsys):
    configure_logging(debug=False)
    logger = get_logger("bookshelf.tests")

    set_request_context("req-789")
    try:
        logger.info("Book added", title="Dune")
    finally:
        clear_request_context()

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "Book added"
    assert record["title"] == "Dune"
    assert record["request_id"] == "req-789"
    assert record["level"] == "info"
