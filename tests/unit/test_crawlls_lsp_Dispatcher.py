"""Tests for Dispatcher routing and error containment."""

import importlib
import json
import logging
from unittest.mock import patch

import pytest

from crawlls.api.protocol.ValidationResult import ValidationResult
from crawlls.lsp.Dispatcher import Dispatcher

dispatcher_module = importlib.import_module("crawlls.lsp.Dispatcher")


def _raw(message: dict) -> bytes:
    return json.dumps(message).encode("utf-8")


@pytest.fixture
def dispatcher(context) -> Dispatcher:
    return Dispatcher(context)


def test_initialize(dispatcher):
    response = dispatcher.handle(
        _raw(
            {
                "jsonrpc": "2.0",
                "id": 1,
                "method": "initialize",
                "params": {"processId": None, "rootUri": "file:///test", "capabilities": {}},
            }
        )
    )
    assert response["jsonrpc"] == "2.0"
    assert response["id"] == 1
    assert response["result"]["capabilities"]["definitionProvider"] is True


def test_unknown_method(dispatcher):
    response = dispatcher.handle(_raw({"jsonrpc": "2.0", "id": 2, "method": "unknown/method"}))
    assert response == {
        "jsonrpc": "2.0",
        "id": 2,
        "error": {"code": -32601, "message": "Method not found: unknown/method"},
    }


def test_unknown_method_keeps_string_id(dispatcher):
    response = dispatcher.handle(_raw({"jsonrpc": "2.0", "id": "req-9", "method": "textDocument/hover"}))
    assert response["id"] == "req-9"
    assert response["error"]["code"] == -32601
    assert "textDocument/hover" in response["error"]["message"]


def test_notifications_get_no_response(dispatcher):
    assert dispatcher.handle(_raw({"jsonrpc": "2.0", "method": "initialized", "params": {}})) is None
    assert dispatcher.handle(_raw({"jsonrpc": "2.0", "method": "initialize", "params": {}})) is None


@pytest.mark.parametrize(
    "raw",
    [
        b"{not json",
        b"\xff\xfe",
        b"[]",
        b'{"jsonrpc": "2.0", "id": 1}',
        b'{"id": 1, "method": "initialize"}',
    ],
)
def test_malformed_input_is_dropped(dispatcher, raw):
    assert dispatcher.handle(raw) is None


def test_definition_without_link(dispatcher, write_document):
    uri = write_document("Plain text without links")
    response = dispatcher.handle(
        _raw(
            {
                "jsonrpc": "2.0",
                "id": 3,
                "method": "textDocument/definition",
                "params": {"textDocument": {"uri": uri}, "position": {"line": 0, "character": 5}},
            }
        )
    )
    assert response == {"jsonrpc": "2.0", "id": 3, "result": None}


def test_definition_beyond_file_bounds(dispatcher, write_document):
    uri = write_document("Single line")
    response = dispatcher.handle(
        _raw(
            {
                "jsonrpc": "2.0",
                "id": 4,
                "method": "textDocument/definition",
                "params": {"textDocument": {"uri": uri}, "position": {"line": 100, "character": 0}},
            }
        )
    )
    assert response == {"jsonrpc": "2.0", "id": 4, "result": None}


def test_missing_document_is_internal_error(dispatcher, tmp_path):
    response = dispatcher.handle(
        _raw(
            {
                "jsonrpc": "2.0",
                "id": 5,
                "method": "textDocument/definition",
                "params": {
                    "textDocument": {"uri": (tmp_path / "gone.md").as_uri()},
                    "position": {"line": 0, "character": 0},
                },
            }
        )
    )
    assert response == {"jsonrpc": "2.0", "id": 5, "error": {"code": -32603, "message": "Internal error"}}


def test_malformed_params_are_internal_error(dispatcher):
    response = dispatcher.handle(_raw({"jsonrpc": "2.0", "id": 6, "method": "textDocument/definition"}))
    assert response["error"]["code"] == -32603


def test_handler_exception_is_contained_and_logged(context, caplog):
    def explode(params, context):
        raise RuntimeError("secret internal detail")

    dispatcher = Dispatcher(context, handlers={"boom": explode})
    crawlls_logger = logging.getLogger("crawlls")
    crawlls_logger.addHandler(caplog.handler)
    try:
        with caplog.at_level(logging.ERROR, logger="crawlls"):
            response = dispatcher.handle(_raw({"jsonrpc": "2.0", "id": 7, "method": "boom"}))
    finally:
        crawlls_logger.removeHandler(caplog.handler)

    assert response == {"jsonrpc": "2.0", "id": 7, "error": {"code": -32603, "message": "Internal error"}}
    assert "secret internal detail" not in json.dumps(response)
    assert "secret internal detail" in caplog.text


def test_failing_notification_handler_gets_no_response(context):
    def explode(params, context):
        raise RuntimeError("boom")

    dispatcher = Dispatcher(context, handlers={"boom": explode})
    assert dispatcher.handle(_raw({"jsonrpc": "2.0", "method": "boom"})) is None


def test_invalid_response_is_not_sent(dispatcher):
    with patch.object(dispatcher_module, "validate_response", return_value=ValidationResult.failure("bad shape")):
        assert dispatcher.handle(_raw({"jsonrpc": "2.0", "id": 8, "method": "initialize"})) is None
