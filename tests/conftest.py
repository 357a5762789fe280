"""Shared pytest configuration and fixtures for all tests."""

import io
import json
from pathlib import Path

import pytest

from crawlls.api.config.ServerConfig import ServerConfig
from crawlls.api.config.ServerContext import ServerContext
from crawlls.lsp.MessageTransport import MessageTransport


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast isolated tests")
    config.addinivalue_line("markers", "integration: full server loop tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Framing Helpers
# =============================================================================


def frame(message: dict | str | bytes) -> bytes:
    """Frame a message the way an editor client would."""
    if isinstance(message, dict):
        body = json.dumps(message).encode("utf-8")
    elif isinstance(message, str):
        body = message.encode("utf-8")
    else:
        body = message
    return f"Content-Length: {len(body)}\r\n\r\n".encode("ascii") + body


def parse_frames(data: bytes) -> list[dict]:
    """Split framed output back into decoded messages, checking each length."""
    messages = []
    while data:
        header, sep, rest = data.partition(b"\r\n\r\n")
        assert sep, f"unterminated header block: {data!r}"
        name, _, value = header.decode("ascii").partition(":")
        assert name == "Content-Length"
        length = int(value.strip())
        assert len(rest) >= length
        messages.append(json.loads(rest[:length].decode("utf-8")))
        data = rest[length:]
    return messages


@pytest.fixture(name="frame")
def frame_fixture():
    return frame


@pytest.fixture(name="parse_frames")
def parse_frames_fixture():
    return parse_frames


# =============================================================================
# Server Fixtures
# =============================================================================


@pytest.fixture
def tmp_cache_dir(tmp_path: Path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def output_stream() -> io.BytesIO:
    return io.BytesIO()


@pytest.fixture
def transport(output_stream: io.BytesIO) -> MessageTransport:
    return MessageTransport(input_stream=io.BytesIO(), output_stream=output_stream)


@pytest.fixture
def server_config(tmp_cache_dir: Path) -> ServerConfig:
    return ServerConfig(cache_dir=tmp_cache_dir)


@pytest.fixture
def context(server_config: ServerConfig, transport: MessageTransport) -> ServerContext:
    return ServerContext(config=server_config, transport=transport)


@pytest.fixture
def write_document(tmp_path: Path):
    """Write a document and return its file:// URI."""

    def _write(text: str, name: str = "notes.md") -> str:
        path = tmp_path / "docs" / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path.as_uri()

    return _write
