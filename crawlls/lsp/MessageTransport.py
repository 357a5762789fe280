"""Content-Length framed message transport over byte streams."""

import sys
from typing import Any, BinaryIO

from ._parse_content_length import _parse_content_length
from .encode_message import encode_message
from .HEADER_TERMINATOR import HEADER_TERMINATOR


class MessageTransport:
    """Reads and writes framed JSON messages.

    Bytes past the end of one message stay buffered for the next read, so
    several frames arriving in a single chunk are all delivered.
    """

    def __init__(
        self,
        *,
        input_stream: BinaryIO | None = None,
        output_stream: BinaryIO | None = None,
        chunk_size: int = 4096,
    ):
        self._input = input_stream if input_stream is not None else sys.stdin.buffer
        self._output = output_stream if output_stream is not None else sys.stdout.buffer
        self._chunk_size = chunk_size
        self._buffer = bytearray()
        self._eof = False
        # read1 returns whatever is available instead of blocking for a full chunk
        self._read = getattr(self._input, "read1", None) or self._input.read

    @property
    def at_eof(self) -> bool:
        """True once the input stream has ended."""
        return self._eof

    def _fill(self) -> bool:
        """Append one chunk to the buffer; False at end of stream."""
        if self._eof:
            return False
        chunk = self._read(self._chunk_size)
        if not chunk:
            self._eof = True
            return False
        self._buffer.extend(chunk)
        return True

    def read_message(self) -> bytes | None:
        """Read one message body.

        Loops over partial reads until the header terminator and the full
        declared body are buffered.

        Returns:
            The body bytes, or None if the stream ended before a complete message

        Raises:
            FramingError: If the header block lacks a valid Content-Length. The
                bad header block is consumed so the next read can resynchronize.
        """
        while True:
            header_end = self._buffer.find(HEADER_TERMINATOR)
            if header_end != -1:
                break
            if not self._fill():
                return None

        header_block = bytes(self._buffer[:header_end])
        del self._buffer[: header_end + len(HEADER_TERMINATOR)]
        length = _parse_content_length(header_block)

        while len(self._buffer) < length:
            if not self._fill():
                return None

        body = bytes(self._buffer[:length])
        del self._buffer[:length]
        return body

    def write_message(self, message: dict[str, Any]) -> None:
        """Encode and write one message as a single contiguous write."""
        self._output.write(encode_message(message))
        self._output.flush()
