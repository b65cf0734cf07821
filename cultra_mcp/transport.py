"""Stdio message transport: newline-delimited or Content-Length framed."""

from __future__ import annotations

import enum
import logging
import re
import sys
from collections.abc import Sequence
from typing import BinaryIO

logger = logging.getLogger(__name__)

MAX_MESSAGE_SIZE = 64 * 1024 * 1024

_FRAMED_PREFIXES = (b"Content-Length:", b"content-length:")
_LENGTH_PATTERN = re.compile(r"\+?[0-9]+")


class MessageError(ValueError):
    """A message on the transport could not be read."""


class TransportMode(enum.Enum):
    """Transport requested on the command line."""

    AUTO = "auto"
    FRAMED = "framed"
    LINE = "line"


class ActiveTransport(enum.Enum):
    """Transport in use once it is known."""

    FRAMED = "framed"
    LINE = "line"

    def write_response(self, writer: BinaryIO, response: str) -> None:
        """Write one response message and flush."""
        body = response.encode("utf-8")
        if self is ActiveTransport.FRAMED:
            writer.write(f"Content-Length: {len(body)}\r\n\r\n".encode("ascii"))
            writer.write(body)
        else:
            writer.write(body + b"\n")
        writer.flush()


def parse_transport_value(value: str) -> TransportMode:
    """Map a transport name to a mode; unknown names fall back to auto."""
    try:
        return TransportMode(value)
    except ValueError:
        logger.warning("Unknown transport mode '%s', defaulting to auto", value)
        return TransportMode.AUTO


def parse_transport_mode(argv: Sequence[str] | None = None) -> TransportMode:
    """Find ``--transport=X`` or ``--transport X`` among the arguments."""
    args = iter(sys.argv[1:] if argv is None else argv)
    for arg in args:
        if arg.startswith("--transport="):
            return parse_transport_value(arg[len("--transport="):])
        if arg == "--transport":
            value = next(args, None)
            if value is not None:
                return parse_transport_value(value)
    return TransportMode.AUTO


def detect_transport(stream: BinaryIO) -> ActiveTransport | None:
    """Peek at buffered input to choose a transport; None at end of input."""
    buf = stream.peek(len(_FRAMED_PREFIXES[0]))
    if not buf:
        return None
    if buf.startswith(_FRAMED_PREFIXES):
        return ActiveTransport.FRAMED
    return ActiveTransport.LINE


def _decode(data: bytes, what: str) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MessageError(f"invalid utf-8 {what}: {exc}") from exc


def read_line_message(stream: BinaryIO) -> str | None:
    """Return the next non-blank line, trimmed, or None at end of input."""
    while True:
        line = stream.readline()
        if not line:
            return None
        text = _decode(line, "line").strip()
        if text:
            return text


def _parse_length(value: str) -> int:
    text = value.strip()
    if not text:
        raise MessageError(
            "invalid Content-Length header: cannot parse integer from empty string"
        )
    if not _LENGTH_PATTERN.fullmatch(text):
        raise MessageError("invalid Content-Length header: invalid digit found in string")
    return int(text)


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunks: list[bytes] = []
    remaining = size
    while remaining:
        chunk = stream.read(remaining)
        if not chunk:
            raise MessageError("unexpected end of input while reading message body")
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_framed_message(stream: BinaryIO) -> str | None:
    """Read one Content-Length framed message, or None at end of input."""
    content_length: int | None = None
    while True:
        line = stream.readline()
        if not line:
            return None
        if line in (b"\r\n", b"\n"):
            break
        text = _decode(line, "header")
        name, sep, value = text.partition(":")
        if sep and name.isascii() and name.lower() == "content-length":
            content_length = _parse_length(value)

    if content_length is None:
        raise MessageError("missing Content-Length header")
    if content_length > MAX_MESSAGE_SIZE:
        raise MessageError(
            f"Content-Length {content_length} exceeds maximum of "
            f"{MAX_MESSAGE_SIZE} bytes"
        )
    return _decode(_read_exact(stream, content_length), "body")


def read_message(stream: BinaryIO, mode: ActiveTransport) -> str | None:
    """Read one message using the given transport."""
    if mode is ActiveTransport.FRAMED:
        return read_framed_message(stream)
    return read_line_message(stream)