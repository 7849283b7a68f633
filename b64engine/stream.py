"""Streaming and file-backed encoding and decoding.

Streaming encode and decode move data between a source and a sink through a
bounded buffer. Their output, and for decode the class and position of any
error, match the one-shot ``Engine.encode`` and ``Engine.decode`` calls on the
fully materialized input.
"""

from __future__ import annotations

import io
import os

from b64engine.engine import STANDARD, Engine, as_text
from b64engine.interfaces.io import IByteSink, IByteSource, ITextSink, ITextSource
from b64engine.utils.logging import get_logger

logger = get_logger(__name__)

# Multiple of both 3 and 4 so full reads split into whole groups
DEFAULT_BUFFER_SIZE = 3 * 4 * 1024

PathLike = str | os.PathLike[str]


def encode_stream(
    source: IByteSource,
    sink: ITextSink,
    engine: Engine | None = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> int:
    """Encode everything read from ``source`` and write the text to ``sink``.

    Args:
        source: Byte stream to read until exhausted.
        sink: Text stream receiving the encoded symbols.
        engine: Engine to encode with; defaults to the standard engine.
        buffer_size: Bytes requested per read.

    Returns:
        The number of symbols written.
    """
    engine = engine or STANDARD
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    pending = b""
    written = 0
    while True:
        block = source.read(buffer_size)
        if not block:
            break
        data = pending + bytes(block)
        # Only whole 3-byte windows are encoded before end of stream
        cut = len(data) - len(data) % 3
        pending = data[cut:]
        if cut:
            text = engine.encode(data[:cut])
            sink.write(text)
            written += len(text)

    text = engine.encode(pending)
    if text:
        sink.write(text)
        written += len(text)
    return written


def decode_stream(
    source: ITextSource | IByteSource,
    sink: IByteSink,
    engine: Engine | None = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> int:
    """Decode everything read from ``source`` and write the bytes to ``sink``.

    Complete groups are decoded as they arrive. The final group and any pad
    symbols are held back until end of stream, where the engine's length,
    padding and trailing-bit checks apply to them.

    Args:
        source: Text stream, or byte stream of one symbol per byte.
        sink: Byte stream receiving the decoded data.
        engine: Engine to decode with; defaults to the standard engine.
        buffer_size: Symbols requested per read.

    Returns:
        The number of bytes written.

    Raises:
        DecodeError: As ``Engine.decode`` would for the whole input. Bytes
            decoded before the failing group have already been written.
    """
    engine = engine or STANDARD
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}")

    pad = engine.alphabet.pad
    buffer = ""
    offset = 0
    written = 0
    while True:
        block = source.read(buffer_size)
        if not block:
            break
        buffer += as_text(block)

        limit = buffer.find(pad)
        if limit < 0:
            limit = len(buffer)
        elif len(buffer.rstrip(pad)) > limit:
            # A data symbol follows a pad symbol; decode_at raises for it
            engine.decode_at(buffer, offset)

        cut = limit - limit % 4
        if cut:
            data = engine.decode_groups(buffer[:cut], offset)
            sink.write(data)
            written += len(data)
            buffer = buffer[cut:]
            offset += cut

    data = engine.decode_at(buffer, offset)
    if data:
        sink.write(data)
        written += len(data)
    return written


def encode_file(path: PathLike, engine: Engine | None = None) -> str:
    """Encode a file's contents.

    Args:
        path: File to read.
        engine: Engine to encode with; defaults to the standard engine.

    Returns:
        The encoded text.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    sink = io.StringIO()
    with open(path, "rb") as source:
        written = encode_stream(source, sink, engine)
    logger.info("encoded %s into %d symbols", os.fspath(path), written)
    return sink.getvalue()


def decode_file(path: PathLike, engine: Engine | None = None) -> bytes:
    """Decode a file of base64 text.

    The file is read as one symbol per byte; line breaks are not skipped.

    Args:
        path: File to read.
        engine: Engine to decode with; defaults to the standard engine.

    Returns:
        The decoded bytes.

    Raises:
        OSError: If the file cannot be opened or read.
        DecodeError: If the contents are not valid for the engine.
    """
    sink = io.BytesIO()
    with open(path, "rb") as source:
        written = decode_stream(source, sink, engine)
    logger.info("decoded %s into %d bytes", os.fspath(path), written)
    return sink.getvalue()
