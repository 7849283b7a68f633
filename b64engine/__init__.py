"""Configurable base64 transcoding engine.

This package converts bytes to base64 text and back under pluggable alphabets
and padding policies, and provides helpers for laying encoded text out in
fixed-width lines.

Main Components:
    - Alphabet: 64 symbols plus a pad symbol, with named presets
    - EngineConfig: Padding emission and decode strictness policy
    - Engine: Encode/decode for one alphabet and config, with named presets
    - Streaming: Bounded-buffer encode/decode over streams and files
    - Batch: Per-item encode/decode over collections
    - Layout: chunk and wrap for line-oriented formats

Example:
    >>> from b64engine import Engine
    >>> Engine.from_preset("standard").encode(b"Hello, world!")
    'SGVsbG8sIHdvcmxkIQ=='
"""

from b64engine.alphabet import Alphabet
from b64engine.batch import (
    MISSING,
    BatchResult,
    Missing,
    Ok,
    decode_as_string,
    decode_many,
    decode_one_strict,
    encode_many,
)
from b64engine.config import DecodePaddingMode, EngineConfig
from b64engine.engine import Engine
from b64engine.exceptions import (
    B64Error,
    DecodeError,
    InvalidAlphabetError,
    InvalidByteError,
    InvalidChunkWidthError,
    InvalidLengthError,
    InvalidPaddingError,
    InvalidTrailingBitsError,
    UnknownAlphabetError,
    UnknownEngineError,
    UnknownPaddingModeError,
    Utf8Error,
)
from b64engine.layout import chunk, wrap
from b64engine.stream import decode_file, decode_stream, encode_file, encode_stream

__version__ = "0.1.0"

__all__ = [
    # Core
    "Alphabet",
    "DecodePaddingMode",
    "Engine",
    "EngineConfig",
    # Streaming
    "encode_stream",
    "decode_stream",
    "encode_file",
    "decode_file",
    # Batch
    "Ok",
    "Missing",
    "MISSING",
    "BatchResult",
    "encode_many",
    "decode_many",
    "decode_one_strict",
    "decode_as_string",
    # Layout
    "chunk",
    "wrap",
    # Exceptions
    "B64Error",
    "DecodeError",
    "InvalidAlphabetError",
    "InvalidByteError",
    "InvalidChunkWidthError",
    "InvalidLengthError",
    "InvalidPaddingError",
    "InvalidTrailingBitsError",
    "UnknownAlphabetError",
    "UnknownEngineError",
    "UnknownPaddingModeError",
    "Utf8Error",
]
