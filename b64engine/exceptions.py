"""Exception classes for b64engine.

This module defines the exception types raised by alphabet, config and engine
construction, by decoding, and by the text layout helpers.
"""

from __future__ import annotations


class B64Error(Exception):
    """Base exception class for all b64engine errors."""

    pass


class UnknownAlphabetError(B64Error):
    """Exception raised when an alphabet preset name is not recognized."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown alphabet: {name!r}")
        self.name = name


class InvalidAlphabetError(B64Error):
    """Exception raised when custom alphabet characters are malformed."""

    pass


class UnknownPaddingModeError(B64Error):
    """Exception raised when a decode padding mode name is not recognized."""

    def __init__(self, name: object) -> None:
        super().__init__(f"unknown padding mode: {name!r}")
        self.name = name


class UnknownEngineError(B64Error):
    """Exception raised when an engine preset name is not recognized."""

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown engine: {name!r}")
        self.name = name


class InvalidChunkWidthError(B64Error):
    """Exception raised when a chunk width is not a positive multiple of 4."""

    def __init__(self, width: object) -> None:
        super().__init__(f"chunk width must be a positive multiple of 4, got {width!r}")
        self.width = width


class DecodeError(B64Error):
    """Base exception class for malformed encoded input."""

    pass


class InvalidByteError(DecodeError):
    """Exception raised when a symbol is not part of the engine's alphabet.

    Attributes:
        position: Offset of the offending symbol in the encoded input.
        byte: The offending symbol.
    """

    def __init__(self, position: int, byte: str) -> None:
        super().__init__(f"invalid symbol {byte!r} at offset {position}")
        self.position = position
        self.byte = byte


class InvalidLengthError(DecodeError):
    """Exception raised when the final symbol group is too short to hold a byte."""

    def __init__(self, length: int) -> None:
        super().__init__(f"invalid input length {length}")
        self.length = length


class InvalidPaddingError(DecodeError):
    """Exception raised when padding violates the decode padding mode.

    Attributes:
        position: Offset where padding was found or was expected.
    """

    def __init__(self, position: int) -> None:
        super().__init__(f"invalid padding at offset {position}")
        self.position = position


class InvalidTrailingBitsError(DecodeError):
    """Exception raised when the last symbol of a partial group has unused bits set.

    Attributes:
        position: Offset of the last symbol.
        byte: The last symbol.
    """

    def __init__(self, position: int, byte: str) -> None:
        super().__init__(f"non-zero trailing bits in symbol {byte!r} at offset {position}")
        self.position = position
        self.byte = byte


class Utf8Error(B64Error):
    """Exception raised when decoded bytes are not valid UTF-8.

    Attributes:
        index: Index of the failing piece when the input was split, else 0.
        position: Offset of the first invalid byte within the decoded piece.
    """

    def __init__(self, index: int, position: int) -> None:
        super().__init__(f"decoded piece {index} is not valid UTF-8 (byte offset {position})")
        self.index = index
        self.position = position
