"""Stream I/O interfaces for b64engine.

This module defines protocols for the byte and text sources and sinks that
streaming encode and decode read from and write to. Binary and text file
objects, ``io.BytesIO`` and ``io.StringIO`` all satisfy them.
"""

from __future__ import annotations

from typing import Protocol


class IByteSource(Protocol):
    """Interface for a readable byte stream."""

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes.

        Args:
            size: Maximum number of bytes to read.

        Returns:
            The bytes read; empty at end of stream.
        """
        ...


class ITextSource(Protocol):
    """Interface for a readable stream of encoded text."""

    def read(self, size: int = -1) -> str | bytes:
        """Read up to ``size`` symbols.

        Args:
            size: Maximum number of symbols to read.

        Returns:
            The symbols read, as text or as one byte per symbol; empty at end
            of stream.
        """
        ...


class IByteSink(Protocol):
    """Interface for a writable byte stream."""

    def write(self, data: bytes) -> object:
        """Write bytes.

        Args:
            data: The bytes to write.
        """
        ...


class ITextSink(Protocol):
    """Interface for a writable text stream."""

    def write(self, text: str) -> object:
        """Write text.

        Args:
            text: The text to write.
        """
        ...
