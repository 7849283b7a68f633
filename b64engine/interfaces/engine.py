"""Engine interface for b64engine.

This module defines the protocol the batch adapter needs from an engine.
"""

from __future__ import annotations

from typing import Protocol


class IEngine(Protocol):
    """Interface for base64 encoding and decoding."""

    def encode(self, data: bytes | str) -> str:
        """Encode bytes to text.

        Args:
            data: The bytes to encode.

        Returns:
            The encoded text.
        """
        ...

    def decode(self, data: str | bytes) -> bytes:
        """Decode text to bytes.

        Args:
            data: The encoded text.

        Returns:
            The decoded bytes.

        Raises:
            DecodeError: When the text is malformed.
        """
        ...
