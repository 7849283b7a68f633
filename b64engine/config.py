"""Engine configuration.

This module defines the decode padding modes and the EngineConfig value type
that controls padding emission on encode and padding/trailing-bit strictness
on decode.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from b64engine.exceptions import UnknownPaddingModeError


class DecodePaddingMode(Enum):
    """How strictly decoding treats pad symbols."""

    INDIFFERENT = "indifferent"
    REQUIRE_CANONICAL = "canonical"
    REQUIRE_NONE = "none"

    @classmethod
    def from_name(cls, name: str | DecodePaddingMode) -> DecodePaddingMode:
        """Resolve a padding mode from its name.

        Args:
            name: ``"indifferent"``, ``"canonical"``, ``"none"``, or a mode.

        Returns:
            The matching padding mode.

        Raises:
            UnknownPaddingModeError: If the name is not recognized.
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownPaddingModeError(name) from None


@dataclass(frozen=True)
class EngineConfig:
    """Padding and validation policy for an engine.

    Attributes:
        encode_padding: Emit pad symbols so output length is a multiple of 4.
        decode_allow_trailing_bits: Accept non-zero unused bits in the last
            symbol of a partial group.
        decode_padding_mode: Padding requirement applied when decoding.
    """

    encode_padding: bool = True
    decode_allow_trailing_bits: bool = False
    decode_padding_mode: DecodePaddingMode = DecodePaddingMode.REQUIRE_CANONICAL

    @classmethod
    def new(
        cls,
        encode_padding: bool = True,
        decode_allow_trailing_bits: bool = False,
        decode_padding_mode: str | DecodePaddingMode = "canonical",
    ) -> EngineConfig:
        """Create a config, resolving the padding mode by name.

        Raises:
            UnknownPaddingModeError: If the padding mode is not recognized.
        """
        return cls(
            encode_padding=bool(encode_padding),
            decode_allow_trailing_bits=bool(decode_allow_trailing_bits),
            decode_padding_mode=DecodePaddingMode.from_name(decode_padding_mode),
        )

    def with_encode_padding(self, encode_padding: bool) -> EngineConfig:
        return replace(self, encode_padding=bool(encode_padding))

    def with_decode_allow_trailing_bits(self, allow: bool) -> EngineConfig:
        return replace(self, decode_allow_trailing_bits=bool(allow))

    def with_decode_padding_mode(self, mode: str | DecodePaddingMode) -> EngineConfig:
        return replace(self, decode_padding_mode=DecodePaddingMode.from_name(mode))

    def to_dict(self) -> dict[str, Any]:
        """Gets a dictionary representation of the config."""
        return {
            "encode_padding": self.encode_padding,
            "decode_allow_trailing_bits": self.decode_allow_trailing_bits,
            "decode_padding_mode": self.decode_padding_mode.value,
        }

    def describe(self) -> str:
        """Render the config for diagnostics."""
        lines = ["EngineConfig {"]
        lines.extend(f"    {key}: {value}," for key, value in self.to_dict().items())
        lines.append("}")
        return "\n".join(lines)


DEFAULT_CONFIG = EngineConfig()
NO_PAD_CONFIG = EngineConfig(
    encode_padding=False,
    decode_padding_mode=DecodePaddingMode.REQUIRE_NONE,
)
