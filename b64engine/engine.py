"""Base64 engine.

This module provides the Engine class, which pairs an Alphabet with an
EngineConfig and implements encoding and policy-checked decoding, plus the
named preset engines.

Bulk conversion goes through the standard library ``base64`` codec; symbols
are translated between the configured alphabet and the standard one, and all
validation (symbols, length, padding, trailing bits) happens here so error
positions refer to the caller's input.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass, field

from b64engine import alphabet as alphabets
from b64engine.alphabet import Alphabet
from b64engine.config import DEFAULT_CONFIG, NO_PAD_CONFIG, DecodePaddingMode, EngineConfig
from b64engine.exceptions import (
    InvalidByteError,
    InvalidLengthError,
    InvalidPaddingError,
    InvalidTrailingBitsError,
    UnknownEngineError,
)
from b64engine.utils.logging import get_logger

logger = get_logger(__name__)

BytesLike = bytes | bytearray | memoryview

_STANDARD_PAD = "="

# Unused low bits of the last symbol, keyed by symbols in a partial group
_TRAILING_BITS_MASK = {2: 0x0F, 3: 0x03}


def as_text(data: str | BytesLike) -> str:
    """Coerce encoded input to text, mapping each byte to one character."""
    if isinstance(data, str):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data).decode("latin-1")
    raise TypeError(f"expected str or bytes-like input, got {type(data).__name__}")


@dataclass(frozen=True)
class Engine:
    """A base64 encoder/decoder for one alphabet and one config.

    Engines hold no mutable state and can be shared freely between threads.

    Attributes:
        alphabet: Symbols used for output and accepted on input.
        config: Padding and validation policy.
    """

    alphabet: Alphabet
    config: EngineConfig = DEFAULT_CONFIG
    _from_standard: dict[int, int] | None = field(init=False, repr=False, compare=False)
    _to_standard: dict[int, int] | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.alphabet, Alphabet):
            raise TypeError(f"alphabet must be an Alphabet, got {type(self.alphabet).__name__}")
        if not isinstance(self.config, EngineConfig):
            raise TypeError(f"config must be an EngineConfig, got {type(self.config).__name__}")

        standard = alphabets.STANDARD
        if self.alphabet == standard:
            from_standard = to_standard = None
        else:
            from_standard = str.maketrans(
                standard.symbols + _STANDARD_PAD, self.alphabet.symbols + self.alphabet.pad
            )
            to_standard = str.maketrans(self.alphabet.symbols, standard.symbols)
        object.__setattr__(self, "_from_standard", from_standard)
        object.__setattr__(self, "_to_standard", to_standard)

    @classmethod
    def from_preset(cls, name: str) -> Engine:
        """Get one of the named preset engines.

        Args:
            name: One of ``ENGINE_NAMES``.

        Returns:
            The preset engine.

        Raises:
            UnknownEngineError: If the name is not a preset.
        """
        try:
            return _PRESETS[name]
        except (KeyError, TypeError):
            raise UnknownEngineError(name) from None

    @classmethod
    def from_parts(cls, alphabet: Alphabet, config: EngineConfig) -> Engine:
        """Combine any alphabet with any config."""
        engine = cls(alphabet, config)
        logger.debug("built engine for alphabet %s with %s", alphabet.as_string(), config.to_dict())
        return engine

    def encode(self, data: BytesLike | str) -> str:
        """Encode bytes to base64 text.

        Every 3 input bytes become 4 symbols. A final 1- or 2-byte window is
        zero-filled and, when the config asks for it, padded to 4 symbols.

        Args:
            data: Bytes to encode. A str is encoded as its UTF-8 bytes.

        Returns:
            The encoded text.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        text = base64.b64encode(data).decode("ascii")
        if not self.config.encode_padding:
            text = text.rstrip(_STANDARD_PAD)
        if self._from_standard is not None:
            text = text.translate(self._from_standard)
        return text

    def decode(self, data: str | BytesLike) -> bytes:
        """Decode base64 text to bytes.

        Checks run in a fixed order and the first failure is raised: unknown
        symbols, length, padding, then trailing bits.

        Args:
            data: Encoded text. Bytes are read one symbol per byte.

        Returns:
            The decoded bytes.

        Raises:
            InvalidByteError: A symbol outside the alphabet, or a pad symbol
                followed by a data symbol.
            InvalidLengthError: The final group holds a single symbol.
            InvalidPaddingError: Padding violates the decode padding mode.
            InvalidTrailingBitsError: The last symbol of a partial group has
                unused bits set and the config does not allow it.
        """
        return self.decode_at(as_text(data), 0)

    def decode_at(self, text: str, offset: int) -> bytes:
        """Decode the tail of a larger input that starts ``offset`` symbols in.

        ``offset`` must be a multiple of 4. Error positions are reported
        relative to the larger input.
        """
        alphabet = self.alphabet
        body_end = len(text.rstrip(alphabet.pad))

        foreign = alphabet.find_foreign(text, 0, body_end)
        if foreign >= 0:
            raise InvalidByteError(offset + foreign, text[foreign])

        partial = body_end % 4
        if partial == 1:
            raise InvalidLengthError(offset + body_end)

        pad_count = len(text) - body_end
        mode = self.config.decode_padding_mode
        if pad_count:
            if (
                mode is DecodePaddingMode.REQUIRE_NONE
                or partial == 0
                or partial + pad_count > 4
                or (mode is DecodePaddingMode.REQUIRE_CANONICAL and partial + pad_count != 4)
            ):
                raise InvalidPaddingError(offset + body_end)
        elif partial and mode is DecodePaddingMode.REQUIRE_CANONICAL:
            raise InvalidPaddingError(offset + body_end)

        if partial and not self.config.decode_allow_trailing_bits:
            last = body_end - 1
            if alphabet.value_of(text[last]) & _TRAILING_BITS_MASK[partial]:
                raise InvalidTrailingBitsError(offset + last, text[last])

        body = self._standardize(text[:body_end])
        if partial:
            body += _STANDARD_PAD * (4 - partial)
        return base64.b64decode(body)

    def decode_groups(self, text: str, offset: int) -> bytes:
        """Decode complete, unpadded 4-symbol groups from the middle of an input.

        Used by streaming decode for everything before the final group.
        ``len(text)`` and ``offset`` must be multiples of 4.

        Raises:
            InvalidByteError: A symbol outside the alphabet, pad included.
        """
        foreign = self.alphabet.find_foreign(text)
        if foreign >= 0:
            raise InvalidByteError(offset + foreign, text[foreign])
        return base64.b64decode(self._standardize(text))

    def encoded_len(self, size: int) -> int:
        """Number of symbols ``encode`` produces for ``size`` input bytes."""
        complete, leftover = divmod(size, 3)
        if not leftover:
            return complete * 4
        return complete * 4 + (4 if self.config.encode_padding else leftover + 1)

    @staticmethod
    def decoded_len_estimate(length: int) -> int:
        """Upper bound on the bytes decoded from ``length`` symbols."""
        return (length + 3) // 4 * 3

    def describe(self) -> str:
        """Render the engine for diagnostics."""
        config = self.config.describe().replace("\n", "\n    ")
        return (
            "Engine {\n"
            f"    alphabet: {self.alphabet.symbols!r},\n"
            f"    pad: {self.alphabet.pad!r},\n"
            f"    config: {config},\n"
            "}"
        )

    def _standardize(self, text: str) -> str:
        if self._to_standard is None:
            return text
        return text.translate(self._to_standard)


STANDARD = Engine(alphabets.STANDARD, DEFAULT_CONFIG)
STANDARD_NO_PAD = Engine(alphabets.STANDARD, NO_PAD_CONFIG)
URL_SAFE = Engine(alphabets.URL_SAFE, DEFAULT_CONFIG)
URL_SAFE_NO_PAD = Engine(alphabets.URL_SAFE, NO_PAD_CONFIG)

_PRESETS: dict[str, Engine] = {
    "standard": STANDARD,
    "standard_no_pad": STANDARD_NO_PAD,
    "url_safe": URL_SAFE,
    "url_safe_no_pad": URL_SAFE_NO_PAD,
}

ENGINE_NAMES = tuple(_PRESETS)
