"""Base64 alphabets.

This module provides the Alphabet value type: 64 distinct symbols indexed by
their 6-bit value, plus the pad symbol, and the named preset alphabets.
"""

from __future__ import annotations

import re
import string
from dataclasses import dataclass, field

from b64engine.exceptions import InvalidAlphabetError, UnknownAlphabetError

SYMBOL_COUNT = 64
DEFAULT_PAD = "="

_PRINTABLE = frozenset(chr(c) for c in range(0x20, 0x7F))


@dataclass(frozen=True)
class Alphabet:
    """An ordered set of 64 symbols plus a pad symbol.

    The symbol at index ``i`` encodes the 6-bit value ``i``. Every symbol,
    the pad included, is a distinct printable ASCII character.

    Attributes:
        symbols: The 64 symbols, in value order.
        pad: The pad symbol.
    """

    symbols: str
    pad: str = DEFAULT_PAD
    _values: dict[str, int] = field(init=False, repr=False, compare=False)
    _foreign: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.symbols) != SYMBOL_COUNT:
            raise InvalidAlphabetError(
                f"alphabet must have {SYMBOL_COUNT} symbols, got {len(self.symbols)}"
            )
        if len(self.pad) != 1:
            raise InvalidAlphabetError(f"pad must be a single character, got {self.pad!r}")

        values: dict[str, int] = {}
        for index, symbol in enumerate(self.symbols + self.pad):
            if symbol not in _PRINTABLE:
                raise InvalidAlphabetError(
                    f"symbol {symbol!r} at index {index} is not printable ASCII"
                )
            if symbol in values:
                raise InvalidAlphabetError(
                    f"duplicate symbol {symbol!r} at indices {values[symbol]} and {index}"
                )
            values[symbol] = index
        del values[self.pad]

        # Frozen dataclass: derived lookup state is set once here
        object.__setattr__(self, "_values", values)
        object.__setattr__(
            self, "_foreign", re.compile(f"[^{re.escape(self.symbols)}]")
        )

    @classmethod
    def from_preset(cls, name: str) -> Alphabet:
        """Get one of the named preset alphabets.

        Args:
            name: One of ``PRESET_NAMES``.

        Returns:
            The preset alphabet.

        Raises:
            UnknownAlphabetError: If the name is not a preset.
        """
        try:
            return _PRESETS[name]
        except (KeyError, TypeError):
            raise UnknownAlphabetError(name) from None

    @classmethod
    def from_chars(cls, chars: str) -> Alphabet:
        """Build a custom alphabet.

        Args:
            chars: 64 symbols, optionally followed by an explicit pad symbol.
                The pad defaults to ``=`` when omitted.

        Returns:
            The new alphabet.

        Raises:
            InvalidAlphabetError: If the length is wrong, a symbol repeats,
                or a symbol is not printable ASCII.
        """
        if not isinstance(chars, str):
            raise InvalidAlphabetError(f"alphabet must be a str, got {type(chars).__name__}")
        if len(chars) == SYMBOL_COUNT:
            return cls(chars)
        if len(chars) == SYMBOL_COUNT + 1:
            return cls(chars[:SYMBOL_COUNT], chars[SYMBOL_COUNT])
        raise InvalidAlphabetError(
            f"alphabet must have {SYMBOL_COUNT} or {SYMBOL_COUNT + 1} characters, got {len(chars)}"
        )

    def as_string(self) -> str:
        """Render the alphabet as characters accepted by ``from_chars``.

        The pad is appended only when it is not the default ``=``.
        """
        if self.pad == DEFAULT_PAD:
            return self.symbols
        return self.symbols + self.pad

    def value_of(self, symbol: str) -> int | None:
        """Get the 6-bit value of a symbol, or None if it is not in the alphabet."""
        return self._values.get(symbol)

    def find_foreign(self, text: str, start: int = 0, end: int | None = None) -> int:
        """Find the first character of ``text[start:end]`` outside the 64 symbols.

        Returns:
            Its index in ``text``, or -1 if every character is a symbol.
        """
        match = self._foreign.search(text, start, len(text) if end is None else end)
        return -1 if match is None else match.start()

    def __len__(self) -> int:
        return SYMBOL_COUNT

    def __str__(self) -> str:
        return self.as_string()


STANDARD = Alphabet(string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/")
URL_SAFE = Alphabet(string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_")
CRYPT = Alphabet("./" + string.digits + string.ascii_uppercase + string.ascii_lowercase)
BCRYPT = Alphabet("./" + string.ascii_uppercase + string.ascii_lowercase + string.digits)
IMAP_MUTF7 = Alphabet(string.ascii_uppercase + string.ascii_lowercase + string.digits + "+,")
# BinHex 4.0 (RFC 1741)
BIN_HEX = Alphabet("!\"#$%&'()*+,-012345689@ABCDEFGHIJKLMNPQRSTUVXYZ[`abcdefhijklmpqr")

_PRESETS: dict[str, Alphabet] = {
    "bcrypt": BCRYPT,
    "bin_hex": BIN_HEX,
    "crypt": CRYPT,
    "imap_mutf7": IMAP_MUTF7,
    "standard": STANDARD,
    "url_safe": URL_SAFE,
}

PRESET_NAMES = tuple(_PRESETS)
