"""Tests for alphabet presets and custom alphabets."""

from __future__ import annotations

import string

import pytest

from b64engine.alphabet import (
    BIN_HEX,
    CRYPT,
    PRESET_NAMES,
    STANDARD,
    URL_SAFE,
    Alphabet,
)
from b64engine.exceptions import InvalidAlphabetError, UnknownAlphabetError

STANDARD_SYMBOLS = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"


@pytest.mark.parametrize("name", PRESET_NAMES)
def test_presets_are_well_formed(name: str) -> None:
    """Every preset has 64 distinct symbols and the default pad."""
    alphabet = Alphabet.from_preset(name)

    assert len(alphabet.symbols) == 64
    assert len(set(alphabet.symbols)) == 64
    assert alphabet.pad == "="
    assert alphabet.pad not in alphabet.symbols


def test_preset_names() -> None:
    """All six named presets are available."""
    assert set(PRESET_NAMES) == {
        "bcrypt",
        "bin_hex",
        "crypt",
        "imap_mutf7",
        "standard",
        "url_safe",
    }


def test_preset_symbol_tables() -> None:
    """Preset tables put the expected symbols at the expected values."""
    assert STANDARD.as_string() == STANDARD_SYMBOLS
    assert URL_SAFE.symbols[62:] == "-_"
    assert Alphabet.from_preset("imap_mutf7").symbols[62:] == "+,"
    assert CRYPT.symbols[:12] == "./0123456789"
    assert Alphabet.from_preset("bcrypt").symbols[:3] == "./A"
    assert BIN_HEX.symbols[0] == "!"
    assert BIN_HEX.symbols[-1] == "r"


def test_unknown_preset() -> None:
    """Unrecognized preset names raise UnknownAlphabetError."""
    with pytest.raises(UnknownAlphabetError) as excinfo:
        Alphabet.from_preset("base32")

    assert excinfo.value.name == "base32"


def test_from_chars_default_pad() -> None:
    """64 characters build an alphabet padded with '='."""
    alphabet = Alphabet.from_chars(STANDARD_SYMBOLS)

    assert alphabet == STANDARD
    assert alphabet.pad == "="


def test_from_chars_explicit_pad() -> None:
    """A 65th character is the pad symbol."""
    alphabet = Alphabet.from_chars(STANDARD_SYMBOLS + "~")

    assert alphabet.symbols == STANDARD_SYMBOLS
    assert alphabet.pad == "~"
    assert alphabet != STANDARD


@pytest.mark.parametrize(
    "chars",
    [
        STANDARD_SYMBOLS,
        STANDARD_SYMBOLS + "~",
        STANDARD_SYMBOLS[:-1] + "=" + "*",
    ],
)
def test_as_string_round_trips(chars: str) -> None:
    """as_string renders characters that rebuild the same alphabet."""
    alphabet = Alphabet.from_chars(chars)

    assert alphabet.as_string() == chars
    assert Alphabet.from_chars(alphabet.as_string()) == alphabet
    assert str(alphabet) == chars


@pytest.mark.parametrize(
    "chars",
    [
        "",
        STANDARD_SYMBOLS[:63],
        STANDARD_SYMBOLS + "==",
        "A" * 64,
        STANDARD_SYMBOLS[:-1] + "A",
        STANDARD_SYMBOLS + "A",
        STANDARD_SYMBOLS[:-1] + "\n",
        STANDARD_SYMBOLS[:-1] + "é",
    ],
)
def test_from_chars_rejects_malformed(chars: str) -> None:
    """Wrong lengths, repeats, pad collisions and non-printable symbols are rejected."""
    with pytest.raises(InvalidAlphabetError):
        Alphabet.from_chars(chars)


def test_from_chars_rejects_non_str() -> None:
    """Only text can define an alphabet."""
    with pytest.raises(InvalidAlphabetError):
        Alphabet.from_chars(STANDARD_SYMBOLS.encode("ascii"))  # type: ignore[arg-type]


def test_value_of() -> None:
    """Symbols map to their index; the pad and strangers map to None."""
    assert STANDARD.value_of("A") == 0
    assert STANDARD.value_of("/") == 63
    assert URL_SAFE.value_of("-") == 62
    assert STANDARD.value_of("=") is None
    assert STANDARD.value_of("-") is None


def test_find_foreign() -> None:
    """find_foreign reports the first character outside the symbols."""
    assert STANDARD.find_foreign("SGVsbG8") == -1
    assert STANDARD.find_foreign("SGV$bG8") == 3
    assert STANDARD.find_foreign("SG-_", 0, 2) == -1
    assert URL_SAFE.find_foreign("ab+c") == 2
    assert BIN_HEX.find_foreign("!\"#]") == 3


def test_alphabet_is_immutable() -> None:
    """Alphabets cannot be modified after construction."""
    with pytest.raises(AttributeError):
        STANDARD.pad = "~"  # type: ignore[misc]
    assert len(STANDARD) == 64
