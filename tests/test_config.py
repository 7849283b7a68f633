"""Tests for decode padding modes and engine configs."""

from __future__ import annotations

import pytest

from b64engine.config import DEFAULT_CONFIG, NO_PAD_CONFIG, DecodePaddingMode, EngineConfig
from b64engine.exceptions import UnknownPaddingModeError


@pytest.mark.parametrize(
    ("name", "mode"),
    [
        ("indifferent", DecodePaddingMode.INDIFFERENT),
        ("canonical", DecodePaddingMode.REQUIRE_CANONICAL),
        ("none", DecodePaddingMode.REQUIRE_NONE),
        (DecodePaddingMode.REQUIRE_NONE, DecodePaddingMode.REQUIRE_NONE),
    ],
)
def test_padding_mode_from_name(name: str, mode: DecodePaddingMode) -> None:
    """The three mode names resolve to their modes."""
    assert DecodePaddingMode.from_name(name) is mode


@pytest.mark.parametrize("name", ["strict", "Canonical", "", None, ["none"]])
def test_unknown_padding_mode(name: object) -> None:
    """Anything else raises UnknownPaddingModeError."""
    with pytest.raises(UnknownPaddingModeError):
        DecodePaddingMode.from_name(name)  # type: ignore[arg-type]


def test_defaults() -> None:
    """Default configs pad on encode and require canonical padding on decode."""
    config = EngineConfig.new()

    assert config == DEFAULT_CONFIG
    assert config.encode_padding is True
    assert config.decode_allow_trailing_bits is False
    assert config.decode_padding_mode is DecodePaddingMode.REQUIRE_CANONICAL


def test_new_resolves_mode() -> None:
    """new() accepts mode names."""
    config = EngineConfig.new(False, True, "indifferent")

    assert config.encode_padding is False
    assert config.decode_allow_trailing_bits is True
    assert config.decode_padding_mode is DecodePaddingMode.INDIFFERENT


def test_new_rejects_unknown_mode() -> None:
    """new() fails on an unknown mode name."""
    with pytest.raises(UnknownPaddingModeError):
        EngineConfig.new(True, False, "sometimes")


def test_with_methods_copy() -> None:
    """Builder methods return modified copies and leave the original alone."""
    config = DEFAULT_CONFIG.with_encode_padding(False).with_decode_padding_mode("none")

    assert config == NO_PAD_CONFIG
    assert DEFAULT_CONFIG.encode_padding is True
    assert DEFAULT_CONFIG.with_decode_allow_trailing_bits(True).decode_allow_trailing_bits


def test_to_dict() -> None:
    """to_dict renders the mode by name."""
    assert NO_PAD_CONFIG.to_dict() == {
        "encode_padding": False,
        "decode_allow_trailing_bits": False,
        "decode_padding_mode": "none",
    }


def test_describe() -> None:
    """describe lists every field."""
    text = EngineConfig.new(True, True, "indifferent").describe()

    assert text.startswith("EngineConfig {")
    assert "encode_padding: True" in text
    assert "decode_allow_trailing_bits: True" in text
    assert "decode_padding_mode: indifferent" in text


def test_config_is_immutable() -> None:
    """Configs are frozen values."""
    with pytest.raises(AttributeError):
        DEFAULT_CONFIG.encode_padding = False  # type: ignore[misc]
