"""Batch encoding and decoding.

This module applies an engine across ordered collections of independent
values. Batch encode and decode never abort on one item: each slot of the
result is either ``Ok(value)`` or ``Missing``. The single-value helpers
``decode_one_strict`` and ``decode_as_string`` raise instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from collections.abc import Iterable, Iterator, Sequence
from typing import Generic, TypeVar, overload

from b64engine.engine import STANDARD, as_text
from b64engine.exceptions import DecodeError, Utf8Error
from b64engine.interfaces.engine import IEngine
from b64engine.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_VALUE_TYPES = (str, bytes, bytearray, memoryview)

Encoded = str | bytes | bytearray | memoryview


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A batch slot holding a value.

    Attributes:
        value: The encoded text or decoded bytes.
    """

    value: T


@dataclass(frozen=True)
class Missing:
    """A batch slot with no value: the input was absent or did not decode."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing()


class BatchResult(Sequence[Ok[T] | Missing], Generic[T]):
    """Ordered per-item outcomes, one for each input item."""

    __slots__ = ("_outcomes",)

    def __init__(self, outcomes: Iterable[Ok[T] | Missing]) -> None:
        self._outcomes = tuple(outcomes)

    @overload
    def __getitem__(self, index: int) -> Ok[T] | Missing: ...

    @overload
    def __getitem__(self, index: slice) -> BatchResult[T]: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return BatchResult(self._outcomes[index])
        return self._outcomes[index]

    def __len__(self) -> int:
        return len(self._outcomes)

    def __iter__(self) -> Iterator[Ok[T] | Missing]:
        return iter(self._outcomes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BatchResult):
            return self._outcomes == other._outcomes
        if isinstance(other, (list, tuple)):
            return self._outcomes == tuple(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"BatchResult({list(self._outcomes)!r})"

    def values(self, default: T | None = None) -> list[T | None]:
        """Unwrap every slot, substituting ``default`` for missing ones."""
        return [o.value if isinstance(o, Ok) else default for o in self._outcomes]

    def missing_indices(self) -> list[int]:
        """Indices of the slots without a value."""
        return [i for i, o in enumerate(self._outcomes) if isinstance(o, Missing)]

    @property
    def all_ok(self) -> bool:
        return not any(isinstance(o, Missing) for o in self._outcomes)


def encode_many(
    items: Iterable[bytes | bytearray | memoryview | str | Ok | Missing | None],
    engine: IEngine | None = None,
) -> BatchResult[str]:
    """Encode each item independently.

    Args:
        items: Bytes-like values or strings (encoded as UTF-8). ``None`` and
            ``MISSING`` pass through as missing slots; ``Ok`` values are
            unwrapped.
        engine: Engine to encode with; defaults to the standard engine.

    Returns:
        One outcome per item, in input order.

    Raises:
        TypeError: If an item is of an unsupported type.
    """
    engine = engine or STANDARD
    outcomes: list[Ok[str] | Missing] = []
    for index, item in enumerate(items):
        if isinstance(item, Ok):
            item = item.value
        if item is None or isinstance(item, Missing):
            outcomes.append(MISSING)
        elif isinstance(item, _VALUE_TYPES):
            outcomes.append(Ok(engine.encode(item)))
        else:
            raise TypeError(
                f"item {index}: expected bytes-like, str or None, got {type(item).__name__}"
            )
    return BatchResult(outcomes)


def decode_many(
    items: Iterable[object],
    engine: IEngine | None = None,
) -> BatchResult[bytes]:
    """Decode each item independently.

    Decode failures are not raised: the failing item becomes a missing slot
    and the remaining items are unaffected. Items that are neither text nor
    bytes-like are also missing.

    Args:
        items: Encoded text values, or bytes of one symbol per byte.
        engine: Engine to decode with; defaults to the standard engine.

    Returns:
        One outcome per item, in input order.
    """
    engine = engine or STANDARD
    outcomes: list[Ok[bytes] | Missing] = []
    for index, item in enumerate(items):
        if isinstance(item, Ok):
            item = item.value
        if not isinstance(item, _VALUE_TYPES):
            outcomes.append(MISSING)
            continue
        try:
            outcomes.append(Ok(engine.decode(item)))
        except DecodeError as e:
            logger.debug("batch item %d left missing: %s", index, e)
            outcomes.append(MISSING)
    return BatchResult(outcomes)


def decode_one_strict(
    text: Encoded,
    engine: IEngine | None = None,
) -> bytes:
    """Decode a single value, raising the engine's error on failure.

    Raises:
        DecodeError: If the text is malformed.
    """
    engine = engine or STANDARD
    return engine.decode(text)


def decode_as_string(
    text: Encoded,
    engine: IEngine | None = None,
    separator: str | None = None,
) -> str | list[str]:
    """Decode base64 text to UTF-8 text.

    Without a separator the whole input is one value. With a separator the
    input is split first and every piece is decoded; the first failing piece
    aborts the call.

    Args:
        text: Encoded text.
        engine: Engine to decode with; defaults to the standard engine.
        separator: Optional separator between encoded pieces.

    Returns:
        The decoded string, or a list of strings when a separator is given.

    Raises:
        DecodeError: If a piece is malformed.
        Utf8Error: If a decoded piece is not valid UTF-8.
    """
    engine = engine or STANDARD
    if separator is None:
        return _decode_utf8(engine, text, 0)
    return [
        _decode_utf8(engine, piece, index)
        for index, piece in enumerate(as_text(text).split(separator))
    ]


def _decode_utf8(engine: IEngine, text: Encoded, index: int) -> str:
    data = engine.decode(text)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise Utf8Error(index, e.start) from e
