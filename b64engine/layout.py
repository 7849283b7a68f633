"""Text layout utilities for encoded text.

These helpers split encoded text into fixed-width lines and join lines back
together, as needed when embedding base64 in PEM or MIME bodies. They work on
text only and never check that it is valid base64.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from b64engine.batch import Missing, Ok
from b64engine.exceptions import InvalidChunkWidthError


def chunk(
    encoded: str | Iterable[str | Ok[str] | Missing | None] | None,
    width: int,
) -> list[str] | list[list[str]]:
    """Split encoded text into chunks of at most ``width`` characters.

    Args:
        encoded: One string, or a collection of items such as the output of
            ``encode_many``. Items are strings, ``Ok`` wrapping a string,
            ``Missing`` or ``None``; absent items yield no chunks.
        width: Chunk width; a positive multiple of 4 so chunks hold whole
            symbol groups.

    Returns:
        The chunk list of a single string (empty for ``None``), or one chunk
        list per item for a collection.

    Raises:
        InvalidChunkWidthError: If ``width`` is not a positive multiple of 4.
        TypeError: If an item is not text or absent.

    Example:
        >>> chunk("SGVsbG8=", 4)
        ['SGVs', 'bG8=']
        >>> chunk(["SGVsbG8="], 4)
        [['SGVs', 'bG8=']]
    """
    if isinstance(width, bool) or not isinstance(width, int) or width <= 0 or width % 4:
        raise InvalidChunkWidthError(width)

    if encoded is None or isinstance(encoded, str):
        return _split(encoded, width)

    result: list[list[str]] = []
    for index, item in enumerate(encoded):
        if isinstance(item, Ok):
            item = item.value
        if item is None or isinstance(item, Missing):
            result.append([])
        elif isinstance(item, str):
            result.append(_split(item, width))
        else:
            raise TypeError(f"item {index}: expected str or None, got {type(item).__name__}")
    return result


def wrap(
    chunks: Sequence[str] | Sequence[Sequence[str]],
    newline: str = "\n",
) -> str | list[str]:
    """Join chunks with a newline string.

    Args:
        chunks: A flat sequence of strings, or a sequence of chunk sequences
            such as the output of ``chunk``.
        newline: String placed between chunks.

    Returns:
        One string for flat input, or one string per item for nested input.

    Raises:
        TypeError: If the chunks are neither all strings nor all sequences
            of strings.

    Example:
        >>> wrap(["SGVs", "bG8="], "\\n")
        'SGVs\\nbG8='
    """
    if isinstance(chunks, str):
        return chunks

    items = list(chunks)
    if all(isinstance(item, str) for item in items):
        return newline.join(items)
    if any(isinstance(item, str) for item in items):
        raise TypeError("cannot mix strings and chunk sequences")
    return [newline.join(_strings(item, index)) for index, item in enumerate(items)]


def _split(text: str | None, width: int) -> list[str]:
    if not text:
        return []
    return [text[i : i + width] for i in range(0, len(text), width)]


def _strings(item: object, index: int) -> list[str]:
    if not isinstance(item, (list, tuple)):
        raise TypeError(f"item {index}: expected a sequence of str, got {type(item).__name__}")
    if not all(isinstance(part, str) for part in item):
        raise TypeError(f"item {index}: chunks must be str")
    return list(item)
