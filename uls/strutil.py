"""String and number helpers: splitting, trimming, searching, sorting and encoding."""

from __future__ import annotations

import itertools
import math
import re
from collections.abc import MutableSequence, Sequence

WHITESPACE = " \t\n\v\r\f"

_WHITESPACE_RUN = re.compile(r"[ \t\n\v\r\f]+")
_ULONG_MASK = (1 << 64) - 1
_HEX_LETTERS = frozenset("abcdefABCDEF")


def is_space(char: str) -> bool:
    """Return True if ``char`` is a single whitespace character."""
    return len(char) == 1 and char in WHITESPACE


def count_words(text: str, delimiter: str) -> int:
    """Count the non-empty runs of ``text`` separated by ``delimiter``."""
    return sum(1 for part in text.split(delimiter) if part)


def strtrim(text: str) -> str:
    """Remove leading and trailing whitespace."""
    return text.strip(WHITESPACE)


def del_extra_spaces(text: str) -> str:
    """Trim ``text`` and collapse every whitespace run into one space."""
    return " ".join(word for word in _WHITESPACE_RUN.split(text) if word)


def strsplit(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on ``delimiter``, dropping empty pieces."""
    return [part for part in text.split(delimiter) if part]


def count_substr(text: str, sub: str) -> int:
    """Count occurrences of ``sub`` in ``text``, overlapping ones included."""
    if not sub:
        return 0
    return len(re.findall(f"(?={re.escape(sub)})", text))


def get_substr_index(text: str, sub: str) -> int:
    """Return the index of the first occurrence of ``sub``, or -1."""
    if not text:
        return -1
    return text.find(sub)


def replace_substr(text: str, sub: str, replace: str) -> str:
    """Replace every occurrence of ``sub`` in ``text`` with ``replace``."""
    if not sub:
        return text
    return text.replace(sub, replace)


def hex_to_nbr(hex_str: str) -> int:
    """Parse a hexadecimal string as an unsigned 64-bit number.

    A letter that is not a hex digit makes the whole result 0; any other
    non-digit character repeats the value of the previous digit.
    """
    result = 0
    digit = 0
    for char in hex_str:
        result *= 16
        if "0" <= char <= "9":
            digit = ord(char) - ord("0")
        elif char.isascii() and char.isalpha():
            if char not in _HEX_LETTERS:
                return 0
            digit = int(char, 16)
        result += digit
    return result & _ULONG_MASK


def nbr_to_hex(number: int) -> str:
    """Format ``number`` as an unsigned 64-bit lower-case hex string."""
    return format(number & _ULONG_MASK, "x")


def integer_sqrt(x: int) -> int:
    """Return the square root of a perfect square, otherwise 0."""
    if x < 0:
        return 0
    root = math.isqrt(x)
    return root if root * root == x else 0


def power(base: float, exponent: int) -> float:
    """Raise ``base`` to a non-negative integer ``exponent`` by repeated multiplication."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    return math.prod(itertools.repeat(base, exponent), start=1.0)


def binary_search(items: Sequence[str], target: str) -> tuple[int, int]:
    """Search a sorted sequence.

    Returns ``(index, steps)`` where ``steps`` is the number of probes made,
    or ``(-1, 0)`` when ``target`` is absent.
    """
    first, last = 0, len(items) - 1
    steps = 0
    while first <= last:
        mid = (first + last) // 2
        steps += 1
        if items[mid] < target:
            first = mid + 1
        elif items[mid] == target:
            return mid, steps
        else:
            last = mid - 1
    return -1, 0


def bubble_sort(items: MutableSequence[str]) -> int:
    """Sort ``items`` in place and return the number of swaps made."""
    swaps = 0
    size = len(items)
    for _ in range(size):
        for j in range(size - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swaps += 1
    return swaps


def quicksort(items: MutableSequence[str]) -> int:
    """Sort ``items`` in place by length and return the number of partitions made."""
    partitions = 0
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        pivot_len = len(items[right])
        boundary = left - 1
        for j in range(left, right):
            if len(items[j]) < pivot_len:
                boundary += 1
                items[boundary], items[j] = items[j], items[boundary]
        items[boundary + 1], items[right] = items[right], items[boundary + 1]
        pending.append((left, boundary))
        pending.append((boundary + 2, right))
        partitions += 1
    return partitions


def encode_unicode(codepoint: int) -> bytes:
    """Encode a code point as UTF-8 bytes, surrogates included."""
    if codepoint < 0:
        raise ValueError("code point must not be negative")
    if codepoint < 0x80:
        return bytes([codepoint])
    if codepoint < 0x800:
        return bytes([0xC0 | (codepoint >> 6 & 0x1F), 0x80 | (codepoint & 0x3F)])
    if codepoint < 0x10000:
        return bytes(
            [
                0xE0 | (codepoint >> 12 & 0x0F),
                0x80 | (codepoint >> 6 & 0x3F),
                0x80 | (codepoint & 0x3F),
            ]
        )
    return bytes(
        [
            0xF0 | (codepoint >> 18 & 0x07),
            0x80 | (codepoint >> 12 & 0x3F),
            0x80 | (codepoint >> 6 & 0x3F),
            0x80 | (codepoint & 0x3F),
        ]
    )