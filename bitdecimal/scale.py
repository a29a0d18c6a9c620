"""Bringing two decimals to a common scale and comparing their mantissas."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from bitdecimal.decimal import MANTISSA_WORDS, WORD_BITS, WORD_MASK, Decimal128


class Ordering(Enum):
    """How the first value relates to the second."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _compose(words: Iterable[int]) -> int:
    return sum(word << (WORD_BITS * position) for position, word in enumerate(words))


def _split(value: int, count: int) -> tuple[int, ...]:
    return tuple((value >> (WORD_BITS * position)) & WORD_MASK for position in range(count))


def multiply_mantissa(words: Iterable[int], factor: int) -> tuple[tuple[int, ...], bool]:
    """Multiply little-endian 32-bit words by ``factor``.

    Returns the truncated words and whether the product overflowed them.
    """
    words = tuple(words)
    if not 0 <= factor <= WORD_MASK:
        raise ValueError(f"factor out of range: {factor}")
    width = WORD_BITS * len(words)
    product = _compose(words) * factor
    return _split(product, len(words)), (product >> width) != 0


def _raise_to(value: Decimal128, target: int) -> tuple[tuple[int, ...], bool]:
    words = value.bits[:MANTISSA_WORDS]
    overflow = False
    for _ in range(value.scale, target):
        words, overflow = multiply_mantissa(words, 10)
        if overflow:
            break
    return words, overflow


def equalize_scales(
    value_1: Decimal128, value_2: Decimal128
) -> tuple[Ordering, Decimal128, Decimal128]:
    """Scale both mantissas up to the larger of the two scales.

    The flag words are left as they were. If exactly one mantissa overflows,
    the ordering says that value is the larger; otherwise it is EQUAL.
    """
    target = max(value_1.scale, value_2.scale)
    words_1, overflow_1 = _raise_to(value_1, target)
    words_2, overflow_2 = _raise_to(value_2, target)
    if overflow_1 and not overflow_2:
        ordering = Ordering.GREATER
    elif overflow_2 and not overflow_1:
        ordering = Ordering.LESS
    else:
        ordering = Ordering.EQUAL
    return (
        ordering,
        Decimal128(words_1 + (value_1.bits[3],)),
        Decimal128(words_2 + (value_2.bits[3],)),
    )


def compare_mantissas(value_1: Decimal128, value_2: Decimal128) -> Ordering:
    """Compare the 96-bit mantissas, ignoring sign and scale."""
    left = _compose(value_1.bits[:MANTISSA_WORDS])
    right = _compose(value_2.bits[:MANTISSA_WORDS])
    if left > right:
        return Ordering.GREATER
    if left < right:
        return Ordering.LESS
    return Ordering.EQUAL


def compare_aligned(value_1: Decimal128, value_2: Decimal128) -> Ordering:
    """Compare magnitudes after bringing both values to a common scale."""
    ordering, aligned_1, aligned_2 = equalize_scales(value_1, value_2)
    if ordering is Ordering.EQUAL:
        ordering = compare_mantissas(aligned_1, aligned_2)
    return ordering