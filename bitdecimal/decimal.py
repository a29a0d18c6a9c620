"""A 128-bit decimal value: a 96-bit mantissa and a word of sign and scale flags."""

from __future__ import annotations

import struct
from dataclasses import dataclass

WORD_BITS = 32
WORD_COUNT = 4
TOTAL_BITS = WORD_BITS * WORD_COUNT
MANTISSA_WORDS = 3
WORD_MASK = 0xFFFFFFFF
FLAGS_START = WORD_BITS * MANTISSA_WORDS
SCALE_FIRST_BIT = 16
SCALE_LAST_BIT = 23
SIGN_BIT = 31
MIN_SCALE = 0
MAX_SCALE = 28

_TOP_BIT = 1 << (WORD_BITS - 1)
_SIGN_MASK = 1 << SIGN_BIT
# The scale writer covers one bit fewer than the reader.
_SCALE_WRITE_WIDTH = SCALE_LAST_BIT - SCALE_FIRST_BIT
_SCALE_READ_WIDTH = _SCALE_WRITE_WIDTH + 1


@dataclass(frozen=True)
class Decimal128:
    """Four little-endian 32-bit words; the last one holds sign and scale."""

    bits: tuple[int, int, int, int] = (0, 0, 0, 0)

    def __post_init__(self) -> None:
        words = tuple(self.bits)
        if len(words) != WORD_COUNT:
            raise ValueError(f"expected {WORD_COUNT} words, got {len(words)}")
        for word in words:
            if not isinstance(word, int) or not 0 <= word <= WORD_MASK:
                raise ValueError(f"word out of 32-bit range: {word!r}")
        object.__setattr__(self, "bits", words)

    def bit(self, index: int) -> int:
        """Return bit ``index`` (0..127) as 0 or 1."""
        word, offset = self._locate(index)
        return (self.bits[word] >> offset) & 1

    def with_bit(self, index: int, bit: int) -> Decimal128:
        """Return a copy with bit ``index`` set when ``bit`` is 1, cleared otherwise."""
        word, offset = self._locate(index)
        words = list(self.bits)
        if bit == 1:
            words[word] |= 1 << offset
        else:
            words[word] &= ~(1 << offset) & WORD_MASK
        return Decimal128(tuple(words))

    @property
    def negative(self) -> bool:
        """True when the sign bit is set."""
        return bool(self.bits[3] & _SIGN_MASK)

    def with_sign(self, negative: bool) -> Decimal128:
        """Return a copy with the sign bit set or cleared."""
        flags = self.bits[3] | _SIGN_MASK if negative else self.bits[3] & ~_SIGN_MASK
        return Decimal128(self.bits[:3] + (flags,))

    @property
    def scale(self) -> int:
        """The scale factor stored in bits 16..23 of the flag word."""
        return (self.bits[3] >> SCALE_FIRST_BIT) & ((1 << _SCALE_READ_WIDTH) - 1)

    def with_scale(self, scale: int) -> Decimal128:
        """Return a copy whose flag bits 16..22 hold the low bits of ``scale``."""
        field = ((1 << _SCALE_WRITE_WIDTH) - 1) << SCALE_FIRST_BIT
        flags = (self.bits[3] & ~field) | ((scale << SCALE_FIRST_BIT) & field)
        return Decimal128(self.bits[:3] + (flags,))

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return not any(self.bits[:3])

    def is_correct(self) -> bool:
        """True when the reserved bits of the flag word are all clear."""
        flags = self.bits[3]
        reserved_low = flags & 0xFFFF
        reserved_high = (flags >> 24) & 0x7F
        return not reserved_low and not reserved_high

    def shift_left(self, count: int) -> Decimal128:
        """Shift each mantissa word left; only the top bit of a word carries over."""
        if count < 0:
            return self.shift_right(-count)
        if count == 0:
            return self
        w0, w1, w2, flags = self.bits
        return Decimal128(
            (
                (w0 << count) & WORD_MASK,
                ((w1 << count) + bit_of_int(w0, WORD_BITS - 1)) & WORD_MASK,
                ((w2 << count) + bit_of_int(w1, WORD_BITS - 1)) & WORD_MASK,
                flags,
            )
        )

    def shift_right(self, count: int) -> Decimal128:
        """Shift each mantissa word right; only the low bit of a word carries over."""
        if count < 0:
            return self.shift_left(-count)
        if count == 0:
            return self
        w0, w1, w2, flags = self.bits
        low_mask = ~_TOP_BIT & WORD_MASK
        return Decimal128(
            (
                ((w0 >> count) & low_mask) + (bit_of_int(w1, 0) << (WORD_BITS - 1)),
                ((w1 >> count) & low_mask) + (bit_of_int(w2, 0) << (WORD_BITS - 1)),
                (w2 >> count) & low_mask,
                flags,
            )
        )

    def bit_string(self) -> str:
        """All 128 bits, most significant word first, each word followed by a space."""
        return "".join(f"{word:0{WORD_BITS}b} " for word in reversed(self.bits))

    @staticmethod
    def _locate(index: int) -> tuple[int, int]:
        if not 0 <= index < TOTAL_BITS:
            raise IndexError(f"bit index out of range: {index}")
        return divmod(index, WORD_BITS)


def zero() -> Decimal128:
    """A decimal with every bit clear."""
    return Decimal128((0, 0, 0, 0))


def infinity() -> Decimal128:
    """The value used to stand for infinity."""
    return Decimal128((0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0x7FFFFFFF))


def max_int() -> Decimal128:
    """The largest 32-bit signed integer as a decimal."""
    return Decimal128((0x7FFFFFFF, 0x0, 0x0, 0x0))


def min_int() -> Decimal128:
    """The smallest 32-bit signed integer as a decimal."""
    return Decimal128((0x80000000, 0x0, 0x0, 0x80000000))


def bit_of_int(value: int, index: int) -> int:
    """Bit ``index`` of an integer in two's complement, as 0 or 1."""
    return (value >> index) & 1


def float_exponent(value: float) -> int:
    """The unbiased binary exponent of ``value`` stored as a 32-bit float."""
    (raw,) = struct.unpack("<I", struct.pack("<f", value))
    return ((raw & ~_TOP_BIT) >> 23) - 127