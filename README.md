# bitdecimal

`bitdecimal` models a 128-bit decimal value: a 96-bit unsigned mantissa held
in three little-endian 32-bit words, plus a fourth word carrying the scale
(a power of ten) and the sign. The value represented is
`(-1)**sign * mantissa / 10**scale`.

The package gives bit-level control over that layout and a few helpers for
bringing two values to a common scale and comparing their magnitudes.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The value type

`bitdecimal.decimal.Decimal128` is a frozen dataclass holding a tuple of four
words in `bits`. Each word must be an integer from 0 to `0xFFFFFFFF`,
otherwise `ValueError` is raised. Methods that "change" a value return a new
instance.

```python
from bitdecimal.decimal import Decimal128, zero, infinity, max_int, min_int

five_point_zero = Decimal128((50, 0, 0, 1 << 16))   # 5.0
five_point_zero.scale          # 1
five_point_zero.negative       # False

minus = five_point_zero.with_sign(True)
minus.negative                 # True

two_hundredths = Decimal128((2, 0, 0, 0)).with_scale(2)   # 0.02
two_hundredths.bit(0), two_hundredths.bit(1)              # (0, 1)
two_hundredths.with_bit(0, 1).bits[0]                     # 3

zero().is_zero()                              # True
Decimal128((1, 0, 0, 0)).shift_left(1).bits   # (2, 0, 0, 0)
Decimal128((4, 0, 0, 0)).shift_right(2).bits  # (1, 0, 0, 0)

print(Decimal128((5, 0, 0, 0)).bit_string())
```

Members of `Decimal128`:

* `bit(index)` / `with_bit(index, bit)` – read or set one of the 128 bits;
  an index outside 0..127 raises `IndexError`. `with_bit` sets the bit when
  `bit` is 1 and clears it for any other value.
* `negative` (property) / `with_sign(negative)` – the sign bit (bit 31 of
  the flag word).
* `scale` (property) – bits 16..23 of the flag word.
* `with_scale(scale)` – writes the low bits of `scale` into bits 16..22 of
  the flag word; bit 23 is left as it was.
* `is_zero()` – true when the mantissa is zero, whatever the sign and scale.
* `is_correct()` – true when the reserved bits of the flag word (0..15 and
  24..30) are all clear. The scale value itself is not range-checked.
* `shift_left(count)` / `shift_right(count)` – shift each mantissa word;
  a negative count shifts the other way. Only a single bit crosses from one
  word to the next, so these are exact for shifts by one. The flag word is
  kept.
* `bit_string()` – all 128 bits as text, most significant word first, each
  word followed by a space.

Module-level helpers in `bitdecimal.decimal`:

* `zero()`, `infinity()`, `max_int()`, `min_int()` – ready-made values.
  `max_int()` and `min_int()` are the 32-bit signed integer limits.
* `bit_of_int(value, index)` – one bit of a plain integer.
* `float_exponent(value)` – the unbiased binary exponent of `value` stored
  as a single-precision float, e.g. `float_exponent(1.0) == 0`.

## Scales and comparison

`bitdecimal.scale` works with mantissas at different scales.

```python
from bitdecimal.decimal import Decimal128
from bitdecimal.scale import Ordering, compare_aligned, equalize_scales

two = Decimal128((2, 0, 0, 0))                        # 2
two_point_zero_zero = Decimal128((200, 0, 0, 2 << 16))  # 2.00

compare_aligned(two, two_point_zero_zero)             # Ordering.EQUAL
ordering, left, right = equalize_scales(two, two_point_zero_zero)
left.bits[0]                                          # 200
```

* `Ordering` – an enum with `LESS`, `EQUAL` and `GREATER`, describing the
  first value relative to the second.
* `multiply_mantissa(words, factor)` – multiplies a sequence of
  little-endian 32-bit words by `factor` (0..`0xFFFFFFFF`, otherwise
  `ValueError`) and returns a pair: the product truncated to the same number
  of words, and whether it overflowed them.
* `equalize_scales(value_1, value_2)` – multiplies each mantissa by ten until
  it reaches the larger of the two scales, stopping early if it overflows.
  Returns `(ordering, aligned_1, aligned_2)`; the flag words are left
  unchanged. `ordering` is `GREATER` or `LESS` when only one side
  overflowed, and `EQUAL` otherwise.
* `compare_mantissas(value_1, value_2)` – compares the raw 96-bit mantissas,
  ignoring sign and scale.
* `compare_aligned(value_1, value_2)` – compares magnitudes: it equalizes
  the scales and, if neither side alone overflowed, compares the mantissas.
  The sign is not taken into account.

## What the package does not do

The package covers the value layout and scale alignment only. It does not
provide arithmetic (addition, subtraction, multiplication, division,
remainder), signed comparison operators, conversions to and from `int` or
`float`, or rounding functions such as floor, round and truncate.