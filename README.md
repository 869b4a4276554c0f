# mpmfnum

Number formats with explicit rounding. Every value is read as a real number
in scientific notation, `(-1)^s * c * 2^exp`. Each format is defined by a
*rounding context*, which takes any real value and rounds it into that
format.

## What is included

- `mpmfnum.number.Real` is the abstract interface that every value
  implements. It provides `sign`, `exp`, `e`, `n`, `c`, `m`, `prec`,
  `is_zero`, `is_nar` and related methods. It also provides `split(n)`,
  which splits a value exactly at an absolute binary digit.
  `bitmask(n)` returns `(1 << n) - 1`.
- `mpmfnum.rfloat.RFloat` is a binary float with an unbounded significand
  and an unbounded exponent. It also represents `+Inf`, `-Inf` and `NaN`.
  Build values with these constructors:
  - `RFloat.real(sign, exp, c)`
  - `RFloat.zero()` and `RFloat.one()`
  - `RFloat.pos_infinity()`, `RFloat.neg_infinity()` and `RFloat.nan()`
  - `RFloat.from_number(x)`

  `RFloat` supports exact `-x`, `abs(x)`, `x + y`, `x - y` and `x * y`. Its
  comparison operators follow a partial order: `partial_cmp` returns
  `None` when either value is NaN.
- `mpmfnum.rounding` defines the following:
  - `RoundingMode`, with the five IEEE 754 modes plus `AWAY_ZERO`,
    `TO_EVEN` and `TO_ODD`.
  - `RoundingDirection`.
  - The abstract `RoundingContext`.
- `mpmfnum.split.Split` is the exact split of a value into the digits kept
  and the digits lost. It has `rs()` and `rgs()` for the round, guard and
  sticky bits, and `is_exact()`.
- `mpmfnum.rfloat_context.RFloatContext` rounds with one or both of two
  limits:
  - a maximum precision, `max_p`
  - a minimum absolute digit, `min_n`

  Setting both emulates subnormals. It supports every `RoundingMode`. A
  context with neither limit raises `ValueError` when it rounds.
- `mpmfnum.real.RealContext` gives exact arithmetic through `round`, `neg`,
  `abs`, `add`, `sub` and `mul`.
- `mpmfnum.posit` provides posit numbers as described in the 2022 Posit
  Standard:
  - `PositContext(es, nbits)` decodes bit patterns with `bits_to_number`
    and rounds any value with `round`.
    - In-range values round to nearest, ties to even.
    - Values beyond the largest or smallest magnitude saturate.
    - NaN and infinities become NaR.
  - `Posit` has `into_bits()` and `to_rfloat()`. Its comparisons order NaR
    below every other value.
- `mpmfnum.ops` provides `neg`, `absolute`, `add`, `sub` and `mul`, which
  dispatch to a context. They raise `TypeError` if the context lacks the
  operation.

## What it does not do

Only exact negation, absolute value, addition, subtraction and
multiplication are provided, and only through `RealContext` or `RFloat`.
There is no rounded division, square root or transcendental function, and
posit contexts have no arithmetic of their own. To compute with posits:

1. Do the arithmetic exactly on `RFloat` values.
2. Round the result with `PositContext.round`.

There are no IEEE 754 or fixed-point contexts.

## Installation

```
pip install .
```

## Examples

Round 1.25 to 2 bits of precision:

```python
from mpmfnum.rfloat import RFloat
from mpmfnum.rfloat_context import RFloatContext
from mpmfnum.rounding import RoundingMode

x = RFloat.real(False, -2, 5)          # 5 * 2^-2 = 1.25
ctx = RFloatContext().with_max_p(2)
ctx.round(x) == RFloat.one()           # True: ties to even
ctx.with_rounding_mode(RoundingMode.TO_POSITIVE).round(x)  # 1.5
```

Exact arithmetic on `RFloat` values:

```python
a = RFloat.one()
b = RFloat.real(True, -4, 7)           # -7/16
a + b                                  # 9/16
a * b                                  # -7/16
```

Posits:

```python
from mpmfnum.posit import PositContext

ctx = PositContext(2, 8)
p = ctx.bits_to_number(0b01000000)     # 1.0
p.into_bits()                          # 64
ctx.round(RFloat.real(False, -4, 19)).to_rfloat()  # 1.25
```

## Tests

```
pip install .[test]
pytest
```