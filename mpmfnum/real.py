"""Exact arithmetic: rounding is the identity on binary numbers."""

from __future__ import annotations

from dataclasses import dataclass

from mpmfnum.number import Real
from mpmfnum.rfloat import RFloat
from mpmfnum.rounding import RoundingContext


@dataclass(frozen=True)
class RealContext(RoundingContext):
    """Rounding context for exact arithmetic.

    Every value converts exactly to an :class:`RFloat`. Only the
    operations that are exact on finite binary numbers are offered.
    """

    def round(self, val: Real) -> RFloat:
        """Convert ``val`` exactly to an :class:`RFloat`."""
        if val.is_zero():
            return RFloat.zero()
        if val.is_finite():
            sign = val.sign()
            return RFloat.real(bool(sign), val.exp(), val.c())
        if val.is_infinite():
            return RFloat.neg_infinity() if val.sign() is True else RFloat.pos_infinity()
        return RFloat.nan()

    def neg(self, src: Real) -> RFloat:
        """Exact ``-x``; the sign bit of a zero is flipped as well."""
        x = self.round(src)
        if x.is_finite():
            return RFloat.real(not x.sign(), x.exp() if not x.is_zero() else 0, x.c())
        return -x

    def abs(self, src: Real) -> RFloat:
        """Exact ``|x|``."""
        return abs(self.round(src))

    def add(self, src1: Real, src2: Real) -> RFloat:
        """Exact ``x + y``."""
        return self.round(src1) + self.round(src2)

    def sub(self, src1: Real, src2: Real) -> RFloat:
        """Exact ``x - y``."""
        return self.add(src1, self.neg(src2))

    def mul(self, src1: Real, src2: Real) -> RFloat:
        """Exact ``x * y``."""
        return self.round(src1) * self.round(src2)