"""Rounding to floating-point numbers with unbounded significand and exponent."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from mpmfnum.number import Real
from mpmfnum.rfloat import RFloat
from mpmfnum.rounding import RoundingContext, RoundingDirection, RoundingMode
from mpmfnum.split import Split


@dataclass(frozen=True)
class RFloatContext(RoundingContext):
    """Rounds to base-2 numbers ``(-1)^s * c * 2^exp`` with unbounded ``exp``.

    ``max_p`` bounds the precision (floating-point rounding), ``min_n``
    bounds the least absolute digit (fixed-point rounding); with both,
    ``min_n`` takes precedence, emulating subnormals. At least one must be
    set before rounding. Infinities and NaN are not rounded.
    """

    max_p: Optional[int] = None
    min_n: Optional[int] = None
    rm: RoundingMode = RoundingMode.NEAREST_TIES_TO_EVEN

    def __post_init__(self):
        if self.max_p is not None and self.max_p < 1:
            raise ValueError("minimum precision must be at least 1")

    def with_max_p(self, max_p: int) -> "RFloatContext":
        """A copy with the maximum precision set."""
        return replace(self, max_p=max_p)

    def with_min_n(self, min_n: int) -> "RFloatContext":
        """A copy with the minimum least absolute digit set."""
        return replace(self, min_n=min_n)

    def with_rounding_mode(self, rm: RoundingMode) -> "RFloatContext":
        """A copy with the rounding mode set."""
        return replace(self, rm=rm)

    def without_max_p(self) -> "RFloatContext":
        """A copy with the maximum precision cleared."""
        return replace(self, max_p=None)

    def without_min_n(self) -> "RFloatContext":
        """A copy with the minimum least absolute digit cleared."""
        return replace(self, min_n=None)

    def round_params(self, num: Real) -> Tuple[Optional[int], int]:
        """The precision ``p`` allowed and the first lost digit ``n`` for ``num``."""
        if self.max_p is None and self.min_n is None:
            raise ValueError(
                "at least one rounding parameter must be specified: "
                f"max_p={self.max_p}, min_n={self.min_n}"
            )
        if self.max_p is None:
            return None, self.min_n
        e = num.e()
        if e is None:
            return self.max_p, 0
        n = e - self.max_p
        if self.min_n is not None:
            n = max(self.min_n, n)
        return self.max_p, n

    @staticmethod
    def _round_increment(
        sign: bool, c: int, half_bit: bool, sticky_bit: bool, rm: RoundingMode
    ) -> bool:
        is_nearest, direction = rm.to_direction(sign)
        if not half_bit and not sticky_bit:
            return False
        if is_nearest:
            if not half_bit:
                return False
            if sticky_bit:
                return True
        if direction is RoundingDirection.TO_ZERO:
            return False
        if direction is RoundingDirection.AWAY_ZERO:
            return True
        if direction is RoundingDirection.TO_EVEN:
            return c % 2 == 1
        return c % 2 == 0

    @staticmethod
    def round_finalize(split: Split, rm: RoundingMode) -> RFloat:
        """Finish rounding a split, incrementing the significand if required."""
        high = split.num
        s = high.sign()
        exp = high.exp()
        if exp is not None:
            c = high.c()
        else:
            exp, c = split.split_pos + 1, 0

        half_bit, sticky_bit = split.rs()
        if RFloatContext._round_increment(s, c, half_bit, sticky_bit, rm):
            c += 1
            if split.max_p is not None and c.bit_length() > split.max_p:
                # precision exceeded: drop one digit and bump the exponent
                c >>= 1
                exp += 1

        return RFloat.real(s, exp, c)

    def round(self, num: Real) -> RFloat:
        if self.max_p is None and self.min_n is None:
            raise ValueError("must specify either maximum precision or least absolute digit")

        if num.is_zero():
            return RFloat.zero()
        if num.is_infinite():
            return RFloat.neg_infinity() if num.is_negative() else RFloat.pos_infinity()
        if num.is_nar():
            return RFloat.nan()

        p, n = self.round_params(num)
        split = Split(num, p, n)
        return self.round_finalize(split, self.rm).canonicalize()