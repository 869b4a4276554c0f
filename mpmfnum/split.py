"""An exact split of a number at an absolute binary digit."""

from __future__ import annotations

from typing import Optional, Tuple

from mpmfnum.number import Real
from mpmfnum.rfloat import RFloat


class Split(Real):
    """The exact sum of the digits above and at-or-below a binary position.

    ``num`` holds every significant digit above position ``n`` and
    ``lost`` every digit at or below it; their sum is the original value.
    """

    __slots__ = ("_high", "_low", "_max_p", "_split_pos")

    def __init__(self, num: Real, max_p: Optional[int], n: int):
        if num.is_nar():
            raise ValueError(f"must be real: {num!r}")
        self._high, self._low = num.split(n)
        self._max_p = max_p
        self._split_pos = n

    @property
    def num(self) -> RFloat:
        """The upper part of the split."""
        return self._high

    @property
    def lost(self) -> RFloat:
        """The lower part of the split."""
        return self._low

    @property
    def max_p(self) -> Optional[int]:
        """The precision allowed for the upper part."""
        return self._max_p

    @property
    def split_pos(self) -> int:
        """The position of the first digit lost in the split."""
        return self._split_pos

    def rgs(self) -> Tuple[bool, bool, bool]:
        """Round, guard and sticky bits of the lost digits."""
        half, lower = self._low.split(self._split_pos - 1)
        quarter, lower = lower.split(self._split_pos - 2)
        return not half.is_zero(), not quarter.is_zero(), not lower.is_zero()

    def rs(self) -> Tuple[bool, bool]:
        """Round and sticky bits of the lost digits."""
        half, lower = self._low.split(self._split_pos - 1)
        return not half.is_zero(), not lower.is_zero()

    def is_exact(self) -> bool:
        """True if no non-zero digits were lost."""
        return self._low.is_zero()

    # Real interface

    @classmethod
    def radix(cls) -> int:
        return 2

    def sign(self) -> Optional[bool]:
        return self._high.sign()

    def exp(self) -> Optional[int]:
        exp = self._low.exp()
        return exp if exp is not None else self._high.exp()

    def e(self) -> Optional[int]:
        e = self._high.e()
        return e if e is not None else self._low.e()

    def n(self) -> Optional[int]:
        n = self._low.n()
        return n if n is not None else self._high.n()

    def c(self) -> Optional[int]:
        high_zero, low_zero = self._high.is_zero(), self._low.is_zero()
        if high_zero and low_zero:
            return 0
        if low_zero:
            return self._high.c()
        if high_zero:
            return self._low.c()
        offset = self._high.exp() - self._low.exp()
        return (self._high.c() << offset) + self._low.c()

    def m(self) -> Optional[int]:
        c = self.c()
        if c is None:
            return None
        return -c if self.sign() else c

    def prec(self) -> Optional[int]:
        e, n = self.e(), self.n()
        if e is None and n is None:
            return None
        if e is None or n is None:
            raise ValueError(f"inconsistent split: e={e}, n={n}")
        return e - n

    def is_nar(self) -> bool:
        return False

    def is_finite(self) -> bool:
        return True

    def is_infinite(self) -> bool:
        return False

    def is_zero(self) -> bool:
        return self._high.is_zero() and self._low.is_zero()

    def is_negative(self) -> Optional[bool]:
        neg = self._high.is_negative()
        return neg if neg is not None else self._low.is_negative()

    def is_numerical(self) -> bool:
        return True

    def __repr__(self) -> str:
        return (
            f"Split(num={self._high!r}, lost={self._low!r}, "
            f"max_p={self._max_p!r}, split_pos={self._split_pos})"
        )