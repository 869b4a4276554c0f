"""Common interface shared by every number format."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from mpmfnum.rfloat import RFloat


def bitmask(n: int) -> int:
    """Return ``(1 << n) - 1``, a mask selecting the lowest ``n`` binary digits."""
    if n < 0:
        raise ValueError(f"bitmask width must be non-negative, given {n}")
    return (1 << n) - 1


class Real(ABC):
    """An extended real number viewed as ``(-1)^s * c * b^exp``.

    Properties that are not defined for a value (for example the
    exponent of zero or of an infinity) are reported as ``None``.
    """

    @classmethod
    @abstractmethod
    def radix(cls) -> int:
        """Radix of the number system; strictly positive."""

    @abstractmethod
    def sign(self) -> Optional[bool]:
        """The sign bit, if defined."""

    @abstractmethod
    def exp(self) -> Optional[int]:
        """Exponent when the significand is an integer."""

    @abstractmethod
    def e(self) -> Optional[int]:
        """Normalized exponent (position of the most significant digit)."""

    @abstractmethod
    def n(self) -> Optional[int]:
        """Position just below the least significant digit: ``exp() - 1``."""

    @abstractmethod
    def c(self) -> Optional[int]:
        """Unsigned integer significand."""

    @abstractmethod
    def m(self) -> Optional[int]:
        """Signed integer significand."""

    @abstractmethod
    def prec(self) -> Optional[int]:
        """Number of digits in the significand."""

    @abstractmethod
    def is_nar(self) -> bool:
        """True if this value is not a real number (NaN, infinity, ...)."""

    @abstractmethod
    def is_finite(self) -> bool:
        """True if this value is finite."""

    @abstractmethod
    def is_infinite(self) -> bool:
        """True if this value is infinite."""

    @abstractmethod
    def is_zero(self) -> bool:
        """True if this value is zero."""

    @abstractmethod
    def is_negative(self) -> Optional[bool]:
        """True if this value is strictly negative, if defined."""

    @abstractmethod
    def is_numerical(self) -> bool:
        """True if this value is a number, interval or limiting value."""

    def split(self, n: int) -> Tuple["RFloat", "RFloat"]:
        """Split at binary digit ``n`` into digits above ``n`` and digits at or below it.

        The exact sum of the two parts equals this value.
        """
        from mpmfnum.rfloat import RFloat

        s = self.sign()
        if s is None:
            raise ValueError(f"cannot split a value without a sign: {self!r}")
        if self.is_zero():
            return RFloat.real(s, 0, 0), RFloat.real(s, 0, 0)

        e = self.e()
        exp = self.exp()
        c = self.c()
        if e is None or exp is None or c is None:
            raise ValueError(f"cannot split a non-finite value: {self!r}")

        if n >= e:
            # split point above every significant digit
            return RFloat.real(s, 0, 0), RFloat.real(s, exp, c)
        if n < exp:
            # split point below every significant digit
            return RFloat.real(s, exp, c), RFloat.real(s, 0, 0)

        offset = n - (exp - 1)
        high = RFloat.real(s, n + 1, c >> offset)
        low = RFloat.real(s, exp, c & bitmask(offset))
        return high, low