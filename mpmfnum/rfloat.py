"""Binary floating-point numbers with unbounded significand and exponent."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from mpmfnum.number import Real


class RFloatKind(Enum):
    """Classes of values an :class:`RFloat` may hold."""

    REAL = "real"
    POS_INFINITY = "+inf"
    NEG_INFINITY = "-inf"
    NAN = "nan"


class RFloat(Real):
    """An arbitrary-precision binary float ``(-1)^s * c * 2^exp``.

    Serves as the interchange format between all binary formats.
    Comparison follows a partial order: NaN is unordered.
    """

    __slots__ = ("_kind", "_sign", "_exp", "_c")

    def __init__(self, kind: RFloatKind, sign: bool = False, exp: int = 0, c: int = 0):
        if c < 0:
            raise ValueError(f"significand must be non-negative, given {c}")
        self._kind = kind
        self._sign = bool(sign)
        self._exp = exp
        self._c = c

    # constructors

    @classmethod
    def real(cls, sign: bool, exp: int, c: int) -> "RFloat":
        """A finite value ``(-1)^sign * c * 2^exp``."""
        return cls(RFloatKind.REAL, sign, exp, c)

    @classmethod
    def pos_infinity(cls) -> "RFloat":
        return cls(RFloatKind.POS_INFINITY)

    @classmethod
    def neg_infinity(cls) -> "RFloat":
        return cls(RFloatKind.NEG_INFINITY)

    @classmethod
    def nan(cls) -> "RFloat":
        return cls(RFloatKind.NAN)

    @classmethod
    def zero(cls) -> "RFloat":
        """The canonical zero."""
        return cls.real(False, 0, 0)

    @classmethod
    def one(cls) -> "RFloat":
        """The canonical +1."""
        return cls.real(False, 0, 1)

    @classmethod
    def from_number(cls, val: Real) -> "RFloat":
        """Convert any :class:`Real` exactly to an :class:`RFloat`."""
        if isinstance(val, RFloat):
            return val
        if not val.is_numerical():
            return cls.nan()
        if val.is_infinite():
            return cls.neg_infinity() if val.sign() else cls.pos_infinity()
        if val.is_zero():
            return cls.zero()
        return cls.real(val.sign(), val.exp(), val.c())

    @property
    def kind(self) -> RFloatKind:
        return self._kind

    # Real interface

    @classmethod
    def radix(cls) -> int:
        return 2

    def sign(self) -> Optional[bool]:
        if self._kind is RFloatKind.REAL:
            return self._sign
        if self._kind is RFloatKind.POS_INFINITY:
            return False
        if self._kind is RFloatKind.NEG_INFINITY:
            return True
        return None

    def _nonzero_real(self) -> bool:
        return self._kind is RFloatKind.REAL and self._c != 0

    def exp(self) -> Optional[int]:
        return self._exp if self._nonzero_real() else None

    def e(self) -> Optional[int]:
        if not self._nonzero_real():
            return None
        return (self._exp - 1) + self._c.bit_length()

    def n(self) -> Optional[int]:
        return self._exp - 1 if self._nonzero_real() else None

    def c(self) -> Optional[int]:
        return self._c if self._kind is RFloatKind.REAL else None

    def m(self) -> Optional[int]:
        if self._kind is not RFloatKind.REAL:
            return None
        return -self._c if self._sign else self._c

    def prec(self) -> Optional[int]:
        return self._c.bit_length() if self._kind is RFloatKind.REAL else None

    def is_nar(self) -> bool:
        return self._kind is not RFloatKind.REAL

    def is_finite(self) -> bool:
        return self._kind is RFloatKind.REAL

    def is_infinite(self) -> bool:
        return self._kind in (RFloatKind.POS_INFINITY, RFloatKind.NEG_INFINITY)

    def is_zero(self) -> bool:
        return self._kind is RFloatKind.REAL and self._c == 0

    def is_negative(self) -> Optional[bool]:
        if self._kind is RFloatKind.REAL:
            return None if self._c == 0 else self._sign
        return self.sign()

    def is_numerical(self) -> bool:
        return self._kind is not RFloatKind.NAN

    # extras

    def is_nan(self) -> bool:
        return self._kind is RFloatKind.NAN

    def canonicalize(self) -> "RFloat":
        """Map every zero to +0; other values are unchanged."""
        return RFloat.zero() if self.is_zero() else self

    def get_bit(self, n: int) -> Optional[bool]:
        """The ``n``-th absolute binary digit; ``None`` unless finite and non-zero."""
        if not self._nonzero_real():
            return None
        if n < self._exp or n > self.e():
            return False
        return bool((self._c >> (n - self._exp)) & 1)

    # ordering

    def partial_cmp(self, other: Real) -> Optional[int]:
        """Return -1, 0 or 1 comparing with ``other``, or ``None`` if unordered."""
        other = RFloat.from_number(other)
        a, b = self._kind, other._kind
        if a is RFloatKind.NAN or b is RFloatKind.NAN:
            return None
        if a is RFloatKind.POS_INFINITY:
            return 0 if b is RFloatKind.POS_INFINITY else 1
        if a is RFloatKind.NEG_INFINITY:
            return 0 if b is RFloatKind.NEG_INFINITY else -1
        if b is RFloatKind.NEG_INFINITY:
            return 1
        if b is RFloatKind.POS_INFINITY:
            return -1

        zero1, zero2 = self._c == 0, other._c == 0
        if zero1 and zero2:
            return 0
        if zero1:
            return 1 if other._sign else -1
        if zero2:
            return -1 if self._sign else 1
        if self._sign != other._sign:
            return -1 if self._sign else 1

        e1, e2 = self.e(), other.e()
        if e1 != e2:
            mag = -1 if e1 < e2 else 1
        else:
            low = min(self._exp, other._exp)
            ord1 = self._c << (self._exp - low)
            ord2 = other._c << (other._exp - low)
            mag = (ord1 > ord2) - (ord1 < ord2)
        return -mag if self._sign else mag

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.partial_cmp(other) == 0

    def __lt__(self, other: Real) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.partial_cmp(other) == -1

    def __le__(self, other: Real) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.partial_cmp(other) in (-1, 0)

    def __gt__(self, other: Real) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.partial_cmp(other) == 1

    def __ge__(self, other: Real) -> bool:
        if not isinstance(other, Real):
            return NotImplemented
        return self.partial_cmp(other) in (0, 1)

    def __hash__(self) -> int:
        if self._kind is not RFloatKind.REAL:
            return hash(self._kind)
        if self._c == 0:
            return hash(0)
        c, exp = self._c, self._exp
        trailing = (c & -c).bit_length() - 1
        return hash((self._sign, exp + trailing, c >> trailing))

    # exact arithmetic

    def __neg__(self) -> "RFloat":
        if self._kind is RFloatKind.REAL:
            if self._c == 0:
                return RFloat.zero()
            return RFloat.real(not self._sign, self._exp, self._c)
        if self._kind is RFloatKind.POS_INFINITY:
            return RFloat.neg_infinity()
        if self._kind is RFloatKind.NEG_INFINITY:
            return RFloat.pos_infinity()
        return RFloat.nan()

    def __abs__(self) -> "RFloat":
        if self._kind is RFloatKind.REAL:
            return RFloat.real(False, self._exp, self._c)
        if self.is_infinite():
            return RFloat.pos_infinity()
        return RFloat.nan()

    def __add__(self, other: Real) -> "RFloat":
        if not isinstance(other, Real):
            return NotImplemented
        other = RFloat.from_number(other)
        a, b = self._kind, other._kind
        if a is RFloatKind.NAN or b is RFloatKind.NAN:
            return RFloat.nan()
        infs = {a, b} - {RFloatKind.REAL}
        if len(infs) == 2:
            return RFloat.nan()
        if infs:
            return RFloat(infs.pop())

        if other._c == 0:
            return self
        if self._c == 0:
            return other
        exp = min(self._exp, other._exp)
        m1 = self._c << (self._exp - exp)
        m2 = other._c << (other._exp - exp)
        m = (-m1 if self._sign else m1) + (-m2 if other._sign else m2)
        return RFloat.real(m < 0, exp, abs(m))

    def __sub__(self, other: Real) -> "RFloat":
        if not isinstance(other, Real):
            return NotImplemented
        return self + (-RFloat.from_number(other))

    def __mul__(self, other: Real) -> "RFloat":
        if not isinstance(other, Real):
            return NotImplemented
        other = RFloat.from_number(other)
        if self.is_nan() or other.is_nan():
            return RFloat.nan()
        if self.is_infinite() or other.is_infinite():
            if self.is_zero() or other.is_zero():
                return RFloat.nan()
            if self.sign() == other.sign():
                return RFloat.pos_infinity()
            return RFloat.neg_infinity()
        if self.is_zero() or other.is_zero():
            return RFloat.zero()
        return RFloat.real(self._sign != other._sign, self._exp + other._exp, self._c * other._c)

    def __repr__(self) -> str:
        if self._kind is RFloatKind.REAL:
            return f"RFloat.real({self._sign}, {self._exp}, {self._c})"
        if self._kind is RFloatKind.POS_INFINITY:
            return "RFloat.pos_infinity()"
        if self._kind is RFloatKind.NEG_INFINITY:
            return "RFloat.neg_infinity()"
        return "RFloat.nan()"