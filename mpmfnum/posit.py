"""Posit numbers as described in the 2022 Posit Standard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Optional, Tuple

from mpmfnum.number import Real, bitmask
from mpmfnum.rfloat import RFloat
from mpmfnum.rfloat_context import RFloatContext
from mpmfnum.rounding import RoundingContext, RoundingMode
from mpmfnum.split import Split


def _tdiv(a: int, b: int) -> Tuple[int, int]:
    """Quotient truncated toward zero and the matching remainder."""
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q


class PositKind(Enum):
    """Classes of values a :class:`Posit` may hold."""

    ZERO = "zero"
    NONZERO = "nonzero"
    NAR = "nar"


class Posit(Real):
    """A posit value ``(-1)^s * c * 2^exp * useed^r`` tied to its context.

    Comparison orders NaR below every other value.
    """

    __slots__ = ("_kind", "_ctx", "_sign", "_regime", "_exp", "_c")

    def __init__(
        self,
        kind: PositKind,
        ctx: "PositContext",
        sign: bool = False,
        regime: int = 0,
        exp: int = 0,
        c: int = 0,
    ):
        if kind is PositKind.NONZERO and c <= 0:
            raise ValueError(f"significand of a non-zero posit must be positive, given {c}")
        self._kind = kind
        self._ctx = ctx
        self._sign = bool(sign)
        self._regime = regime
        self._exp = exp
        self._c = c

    @property
    def kind(self) -> PositKind:
        return self._kind

    @property
    def ctx(self) -> "PositContext":
        """The rounding context under which this number was created."""
        return self._ctx

    def into_bits(self) -> int:
        """The bit pattern encoding this posit."""
        es = self._ctx.es
        nbits = self._ctx.nbits
        if self._kind is PositKind.ZERO:
            return 0
        if self._kind is PositKind.NAR:
            return 1 << (nbits - 1)

        sfield = 1 if self._sign else 0
        r, exp, c = self._regime, self._exp, self._c
        if r < 0:
            kbits, r0 = -r, False
        else:
            kbits, r0 = r + 1, True

        if kbits == nbits - 1:
            # encoded with sign and regime only
            return (sfield << (nbits - 1)) | bitmask(nbits - 1)

        rbits = kbits + 1
        embits = nbits - (rbits + 1)
        if embits <= es:
            ebits, mbits = embits, 0
        else:
            ebits, mbits = es, embits - es

        rfield = bitmask(kbits) << 1 if r0 else 1
        p = c.bit_length()
        e = exp + (p - 1)
        efield = e >> (es - ebits)
        mfield = bitmask(p - 1) & c
        return (sfield << (nbits - 1)) | (rfield << embits) | (efield << mbits) | mfield

    def to_rfloat(self) -> RFloat:
        """The exact value of this posit as an :class:`RFloat`."""
        if self._kind is PositKind.ZERO:
            return RFloat.zero()
        if self._kind is PositKind.NAR:
            return RFloat.nan()
        return RFloat.real(self._sign, self._ctx.rscale() * self._regime + self._exp, self._c)

    # Real interface

    @classmethod
    def radix(cls) -> int:
        return 2

    def _nonzero(self) -> bool:
        return self._kind is PositKind.NONZERO

    def sign(self) -> Optional[bool]:
        return self._sign if self._nonzero() else None

    def exp(self) -> Optional[int]:
        if not self._nonzero():
            return None
        return self._regime * self._ctx.useed() + self._exp

    def e(self) -> Optional[int]:
        if not self._nonzero():
            return None
        return (self._regime * self._ctx.useed() + self._exp - 1) + self._c.bit_length()

    def n(self) -> Optional[int]:
        if not self._nonzero():
            return None
        return self._regime * self._ctx.useed() + self._exp - 1

    def c(self) -> Optional[int]:
        return self._c if self._nonzero() else None

    def m(self) -> Optional[int]:
        if not self._nonzero():
            return None
        return -self._c if self._sign else self._c

    def prec(self) -> Optional[int]:
        return self._c.bit_length() if self._nonzero() else None

    def is_nar(self) -> bool:
        return self._kind is PositKind.NAR

    def is_finite(self) -> bool:
        return self._kind is not PositKind.NAR

    def is_infinite(self) -> bool:
        return False

    def is_zero(self) -> bool:
        return self._kind is PositKind.ZERO

    def is_negative(self) -> Optional[bool]:
        return self.sign()

    def is_numerical(self) -> bool:
        return self._kind is not PositKind.NAR

    # ordering

    def partial_cmp(self, other: "Posit") -> int:
        """Return -1, 0 or 1 comparing with ``other``; NaR is the least value."""
        if not isinstance(other, Posit):
            raise TypeError(f"cannot compare a posit with {type(other).__name__}")
        a, b = self._kind, other._kind
        if a is PositKind.NAR and b is PositKind.NAR:
            return 0
        if a is PositKind.NAR:
            return -1
        if b is PositKind.NAR:
            return 1
        if a is PositKind.ZERO and b is PositKind.ZERO:
            return 0
        if a is PositKind.ZERO:
            return 1 if other._sign else -1
        if b is PositKind.ZERO:
            return -1 if self._sign else 1
        return self.to_rfloat().partial_cmp(other.to_rfloat())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Posit):
            return NotImplemented
        return self.partial_cmp(other) == 0

    def __lt__(self, other: "Posit") -> bool:
        if not isinstance(other, Posit):
            return NotImplemented
        return self.partial_cmp(other) < 0

    def __le__(self, other: "Posit") -> bool:
        if not isinstance(other, Posit):
            return NotImplemented
        return self.partial_cmp(other) <= 0

    def __gt__(self, other: "Posit") -> bool:
        if not isinstance(other, Posit):
            return NotImplemented
        return self.partial_cmp(other) > 0

    def __ge__(self, other: "Posit") -> bool:
        if not isinstance(other, Posit):
            return NotImplemented
        return self.partial_cmp(other) >= 0

    def __hash__(self) -> int:
        if self._kind is PositKind.NONZERO:
            return hash(self.to_rfloat())
        return hash(self._kind)

    def __repr__(self) -> str:
        if self._kind is PositKind.NONZERO:
            body = f"{self._sign}, {self._regime}, {self._exp}, {self._c}"
            return f"Posit(nonzero: {body}; es={self._ctx.es}, nbits={self._ctx.nbits})"
        return f"Posit({self._kind.value}; es={self._ctx.es}, nbits={self._ctx.nbits})"


@dataclass(frozen=True)
class PositContext(RoundingContext):
    """Rounding context for posits with exponent width ``es`` and total width ``nbits``.

    In-range values round to nearest, ties to even; values beyond the
    largest or smallest magnitude saturate. NaN and infinities become NaR.
    """

    es: int
    nbits: int

    ES_MAX: ClassVar[int] = 32
    PAD_MIN: ClassVar[int] = 3

    def __post_init__(self):
        if self.es < 0 or self.es > self.ES_MAX:
            raise ValueError(
                f"exponent width needs to be at most {self.ES_MAX} bits, given {self.es} bits"
            )
        if self.nbits < self.es + self.PAD_MIN:
            raise ValueError(
                f"total bitwidth needs to be at least {self.es + self.PAD_MIN} bits, "
                f"given {self.nbits} bits"
            )

    def max_p(self) -> int:
        """The maximum precision allowed by this format."""
        return self.nbits - self.es - 3

    def useed(self) -> int:
        """``2^2^es``."""
        return 1 << (1 << self.es)

    def rscale(self) -> int:
        """The exponent scale ``2^es``."""
        return 1 << self.es

    def rmax(self) -> int:
        """The largest representable regime."""
        return self.nbits - 2

    def emax(self) -> int:
        """The largest representable normalized exponent."""
        return self.rscale() * self.rmax()

    def expmax(self) -> int:
        return self.emax()

    def emin(self) -> int:
        """The smallest representable normalized exponent."""
        return self.rscale() * -self.rmax()

    def expmin(self) -> int:
        return self.emin()

    def maxval(self, sign: bool) -> Posit:
        """The value of largest magnitude with the given sign."""
        return Posit(PositKind.NONZERO, self, sign, self.rmax(), 0, 1)

    def minval(self, sign: bool) -> Posit:
        """The non-zero value of smallest magnitude with the given sign."""
        return Posit(PositKind.NONZERO, self, sign, -self.rmax(), 0, 1)

    def zero(self) -> Posit:
        return Posit(PositKind.ZERO, self)

    def nar(self) -> Posit:
        return Posit(PositKind.NAR, self)

    def bits_to_number(self, b: int) -> Posit:
        """Decode a bit pattern into a :class:`Posit`."""
        if b < 0:
            raise ValueError(f"bit pattern must be non-negative, given {b}")
        if b >= 1 << self.nbits:
            raise ValueError("must be less than 1 << nbits")

        s = bool((b >> (self.nbits - 1)) & 1)
        ns = b & bitmask(self.nbits - 1)
        if ns == 0:
            return self.nar() if s else self.zero()

        def bit(i: int) -> bool:
            return bool((ns >> i) & 1)

        r0 = bit(self.nbits - 2)
        r0_pos = self.nbits - 2
        while r0_pos > 0 and bit(r0_pos - 1) == r0:
            r0_pos -= 1

        if r0_pos == 0:
            # the regime fills the whole pattern: maximum magnitude
            return self.maxval(s)

        embits = r0_pos - 1
        rbits = self.nbits - embits - 1
        if embits <= self.es:
            ebits, mbits = embits, 0
        else:
            ebits, mbits = self.es, embits - self.es

        efield = (ns >> mbits) & bitmask(ebits)
        mfield = ns & bitmask(mbits)

        kbits = rbits - 1
        regime = kbits - 1 if r0 else -kbits
        e = efield << (self.es - ebits) if ebits < self.es else efield
        c = mfield | (1 << mbits)
        return Posit(PositKind.NONZERO, self, s, regime, e - mbits, c)

    def _round_params(self, num: Real) -> Tuple[int, int]:
        if num.is_nar() or num.is_zero():
            raise ValueError(f"must be a finite, non-zero value: {num!r}")
        useed = self.useed()
        r, _ = _tdiv(num.e(), useed)
        kbits = -r if r < 0 else r + 1
        embits = self.nbits - (kbits + 2)
        mbits = 0 if embits <= self.es else embits - self.es
        return useed, mbits

    def _round_finite(self, split: Split, useed: int) -> Posit:
        s = split.sign()
        rounded = RFloatContext.round_finalize(split, RoundingMode.NEAREST_TIES_TO_EVEN)
        r, e = _tdiv(rounded.e(), useed)
        c = rounded.c()
        exp = (e + 1) - c.bit_length()
        return Posit(PositKind.NONZERO, self, s, r, exp, c)

    def round(self, val: Real) -> Posit:
        if val.is_nar():
            return self.nar()
        if val.is_zero():
            return self.zero()

        s = val.sign()
        e = val.e()
        if e >= self.emax():
            return self.maxval(s)
        if e <= self.emin():
            return self.minval(s)

        useed, mbits = self._round_params(val)
        p, n = RFloatContext().with_max_p(mbits + 1).round_params(val)
        return self._round_finite(Split(val, p, n), useed)