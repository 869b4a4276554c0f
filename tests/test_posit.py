import pytest

from mpmfnum.posit import Posit, PositContext, PositKind
from mpmfnum.rfloat import RFloat

_POSITIVE_2_6 = [
    (-16, 1), (-12, 1), (-10, 1), (-8, 1), (-7, 1), (-6, 1), (-5, 1),
    (-5, 2), (-5, 3), (-4, 2), (-4, 3), (-3, 2), (-3, 3), (-2, 2), (-2, 3),
    (-1, 2), (-1, 3), (0, 2), (0, 3), (1, 2), (1, 3), (2, 2), (2, 3),
    (4, 1), (5, 1), (6, 1), (7, 1), (8, 1), (10, 1), (12, 1), (16, 1),
]


def _all_values_2_6():
    return (
        [RFloat.zero()]
        + [RFloat.real(False, exp, c) for exp, c in _POSITIVE_2_6]
        + [RFloat.nan()]
        + [RFloat.real(True, exp, c) for exp, c in _POSITIVE_2_6]
    )


def test_enumerate():
    ctx = PositContext(2, 6)
    expected = _all_values_2_6()
    assert len(expected) == 64
    for i, v in enumerate(expected):
        num = ctx.bits_to_number(i).to_rfloat()
        if num.is_nar():
            assert v.is_nar(), f"i={i}"
        else:
            assert num == v, f"i={i}: {num!r} != {v!r}"


@pytest.mark.parametrize("es,nbits", [(2, 6), (2, 8), (3, 12)])
def test_round_trip(es, nbits):
    ctx = PositContext(es, nbits)
    for i in range(1 << nbits):
        assert ctx.bits_to_number(i).into_bits() == i


def test_bounds():
    ctx = PositContext(2, 8)
    assert ctx.useed() == 16
    assert ctx.maxval(False).to_rfloat() == RFloat.real(False, 24, 1)
    assert ctx.minval(False).to_rfloat() == RFloat.real(False, -24, 1)

    ctx = PositContext(3, 8)
    assert ctx.useed() == 256
    assert ctx.maxval(False).to_rfloat() == RFloat.real(False, 48, 1)
    assert ctx.minval(False).to_rfloat() == RFloat.real(False, -48, 1)


def test_round_small():
    ctx = PositContext(2, 8)

    assert ctx.round(RFloat.nan()).is_nar()
    assert ctx.round(RFloat.neg_infinity()).is_nar()
    assert ctx.round(RFloat.pos_infinity()).is_nar()
    assert ctx.round(RFloat.zero()).is_zero()

    maxp1 = ctx.maxval(False).to_rfloat() + RFloat.one()
    assert ctx.round(maxp1) == ctx.maxval(False)

    minval = ctx.minval(False).to_rfloat()
    tiny = RFloat.real(minval.sign(), minval.exp() - 1, minval.c())
    assert ctx.round(tiny) == ctx.minval(False)

    one = RFloat.one()
    assert ctx.round(one).to_rfloat() == one

    assert ctx.round(RFloat.real(False, -4, 17)).to_rfloat() == one
    assert ctx.round(RFloat.real(False, -4, 19)).to_rfloat() == RFloat.real(False, -4, 20)


def test_round_saturates_negative():
    ctx = PositContext(2, 8)
    big = -(ctx.maxval(False).to_rfloat() + RFloat.one())
    assert ctx.round(big) == ctx.maxval(True)


def test_special_encodings():
    ctx = PositContext(2, 6)
    assert ctx.bits_to_number(0).kind is PositKind.ZERO
    assert ctx.bits_to_number(32).kind is PositKind.NAR
    assert ctx.nar().into_bits() == 32
    assert ctx.zero().into_bits() == 0
    assert ctx.maxval(False).into_bits() == 31
    assert ctx.minval(False).into_bits() == 1
    assert ctx.maxval(True).into_bits() == 63


def test_sign_and_fields():
    ctx = PositContext(2, 6)
    neg = ctx.bits_to_number(33)
    assert neg.sign() is True
    assert neg.is_negative() is True
    assert neg.c() == 1
    assert neg.m() == -1
    assert ctx.zero().sign() is None
    assert ctx.nar().c() is None
    assert ctx.nar().is_finite() is False
    assert ctx.zero().is_numerical() is True
    assert Posit.radix() == 2


def test_positive_patterns_increase():
    ctx = PositContext(2, 6)
    values = [ctx.bits_to_number(i) for i in range(1, 32)]
    for lo, hi in zip(values, values[1:]):
        assert lo < hi
        assert lo.to_rfloat() < hi.to_rfloat()


def test_ordering_with_nar_and_zero():
    ctx = PositContext(2, 8)
    nar = ctx.nar()
    zero = ctx.zero()
    assert nar.partial_cmp(ctx.nar()) == 0
    assert nar < zero
    assert nar < ctx.minval(True)
    assert ctx.minval(True) < zero < ctx.minval(False) < ctx.maxval(False)
    assert ctx.maxval(False) >= ctx.maxval(False)
    assert ctx.bits_to_number(5) == ctx.bits_to_number(5)


def test_partial_cmp_rejects_other_types():
    ctx = PositContext(2, 8)
    with pytest.raises(TypeError):
        ctx.zero().partial_cmp(RFloat.zero())


def test_context_parameters():
    ctx = PositContext(2, 8)
    assert ctx.max_p() == 3
    assert ctx.rscale() == 4
    assert ctx.rmax() == 6
    assert ctx.emax() == 24
    assert ctx.expmax() == 24
    assert ctx.emin() == -24
    assert ctx.expmin() == -24


def test_invalid_contexts():
    with pytest.raises(ValueError):
        PositContext(33, 40)
    with pytest.raises(ValueError):
        PositContext(2, 4)


def test_bits_out_of_range():
    ctx = PositContext(2, 6)
    with pytest.raises(ValueError):
        ctx.bits_to_number(64)
    with pytest.raises(ValueError):
        ctx.bits_to_number(-1)