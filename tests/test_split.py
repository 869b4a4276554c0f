import pytest

from mpmfnum.rfloat import RFloat
from mpmfnum.split import Split

VALUES = [
    RFloat.real(False, -2, 5),
    RFloat.real(True, -4, 7),
    RFloat.real(False, 3, 13),
    RFloat.real(True, -3, 9),
]


@pytest.mark.parametrize("num", VALUES)
@pytest.mark.parametrize("n", range(-8, 8))
def test_parts_sum_to_input(num, n):
    split = Split(num, None, n)
    assert split.num + split.lost == num


@pytest.mark.parametrize("num", VALUES)
@pytest.mark.parametrize("n", range(-8, 8))
def test_parts_are_on_each_side_of_split(num, n):
    split = Split(num, None, n)
    if not split.num.is_zero():
        assert split.num.n() >= n
    if not split.lost.is_zero():
        assert split.lost.e() <= n


@pytest.mark.parametrize("num", VALUES)
@pytest.mark.parametrize("n", range(-8, 8))
def test_split_reports_same_components(num, n):
    split = Split(num, None, n)
    assert split.sign() == num.sign()
    assert split.c() == num.c()
    assert split.m() == num.m()
    assert split.exp() == num.exp()
    assert split.e() == num.e()
    assert split.n() == num.n()
    assert split.prec() == num.prec()
    assert split.is_negative() == num.is_negative()


def test_lost_bits_of_one_and_a_quarter():
    split = Split(RFloat.real(False, -2, 5), 2, -2)
    assert split.num == RFloat.one()
    assert split.lost == RFloat.real(False, -2, 1)
    assert split.rs() == (True, False)
    assert not split.is_exact()


def test_lost_bits_of_one_and_an_eighth():
    split = Split(RFloat.real(False, -3, 9), 2, -2)
    assert split.lost == RFloat.real(False, -3, 1)
    assert split.rs() == (False, True)
    assert split.rgs() == (False, True, False)


def test_split_below_all_digits_is_exact():
    num = RFloat.real(False, 0, 3)
    split = Split(num, None, -5)
    assert split.is_exact()
    assert split.num == num
    assert split.rs() == (False, False)


def test_split_above_all_digits_loses_everything():
    num = RFloat.real(True, 0, 3)
    split = Split(num, None, 10)
    assert split.num.is_zero()
    assert split.lost == num


def test_zero_split():
    split = Split(RFloat.zero(), 1, 0)
    assert split.is_zero()
    assert split.c() == 0
    assert split.prec() is None
    assert split.is_exact()


def test_attributes_are_kept():
    split = Split(RFloat.one(), 4, -3)
    assert split.max_p == 4
    assert split.split_pos == -3
    assert Split.radix() == 2


@pytest.mark.parametrize("bad", [RFloat.nan(), RFloat.pos_infinity(), RFloat.neg_infinity()])
def test_non_real_rejected(bad):
    with pytest.raises(ValueError):
        Split(bad, None, 0)