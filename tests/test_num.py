import pytest

from typednum.num import I64_MAX, I64_MIN, Num, NumMismatchError


def test_value_is_kept():
    assert Num(3).value == 3
    assert int(Num(-7)) == -7


def test_check_accepts_equal_value():
    num = Num(42)
    assert num.check(42) is num


def test_check_rejects_other_value():
    with pytest.raises(NumMismatchError) as info:
        Num(3).check(2)
    assert str(info.value) == "not 3"
    assert info.value.expected == 3


def test_check_rejects_bool():
    with pytest.raises(NumMismatchError):
        Num(1).check(True)


def test_mismatch_is_value_error():
    with pytest.raises(ValueError):
        Num(-1).check(-2)


def test_equality_and_hash():
    assert Num(5) == Num(5)
    assert hash(Num(5)) == hash(Num(5))
    assert Num(5) != Num(6)


@pytest.mark.parametrize("value", [I64_MIN, I64_MAX, 0])
def test_range_limits_accepted(value):
    assert Num(value).value == value


@pytest.mark.parametrize("value", [I64_MIN - 1, I64_MAX + 1])
def test_out_of_range_rejected(value):
    with pytest.raises(ValueError):
        Num(value)


@pytest.mark.parametrize("value", [True, 1.0, "1"])
def test_non_int_rejected(value):
    with pytest.raises(TypeError):
        Num(value)