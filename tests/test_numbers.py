import pytest

from algodrills.numbers import is_power_of_four, largest_good_integer, maximum_69_number


@pytest.mark.parametrize("exponent", range(16))
def test_powers_of_four_are_accepted(exponent):
    assert is_power_of_four(4**exponent) is True


@pytest.mark.parametrize("exponent", range(1, 16))
def test_neighbours_of_powers_of_four_are_rejected(exponent):
    power = 4**exponent
    assert is_power_of_four(power + 1) is False
    assert is_power_of_four(power - 1) is False
    assert is_power_of_four(2 * power) is False


@pytest.mark.parametrize("n", [0, -1, -4, -16, 2, 8, 5, 12])
def test_non_powers_are_rejected(n):
    assert is_power_of_four(n) is False


def test_maximum_69_number_worked_example():
    assert maximum_69_number(9669) == 9969


@pytest.mark.parametrize("num", [9999, 9, 99, 0])
def test_maximum_69_number_without_six_is_unchanged(num):
    assert maximum_69_number(num) == num


@pytest.mark.parametrize("num", [6, 66, 696, 9966, 6999, 96969, 666666])
def test_maximum_69_number_changes_one_leading_six(num):
    result = maximum_69_number(num)
    diff = result - num
    assert diff > 0
    assert len(str(diff)) == len(str(num)) - str(num).index("6")
    assert str(diff).strip("0") == "3"
    assert "6" not in str(result)[: str(num).index("6") + 1]


def test_maximum_69_number_negative_is_unchanged():
    assert maximum_69_number(-69) == -69


def test_largest_good_integer_worked_example():
    assert largest_good_integer("6777133339") == "777"


def test_largest_good_integer_none_found():
    assert largest_good_integer("42352338") == ""


@pytest.mark.parametrize("num", ["", "1", "11"])
def test_largest_good_integer_short_input(num):
    assert largest_good_integer(num) == largest_good_integer("12")


@pytest.mark.parametrize("num", ["2300019", "111222", "9990009", "5555"])
def test_largest_good_integer_is_a_triple_in_the_input(num):
    result = largest_good_integer(num)
    assert len(result) == 3
    assert len(set(result)) == 1
    assert result in num
    others = [num[i : i + 3] for i in range(len(num) - 2) if len(set(num[i : i + 3])) == 1]
    assert all(result >= other for other in others)