import pytest

from pipeforge.numbers import INT_MAX, INT_MIN, atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 7, -42, 1000, INT_MAX, INT_MIN, 123456789])
def test_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_min_value():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_matches_int_parsing():
    for n in (0, 5, -5, 987654, -987654):
        assert int(itoa(n)) == n


@pytest.mark.parametrize("n", [INT_MAX + 1, INT_MIN - 1, 2**40])
def test_itoa_out_of_range(n):
    with pytest.raises(OverflowError):
        itoa(n)


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n\v\f\r-123") == -atoi("123")
    assert atoi("   +77") == atoi("77")


def test_atoi_stops_at_non_digit():
    assert atoi("  +00432f2") == atoi("432")
    assert atoi("12abc34") == atoi("12")


def test_atoi_leading_zeros():
    assert atoi("0000815") == atoi("815")


def test_atoi_no_digits():
    assert atoi("") == 0
    assert atoi("abc") == atoi("")
    assert atoi("+-5") == atoi("")


def test_atoi_only_one_sign_allowed():
    assert atoi("--5") == atoi("x")


def test_atoi_min_value():
    assert atoi("-2147483648") == INT_MIN


def test_atoi_wraps_like_int32():
    assert atoi("2147483648") == INT_MIN
    assert atoi(str(INT_MAX)) == INT_MAX