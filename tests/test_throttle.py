import pytest

from xdccfetch.throttle import SleepThrottle, adjustment_value, rand_range


def test_adjustment_value_zero_divisor():
    assert adjustment_value(10, 0) == 1


def test_adjustment_value_integer_division():
    assert adjustment_value(10, 3) == 3


def test_no_limit_never_sleeps():
    throttle = SleepThrottle(None)
    assert throttle.sleep_time(10**9) == 0
    assert throttle.sleep_time(0) == 0


def test_sleep_grows_while_too_fast():
    throttle = SleepThrottle(100)
    first = throttle.sleep_time(200)
    second = throttle.sleep_time(200)
    assert first > 0
    assert second == 2 * first


def test_sleep_falls_to_zero_when_slow():
    throttle = SleepThrottle(100)
    throttle.sleep_time(1000)
    assert throttle.sleep_time(0) >= 0
    for _ in range(100):
        result = throttle.sleep_time(0)
    assert result == 0


def test_sleep_never_negative_when_below_limit():
    throttle = SleepThrottle(100)
    assert throttle.sleep_time(50) == 0


def test_sleep_decreases_below_limit():
    throttle = SleepThrottle(100)
    for _ in range(20):
        peak = throttle.sleep_time(10_000)
    after = throttle.sleep_time(100)
    assert after < peak


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        SleepThrottle(-1)
    with pytest.raises(ValueError):
        SleepThrottle(100).sleep_time(-5)


def test_rand_range_within_bounds():
    values = {rand_range(3, 7) for _ in range(200)}
    assert values <= {3, 4, 5, 6, 7}


def test_rand_range_single_value():
    assert rand_range(4, 4) == 4


def test_rand_range_inverted_bounds():
    with pytest.raises(ValueError):
        rand_range(5, 1)