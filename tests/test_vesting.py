import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpamm.constants import MAX_VESTING_TIME_DURATION
from cpamm.errors import ErrorCode, PoolError
from cpamm.vesting import VestingParameters

U128_MAX = (1 << 128) - 1
U64_MAX = (1 << 64) - 1


def make(**overrides):
    fields = dict(
        cliff_point=None,
        period_frequency=10,
        cliff_unlock_liquidity=100,
        liquidity_per_period=5,
        number_of_period=3,
    )
    fields.update(overrides)
    return VestingParameters(**fields)


@given(st.integers(min_value=0, max_value=U64_MAX))
def test_cliff_point_defaults_to_current(current):
    assert make().get_cliff_point(current) == current


@given(st.integers(min_value=0, max_value=U64_MAX), st.integers(min_value=0, max_value=U64_MAX))
def test_cliff_point_explicit(cliff, current):
    assert make(cliff_point=cliff).get_cliff_point(current) == cliff


def test_total_lock_amount_without_periods_is_cliff():
    params = make(number_of_period=0, cliff_unlock_liquidity=777)
    assert params.get_total_lock_amount() == 777


def test_total_lock_amount_with_periods():
    assert make().get_total_lock_amount() == 115


def test_total_lock_amount_overflow():
    params = make(liquidity_per_period=U128_MAX, number_of_period=2)
    with pytest.raises(PoolError) as info:
        params.get_total_lock_amount()
    assert info.value.code is ErrorCode.MATH_OVERFLOW


def test_validate_accepts_good_schedule():
    params = make(cliff_point=50)
    assert params.validate(10, MAX_VESTING_TIME_DURATION) is None
    assert params.get_total_lock_amount() > 0


@pytest.mark.parametrize(
    "overrides,current",
    [
        (dict(cliff_point=5), 10),
        (dict(cliff_point=None, number_of_period=0), 10),
        (dict(cliff_point=10, number_of_period=0), 10),
        (dict(period_frequency=0), 10),
        (dict(liquidity_per_period=0), 10),
        (dict(cliff_point=20, number_of_period=0, cliff_unlock_liquidity=0), 10),
    ],
)
def test_validate_rejects_invalid(overrides, current):
    with pytest.raises(PoolError) as info:
        make(**overrides).validate(current, MAX_VESTING_TIME_DURATION)
    assert info.value.code is ErrorCode.INVALID_VESTING_INFO


def test_validate_rejects_too_long_duration():
    params = make(cliff_point=0, number_of_period=0)
    with pytest.raises(PoolError) as info:
        params.validate(0, 0)
    assert info.value.code is ErrorCode.INVALID_VESTING_INFO

    long_cliff = make(cliff_point=MAX_VESTING_TIME_DURATION + 1, number_of_period=0)
    with pytest.raises(PoolError) as info:
        long_cliff.validate(0, MAX_VESTING_TIME_DURATION)
    assert info.value.code is ErrorCode.INVALID_VESTING_INFO


def test_validate_duration_at_limit_is_accepted():
    params = make(cliff_point=MAX_VESTING_TIME_DURATION, number_of_period=0)
    assert params.validate(0, MAX_VESTING_TIME_DURATION) is None


def test_validate_duration_overflow():
    params = make(period_frequency=U64_MAX, number_of_period=2)
    with pytest.raises(PoolError) as info:
        params.validate(0, U64_MAX)
    assert info.value.code is ErrorCode.MATH_OVERFLOW