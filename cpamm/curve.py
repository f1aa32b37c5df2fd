"""Concentrated-liquidity curve math on Q64.64 square-root prices."""

from enum import Enum
from typing import Optional, Tuple

from .errors import ErrorCode, PoolError

RESOLUTION = 64

_U64_MAX = (1 << 64) - 1
_U128_MAX = (1 << 128) - 1
_U256_MAX = (1 << 256) - 1
_Q128 = 1 << (RESOLUTION * 2)


class Rounding(Enum):
    """Direction in which a division result is rounded."""

    UP = "up"
    DOWN = "down"


def _overflow() -> PoolError:
    return PoolError(ErrorCode.MATH_OVERFLOW)


def _u256(value: int) -> int:
    if value < 0 or value > _U256_MAX:
        raise _overflow()
    return value


def _to_u64(value: int) -> int:
    if value > _U64_MAX:
        raise _overflow()
    return value


def _to_u128(value: int) -> int:
    if value > _U128_MAX:
        raise PoolError(ErrorCode.TYPE_CAST_FAILED)
    return value


def _price_delta(lower: int, upper: int) -> int:
    if upper < lower:
        raise _overflow()
    return upper - lower


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _mul_div(x: int, y: int, denominator: int, rounding: Rounding) -> Optional[int]:
    """x * y / denominator, or None when the divisor is zero or the result exceeds 256 bits."""
    if denominator == 0:
        return None
    quotient, remainder = divmod(x * y, denominator)
    if rounding is Rounding.UP and remainder:
        quotient += 1
    if quotient > _U256_MAX:
        return None
    return quotient


def get_initialize_amounts(
    sqrt_min_price: int, sqrt_max_price: int, sqrt_price: int, liquidity: int
) -> Tuple[int, int]:
    """Token amounts (base, quote) needed to seed ``liquidity`` at ``sqrt_price``."""
    amount_a = get_delta_amount_a_unsigned(sqrt_price, sqrt_max_price, liquidity, Rounding.UP)
    amount_b = get_delta_amount_b_unsigned(sqrt_min_price, sqrt_price, liquidity, Rounding.UP)
    return amount_a, amount_b


def get_delta_amount_a_unsigned(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, round: Rounding
) -> int:
    """Δa = L * (√P_upper - √P_lower) / (√P_upper * √P_lower), as a u64."""
    return _to_u64(
        get_delta_amount_a_unsigned_unchecked(
            lower_sqrt_price, upper_sqrt_price, liquidity, round
        )
    )


def get_delta_amount_a_unsigned_unchecked(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, round: Rounding
) -> int:
    """Δa without the u64 bound."""
    delta = _price_delta(lower_sqrt_price, upper_sqrt_price)
    denominator = _u256(lower_sqrt_price * upper_sqrt_price)
    if denominator <= 0:
        raise ValueError("sqrt prices must be positive")
    result = _mul_div(liquidity, delta, denominator, round)
    if result is None:
        raise _overflow()
    return result


def get_delta_amount_b_unsigned(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, round: Rounding
) -> int:
    """Δb = L * (√P_upper - √P_lower), as a u64."""
    return _to_u64(
        get_delta_amount_b_unsigned_unchecked(
            lower_sqrt_price, upper_sqrt_price, liquidity, round
        )
    )


def get_delta_amount_b_unsigned_unchecked(
    lower_sqrt_price: int, upper_sqrt_price: int, liquidity: int, round: Rounding
) -> int:
    """Δb without the u64 bound."""
    delta = _price_delta(lower_sqrt_price, upper_sqrt_price)
    product = _u256(liquidity * delta)
    if round is Rounding.UP:
        return _ceil_div(product, _Q128)
    return product >> (RESOLUTION * 2)


def get_next_sqrt_price_from_input(
    sqrt_price: int, liquidity: int, amount_in: int, a_for_b: bool
) -> int:
    """Next sqrt price after adding ``amount_in`` of the input token."""
    if sqrt_price <= 0:
        raise ValueError("sqrt_price must be positive")
    if liquidity <= 0:
        raise ValueError("liquidity must be positive")
    if a_for_b:
        return get_next_sqrt_price_from_amount_a_rounding_up(sqrt_price, liquidity, amount_in)
    return get_next_sqrt_price_from_amount_b_rounding_down(sqrt_price, liquidity, amount_in)


def get_next_sqrt_price_from_amount_a_rounding_up(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """√P' = √P * L / (L + Δx * √P), rounded up."""
    if amount == 0:
        return sqrt_price
    product = _u256(amount * sqrt_price)
    denominator = _u256(liquidity + product)
    result = _mul_div(liquidity, sqrt_price, denominator, Rounding.UP)
    if result is None:
        raise _overflow()
    return _to_u128(result)


def get_next_sqrt_price_from_amount_b_rounding_down(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """√P' = √P + Δy / L, rounded down."""
    shifted = _u256(amount << (RESOLUTION * 2))
    if liquidity == 0:
        raise _overflow()
    quotient = shifted // liquidity
    return _to_u128(_u256(sqrt_price + quotient))


def get_next_sqrt_price_from_output(
    sqrt_price: int, liquidity: int, amount_out: int, a_for_b: bool
) -> int:
    """Next sqrt price after removing ``amount_out`` of the output token."""
    if sqrt_price <= 0:
        raise ValueError("sqrt_price must be positive")
    if liquidity <= 0:
        raise ValueError("liquidity must be positive")
    if a_for_b:
        return get_next_sqrt_price_from_amount_b_rounding_up(sqrt_price, liquidity, amount_out)
    return get_next_sqrt_price_from_amount_a_rounding_down(sqrt_price, liquidity, amount_out)


def get_next_sqrt_price_from_amount_b_rounding_up(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """√P' = √P - Δy / L, with the quotient rounded up."""
    shifted = _u256(amount << (RESOLUTION * 2))
    quotient = _ceil_div(shifted, liquidity)
    return _to_u128(_u256(sqrt_price - quotient))


def get_next_sqrt_price_from_amount_a_rounding_down(
    sqrt_price: int, liquidity: int, amount: int
) -> int:
    """√P' = √P * L / (L - Δx * √P), rounded down."""
    if amount == 0:
        return sqrt_price
    product = _u256(amount * sqrt_price)
    denominator = _u256(liquidity - product)
    result = _mul_div(liquidity, sqrt_price, denominator, Rounding.DOWN)
    if result is None:
        raise _overflow()
    return _to_u128(result)