# cpamm

Integer math and validation rules for a constant-product automated market
maker that trades inside a bounded square-root price range. Prices are
Q64.64 fixed-point square roots (`sqrt(token_b / token_a) << 64`), token
amounts are bounded to unsigned 64 bits and next prices to unsigned 128
bits. All arithmetic uses exact Python integers; results that leave those
bounds raise `cpamm.errors.PoolError`.

## Install

```
pip install cpamm
```

For running the tests:

```
pip install "cpamm[test]"
pytest
```

## Modules

- `cpamm.constants`: price bounds (`MIN_SQRT_PRICE`, `MAX_SQRT_PRICE`),
  fee limits (`FEE_DENOMINATOR`, `MAX_FEE_NUMERATOR`, ...), reward
  durations, activation and vesting buffers (`MAX_VESTING_SLOT_DURATION`,
  `MAX_VESTING_TIME_DURATION`, ...), account seed prefixes, `TREASURY` and
  `DEFAULT_QUOTE_MINTS` (the SOL and USDC mints).
- `cpamm.errors`: `ErrorCode`, an `IntEnum` of every pool error (codes
  6000 to 6043), each with a `description`; and `PoolError`, the exception
  that carries one. `PoolError(code)` accepts an `ErrorCode` or its integer
  value; `exc.code` holds the member and `exc.message()` its description.
- `cpamm.curve`: `Rounding` (`UP`, `DOWN`) and the curve functions
  `get_initialize_amounts`, `get_delta_amount_a_unsigned`,
  `get_delta_amount_b_unsigned` (and their `_unchecked` variants, which skip
  the 64-bit bound), `get_next_sqrt_price_from_input`,
  `get_next_sqrt_price_from_output` and the four directional helpers they
  dispatch to. Non-positive price or liquidity passed to the two
  `get_next_sqrt_price_from_*` entry points raises `ValueError`.
- `cpamm.vesting`: `VestingParameters`, a frozen dataclass, with
  `get_cliff_point`, `get_total_lock_amount` and `validate`, which raises
  `PoolError` with `ErrorCode.INVALID_VESTING_INFO` for an unacceptable
  schedule.
- `cpamm.admin`: `ADMINS` and `assert_eq_admin(admin, local=False)`, which
  tells whether a base58 key is an admin; with `local=True` every key is
  accepted.
- `cpamm.quote_tokens`: `is_whitelisted_quote_token(mint)` and
  `validate_quote_token(token_mint_a, token_mint_b, has_alpha_vault)`, which
  raises `ErrorCode.INVALID_QUOTE_MINT` if token A is a quote mint, or if an
  alpha vault is requested while token B is not one.
- `cpamm.pool_keys`: `pubkey_bytes` decodes a base58 key (or checks raw
  bytes) into its 32 bytes; `max_key` and `min_key` order a mint pair byte
  by byte, as used when deriving a pool address.

## Example

```python
from cpamm.constants import MIN_SQRT_PRICE, MAX_SQRT_PRICE
from cpamm.curve import get_initialize_amounts, get_next_sqrt_price_from_input
from cpamm.errors import ErrorCode, PoolError

sqrt_price = 1 << 64            # price 1.0
liquidity = 1 << 80

amount_a, amount_b = get_initialize_amounts(
    MIN_SQRT_PRICE, MAX_SQRT_PRICE, sqrt_price, liquidity
)

next_price = get_next_sqrt_price_from_input(sqrt_price, liquidity, 1_000_000, a_for_b=True)
assert next_price < sqrt_price

try:
    # at the lowest price almost all liquidity is token A: more than 64 bits of it
    get_initialize_amounts(MIN_SQRT_PRICE, MAX_SQRT_PRICE, MIN_SQRT_PRICE, 1 << 100)
except PoolError as exc:
    assert exc.code is ErrorCode.MATH_OVERFLOW
    print(exc.message())        # Math operation overflow
```

Vesting schedules are checked before a position is locked:

```python
from cpamm.vesting import VestingParameters

params = VestingParameters(
    cliff_point=None,
    period_frequency=3600,
    cliff_unlock_liquidity=0,
    liquidity_per_period=1_000,
    number_of_period=24,
)
params.validate(current_point=1_700_000_000, max_vesting_duration=86_400)
print(params.get_total_lock_amount())   # 24000
```

## What this package does not do

It holds the pure math and validation rules only. There is no pool or
position state, no swap execution or fee collection, no token transfers,
no rewards, and no command-line tool or network access: callers keep their
own state and use these functions to compute amounts and check parameters.