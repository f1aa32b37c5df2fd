import pytest

from cpamm.errors import ErrorCode, PoolError


@pytest.mark.parametrize(
    ("code", "text"),
    [
        (ErrorCode.MATH_OVERFLOW, "Math operation overflow"),
        (ErrorCode.INVALID_QUOTE_MINT, "Quote token must be SOL,USDC"),
        (ErrorCode.INVALID_PRICE_RANGE, "Invalid Price Range"),
        (
            ErrorCode.REWARD_VAULT_FROZEN_SKIP_REQUIRED,
            "Reward vault is frozen, must skip reward to proceed",
        ),
    ],
)
def test_message_matches_code(code, text):
    err = PoolError(code)
    assert err.message() == text
    assert str(err) == text
    assert err.code is code


def test_codes_are_consecutive_from_first():
    values = [int(PoolError(int(member)).code) for member in ErrorCode]
    assert values[0] == 6000
    assert values == list(range(values[0], values[0] + len(values)))


def test_integer_code_is_accepted():
    err = PoolError(int(ErrorCode.TYPE_CAST_FAILED))
    assert err.code is ErrorCode.TYPE_CAST_FAILED
    assert err.message() == "Type cast error"


def test_unknown_code_is_rejected():
    with pytest.raises(ValueError):
        PoolError(max(ErrorCode) + 1)


def test_error_is_an_exception_with_code_and_message():
    err = PoolError(ErrorCode.AMOUNT_IS_ZERO)
    assert isinstance(err, Exception)
    assert err.code is ErrorCode.AMOUNT_IS_ZERO
    assert err.message() == "Amount is zero"
    assert str(err) == "Amount is zero"


def test_messages_are_unique():
    messages = [PoolError(member).message() for member in ErrorCode]
    assert len(set(messages)) == len(messages)
    assert "Invalid admin" in messages