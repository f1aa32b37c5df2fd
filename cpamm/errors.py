"""Error codes of the pool and the exception that carries them."""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Numbered pool errors, each with a human-readable description."""

    def __new__(cls, value: int, description: str) -> "ErrorCode":
        member = int.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member

    MATH_OVERFLOW = 6000, "Math operation overflow"
    INVALID_FEE = 6001, "Invalid fee setup"
    EXCEEDED_SLIPPAGE = 6002, "Exceeded slippage tolerance"
    POOL_DISABLED = 6003, "Pool disabled"
    EXCEED_MAX_FEE_BPS = 6004, "Exceeded max fee bps"
    INVALID_ADMIN = 6005, "Invalid admin"
    AMOUNT_IS_ZERO = 6006, "Amount is zero"
    TYPE_CAST_FAILED = 6007, "Type cast error"
    UNABLE_TO_MODIFY_ACTIVATION_POINT = 6008, "Unable to modify activation point"
    INVALID_AUTHORITY_TO_CREATE_THE_POOL = 6009, "Invalid authority to create the pool"
    INVALID_ACTIVATION_TYPE = 6010, "Invalid activation type"
    INVALID_ACTIVATION_POINT = 6011, "Invalid activation point"
    INVALID_QUOTE_MINT = 6012, "Quote token must be SOL,USDC"
    INVALID_FEE_CURVE = 6013, "Invalid fee curve"
    INVALID_PRICE_RANGE = 6014, "Invalid Price Range"
    PRICE_RANGE_VIOLATION = 6015, "Trade is over price range"
    INVALID_PARAMETERS = 6016, "Invalid parameters"
    INVALID_COLLECT_FEE_MODE = 6017, "Invalid collect fee mode"
    INVALID_INPUT = 6018, "Invalid input"
    CANNOT_CREATE_TOKEN_BADGE_ON_SUPPORTED_MINT = (
        6019,
        "Cannot create token badge on supported mint",
    )
    INVALID_TOKEN_BADGE = 6020, "Invalid token badge"
    INVALID_MINIMUM_LIQUIDITY = 6021, "Invalid minimum liquidity"
    INVALID_VESTING_INFO = 6022, "Invalid vesting information"
    INSUFFICIENT_LIQUIDITY = 6023, "Insufficient liquidity"
    INVALID_VESTING_ACCOUNT = 6024, "Invalid vesting account"
    INVALID_POOL_STATUS = 6025, "Invalid pool status"
    UNSUPPORT_NATIVE_MINT_TOKEN2022 = 6026, "Unsupported native mint token2022"
    INVALID_REWARD_INDEX = 6027, "Invalid reward index"
    INVALID_REWARD_DURATION = 6028, "Invalid reward duration"
    REWARD_INITIALIZED = 6029, "Reward already initialized"
    REWARD_UNINITIALIZED = 6030, "Reward not initialized"
    INVALID_REWARD_VAULT = 6031, "Invalid reward vault"
    MUST_WITHDRAWN_INELIGIBLE_REWARD = 6032, "Must withdraw ineligible reward"
    IDENTICAL_REWARD_DURATION = 6033, "Reward duration is the same"
    REWARD_CAMPAIGN_IN_PROGRESS = 6034, "Reward campaign in progress"
    IDENTICAL_FUNDER = 6035, "Identical funder"
    INVALID_FUNDER = 6036, "Invalid funder"
    REWARD_NOT_ENDED = 6037, "Reward not ended"
    FEE_INVERSE_IS_INCORRECT = 6038, "Fee inverse is incorrect"
    POSITION_IS_NOT_EMPTY = 6039, "Position is not empty"
    INVALID_POOL_CREATOR_AUTHORITY = 6040, "Invalid pool creator authority"
    INVALID_CONFIG_TYPE = 6041, "Invalid config type"
    INVALID_POOL_CREATOR = 6042, "Invalid pool creator"
    REWARD_VAULT_FROZEN_SKIP_REQUIRED = (
        6043,
        "Reward vault is frozen, must skip reward to proceed",
    )


class PoolError(Exception):
    """Raised when a pool operation fails with one of the error codes."""

    def __init__(self, code: "ErrorCode | int") -> None:
        self.code = ErrorCode(code)
        super().__init__(self.message())

    def message(self) -> str:
        """The description of this error's code."""
        return self.code.description

    def __repr__(self) -> str:
        return f"PoolError({self.code.name})"