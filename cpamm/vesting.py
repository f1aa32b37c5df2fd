"""Parameters for locking position liquidity under a vesting schedule."""

from dataclasses import dataclass
from typing import Optional

from .errors import ErrorCode, PoolError

_U64_MAX = (1 << 64) - 1
_U128_MAX = (1 << 128) - 1


def _checked(value: int, limit: int) -> int:
    if value < 0 or value > limit:
        raise PoolError(ErrorCode.MATH_OVERFLOW)
    return value


def _invalid() -> PoolError:
    return PoolError(ErrorCode.INVALID_VESTING_INFO)


@dataclass(frozen=True)
class VestingParameters:
    """A cliff release followed by equal releases every ``period_frequency`` points.

    ``cliff_point`` of None starts vesting at the current point.
    """

    cliff_point: Optional[int]
    period_frequency: int
    cliff_unlock_liquidity: int
    liquidity_per_period: int
    number_of_period: int

    def get_cliff_point(self, current_point: int) -> int:
        """The cliff point, falling back to ``current_point`` when unset."""
        return current_point if self.cliff_point is None else self.cliff_point

    def get_total_lock_amount(self) -> int:
        """Cliff liquidity plus the liquidity released over all periods."""
        periodic = _checked(self.liquidity_per_period * self.number_of_period, _U128_MAX)
        return _checked(self.cliff_unlock_liquidity + periodic, _U128_MAX)

    def validate(self, current_point: int, max_vesting_duration: int) -> None:
        """Raise PoolError if the schedule is not acceptable at ``current_point``."""
        cliff_point = self.get_cliff_point(current_point)

        if cliff_point < current_point:
            raise _invalid()

        if cliff_point == current_point and self.number_of_period <= 0:
            raise _invalid()

        if self.number_of_period > 0 and not (
            self.period_frequency > 0 and self.liquidity_per_period > 0
        ):
            raise _invalid()

        periods_span = _checked(self.period_frequency * self.number_of_period, _U64_MAX)
        vesting_duration = _checked(cliff_point - current_point + periods_span, _U64_MAX)
        if vesting_duration > max_vesting_duration:
            raise _invalid()

        if self.get_total_lock_amount() <= 0:
            raise _invalid()