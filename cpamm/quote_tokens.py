"""Rules on which mints may act as the quote token of a pool."""

from .constants import DEFAULT_QUOTE_MINTS
from .errors import ErrorCode, PoolError


def is_whitelisted_quote_token(mint: str) -> bool:
    """Whether ``mint`` is one of the supported quote mints."""
    return mint in DEFAULT_QUOTE_MINTS


def validate_quote_token(token_mint_a: str, token_mint_b: str, has_alpha_vault: bool) -> None:
    """Check that A is a base token and that an alpha vault only pairs with a known quote B.

    Token B is always treated as the quote token, whitelisted or not.
    """
    if is_whitelisted_quote_token(token_mint_a):
        raise PoolError(ErrorCode.INVALID_QUOTE_MINT)
    if not is_whitelisted_quote_token(token_mint_b) and has_alpha_vault:
        raise PoolError(ErrorCode.INVALID_QUOTE_MINT)