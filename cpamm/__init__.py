"""Constant-product AMM math and validation rules over a bounded sqrt-price range."""

__version__ = "0.1.0"

__all__ = ["admin", "constants", "curve", "errors", "pool_keys", "quote_tokens", "vesting"]