"""Ordering of public keys, used to derive pool addresses independent of mint order."""

from typing import Union

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {char: value for value, char in enumerate(_ALPHABET)}
_KEY_LENGTH = 32

Key = Union[str, bytes, bytearray]


def _decode_base58(text: str) -> bytes:
    leading_zeros = len(text) - len(text.lstrip("1"))
    number = 0
    for char in text:
        try:
            number = number * 58 + _INDEX[char]
        except KeyError:
            raise ValueError(f"invalid base58 character {char!r}") from None
    body = number.to_bytes((number.bit_length() + 7) // 8, "big") if number else b""
    return b"\x00" * leading_zeros + body


def pubkey_bytes(key: Key) -> bytes:
    """The 32 raw bytes of a public key given as base58 text or as bytes."""
    if isinstance(key, str):
        raw = _decode_base58(key)
    elif isinstance(key, (bytes, bytearray)):
        raw = bytes(key)
    else:
        raise TypeError(f"unsupported key type: {type(key).__name__}")
    if len(raw) != _KEY_LENGTH:
        raise ValueError(f"public key must be {_KEY_LENGTH} bytes, got {len(raw)}")
    return raw


def max_key(left: Key, right: Key) -> bytes:
    """Bytes of the greater of two keys, compared byte by byte."""
    return max(pubkey_bytes(left), pubkey_bytes(right))


def min_key(left: Key, right: Key) -> bytes:
    """Bytes of the lesser of two keys, compared byte by byte."""
    return min(pubkey_bytes(left), pubkey_bytes(right))