"""
Textual wire format and the content-shape direction heuristic.

Ciphertext travels as decimal byte values separated by single spaces, e.g.
``"105 196 224 216"``. There is no length prefix, IV or tag.

The heuristic treats a text as already encrypted when it consists only of
digits and spaces, contains at least one space, and splits into at least
``min_tokens`` tokens. Plaintext that happens to look like that (for example
``"1 2 3 ... 16"``) is misclassified; callers that know the direction should
pass it explicitly instead of relying on this module.
"""

from __future__ import annotations

import enum
import re

from .errors import MalformedCiphertext

# AES needs at least one full block of byte tokens
AES_MIN_TOKENS = 16
# XOR only requires the digits-and-spaces shape with at least one space
XOR_MIN_TOKENS = 0

_CIPHERTEXT_SHAPE = re.compile(r"[0-9 ]+")
_DECIMAL = re.compile(r"[0-9]+")


class Direction(enum.Enum):
    """Which way a text should be transformed."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def encode_bytes(data: bytes) -> str:
    """Serialize bytes as space-separated decimal values."""
    return " ".join(str(b) for b in data)


def split_tokens(text: str) -> list[str]:
    """
    Split wire text on single spaces.

    Trailing empty tokens are dropped so a trailing delimiter is accepted.
    Leading and inner empty tokens are kept and rejected later by
    parse_token.
    """
    if not text:
        return []
    tokens = text.split(" ")
    while tokens and tokens[-1] == "":
        tokens.pop()
    return tokens


def parse_token(token: str, index: int, max_value: int | None = 0xff) -> int:
    """
    Parse one decimal token.

    Args:
        token: Token text
        index: Position of the token (for error messages)
        max_value: Largest accepted value, or None for no bound

    Raises:
        MalformedCiphertext: If the token is not a decimal integer or is out of range
    """
    if not _DECIMAL.fullmatch(token):
        raise MalformedCiphertext(f"Token {index} is not a decimal integer: {token!r}")
    value = int(token)
    if max_value is not None and value > max_value:
        raise MalformedCiphertext(
            f"Token {index} value {value} is out of range 0..{max_value}"
        )
    return value


def decode_tokens(tokens: list[str], multiple_of: int = 1) -> bytes:
    """
    Parse decimal byte tokens.

    Args:
        tokens: Tokens from split_tokens
        multiple_of: Required divisor of the token count (16 for AES)

    Returns:
        Decoded bytes

    Raises:
        MalformedCiphertext: On a bad token or token count
    """
    if len(tokens) % multiple_of:
        raise MalformedCiphertext(
            f"Ciphertext has {len(tokens)} values, expected a multiple of {multiple_of}"
        )
    return bytes(parse_token(tok, i) for i, tok in enumerate(tokens))


def decode_bytes(text: str, multiple_of: int = 1) -> bytes:
    """Split and parse wire text in one step."""
    return decode_tokens(split_tokens(text), multiple_of)


def looks_encrypted(text: str, min_tokens: int = AES_MIN_TOKENS) -> bool:
    """
    Return True if text has the shape of wire ciphertext.

    Args:
        text: Candidate text
        min_tokens: Minimum token count (16 for AES, 0 for XOR)
    """
    if not _CIPHERTEXT_SHAPE.fullmatch(text) or " " not in text:
        return False
    return len(split_tokens(text)) >= min_tokens


def detect_direction(text: str, min_tokens: int = AES_MIN_TOKENS) -> Direction:
    """Guess the direction from the content shape."""
    if looks_encrypted(text, min_tokens):
        return Direction.DECRYPT
    return Direction.ENCRYPT
