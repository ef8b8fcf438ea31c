"""
Repeating-key XOR text cipher.

Each character's code point is XORed with the key character at the same
index modulo the key length. Output is one decimal value per character, each
followed by a space (so non-empty output always ends with a space). There is
no padding and no blocking.
"""

from .errors import EmptyKeyError, MalformedCiphertext
from .interfaces import BaseCipher
from .wire import XOR_MIN_TOKENS, looks_encrypted, parse_token, split_tokens

MAX_CODE_POINT = 0x10ffff


def _check_key(key: str) -> None:
    if not key:
        raise EmptyKeyError("XOR key must not be empty")


class XORCipher(BaseCipher):
    """Repeating-key XOR over code points."""

    name = "xor"
    description = "Repeating-key XOR over characters, decimal wire text"

    def encrypt(self, plaintext: str, key: str) -> str:
        if plaintext:
            _check_key(key)
        parts = []
        for i, ch in enumerate(plaintext):
            parts.append(f"{ord(ch) ^ ord(key[i % len(key)])} ")
        return "".join(parts)

    def decrypt(self, ciphertext: str, key: str) -> str:
        tokens = split_tokens(ciphertext)
        if tokens:
            _check_key(key)
        chars = []
        for i, token in enumerate(tokens):
            value = parse_token(token, i, max_value=None) ^ ord(key[i % len(key)])
            if value > MAX_CODE_POINT:
                raise MalformedCiphertext(
                    f"Token {i} decodes to {value:#x}, which is not a valid code point"
                )
            chars.append(chr(value))
        return "".join(chars)

    def looks_encrypted(self, text: str) -> bool:
        return looks_encrypted(text, XOR_MIN_TOKENS)
