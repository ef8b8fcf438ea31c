"""
symcipher: symmetric text cipher engine.

AES-128/192/256 implemented from scratch (GF(2^8) arithmetic, key schedule,
PKCS7 padding) and a repeating-key XOR transform, both emitting ciphertext as
space-separated decimal byte values.
"""

__version__ = "1.0.0"

from .errors import CipherError, MalformedCiphertext, EmptyKeyError
from .interfaces import BaseCipher, CipherConfig
from .wire import Direction
from .aes import AESCipher
from .xor import XORCipher
from .facade import (
    encrypt,
    decrypt,
    process_with_aes,
    process_with_xor,
    process_text,
    get_algorithm,
    list_algorithms,
)

__all__ = [
    "CipherError",
    "MalformedCiphertext",
    "EmptyKeyError",
    "BaseCipher",
    "CipherConfig",
    "Direction",
    "AESCipher",
    "XORCipher",
    "encrypt",
    "decrypt",
    "process_with_aes",
    "process_with_xor",
    "process_text",
    "get_algorithm",
    "list_algorithms",
]
