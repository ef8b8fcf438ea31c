"""
Single entry point for the text ciphers.

encrypt/decrypt run AES in the direction their name says. The
process_with_* functions keep the content-sniffing behaviour: each cipher
decides the direction from the text itself, whatever the caller intended.
"""

from __future__ import annotations

from .aes import AESCipher
from .interfaces import BaseCipher, CipherConfig
from .trace import TraceRecorder
from .wire import Direction
from .xor import XORCipher

# Registry of available algorithms
ALGORITHMS: dict[str, type[BaseCipher]] = {
    "aes": AESCipher,
    "xor": XORCipher,
}


def get_algorithm(name: str) -> type[BaseCipher]:
    """Get cipher class by name.

    Raises:
        KeyError: If the algorithm is not registered
    """
    if name not in ALGORITHMS:
        available = ", ".join(ALGORITHMS.keys())
        raise KeyError(f"Unknown algorithm '{name}'. Available: {available}")
    return ALGORITHMS[name]


def list_algorithms() -> list[dict[str, str]]:
    """List registered algorithms with descriptions."""
    return [
        {"name": name, "description": getattr(cls, "description", "No description")}
        for name, cls in ALGORITHMS.items()
    ]


def encrypt(plaintext: str, key: str) -> str:
    """Encrypt plaintext with AES."""
    return AESCipher().encrypt(plaintext, key)


def decrypt(ciphertext: str, key: str) -> str:
    """Decrypt AES wire text.

    Raises:
        MalformedCiphertext: If the wire text cannot be decoded
    """
    return AESCipher().decrypt(ciphertext, key)


def process_with_aes(text: str, key: str) -> str:
    """AES in whichever direction the content heuristic picks."""
    return AESCipher().process(text, key)


def process_with_xor(text: str, key: str) -> str:
    """XOR in whichever direction the content heuristic picks."""
    return XORCipher().process(text, key)


def process_text(
    text: str,
    key: str,
    config: CipherConfig | None = None,
    tracer: TraceRecorder | None = None,
) -> str:
    """
    Transform text according to a configuration.

    Args:
        text: Plaintext or wire text
        key: Key text
        config: Algorithm and direction (defaults to AES, auto direction)
        tracer: Optional trace recorder

    Returns:
        Wire text when encrypting, plaintext when decrypting
    """
    config = config or CipherConfig()
    cipher = get_algorithm(config.algorithm)(tracer=tracer)

    direction = config.explicit_direction
    if direction is None:
        return cipher.process(text, key)

    if tracer:
        tracer.record(
            operation="direction",
            cipher=cipher.name,
            direction=direction.value,
            heuristic=False,
        )
    return cipher.apply(text, key, direction)


__all__ = [
    "ALGORITHMS",
    "Direction",
    "get_algorithm",
    "list_algorithms",
    "encrypt",
    "decrypt",
    "process_with_aes",
    "process_with_xor",
    "process_text",
]
