"""Core interfaces and configuration for the cipher engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .tables import BLOCK_SIZE
from .wire import Direction

if TYPE_CHECKING:
    from .trace import TraceRecorder

ALGORITHM_NAMES = ("aes", "xor")
DIRECTION_MODES = ("auto", "encrypt", "decrypt")


@dataclass
class CipherConfig:
    """Configuration for a text transform.

    ``direction`` is "auto" to fall back to the content heuristic, or an
    explicit "encrypt"/"decrypt".
    """

    algorithm: str = "aes"

    direction: str = "auto"

    # AES block size in bytes; fixed
    block_size: int = BLOCK_SIZE

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.algorithm not in ALGORITHM_NAMES:
            raise ValueError(
                f"algorithm must be one of {', '.join(ALGORITHM_NAMES)}, got {self.algorithm!r}"
            )
        if self.direction not in DIRECTION_MODES:
            raise ValueError(
                f"direction must be one of {', '.join(DIRECTION_MODES)}, got {self.direction!r}"
            )
        if self.block_size != BLOCK_SIZE:
            raise ValueError(f"block_size must be {BLOCK_SIZE}, got {self.block_size}")

    @property
    def explicit_direction(self) -> Direction | None:
        """The configured Direction, or None when the heuristic decides."""
        if self.direction == "auto":
            return None
        return Direction(self.direction)


class BaseCipher(ABC):
    """Abstract base class for text ciphers.

    Subclasses transform a text with a key in an explicit direction and
    provide the content heuristic used when no direction is given.
    """

    name: str = "base"
    description: str = "Base cipher class"

    def __init__(self, tracer: TraceRecorder | None = None):
        self.tracer = tracer

    @abstractmethod
    def encrypt(self, plaintext: str, key: str) -> str:
        """Encrypt plaintext to wire text."""
        pass

    @abstractmethod
    def decrypt(self, ciphertext: str, key: str) -> str:
        """Decrypt wire text back to plaintext.

        Raises:
            MalformedCiphertext: If the wire text cannot be decoded
        """
        pass

    @abstractmethod
    def looks_encrypted(self, text: str) -> bool:
        """Content heuristic: does text look like this cipher's output?"""
        pass

    def detect_direction(self, text: str) -> Direction:
        if self.looks_encrypted(text):
            return Direction.DECRYPT
        return Direction.ENCRYPT

    def apply(self, text: str, key: str, direction: Direction) -> str:
        """Transform text in an explicit direction."""
        if direction is Direction.DECRYPT:
            return self.decrypt(text, key)
        return self.encrypt(text, key)

    def process(self, text: str, key: str) -> str:
        """Transform text, choosing the direction from its content."""
        direction = self.detect_direction(text)
        if self.tracer:
            self.tracer.record(
                operation="direction",
                cipher=self.name,
                direction=direction.value,
                heuristic=True,
            )
        return self.apply(text, key, direction)
