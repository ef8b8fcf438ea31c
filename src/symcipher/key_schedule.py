"""
AES key schedule for 128, 192 and 256-bit keys.

Key length policy:
- 16 bytes -> 10 rounds
- 24 bytes -> 12 rounds
- 32 bytes -> 14 rounds
- anything else is silently coerced to 16 bytes (truncated or zero-filled)
  and uses 10 rounds. A coerced key is indistinguishable from the
  equivalent 16-byte key.
"""

from __future__ import annotations

from dataclasses import dataclass

from .tables import SBOX, RCON

ROUNDS_BY_KEY_BITS = {
    128: 10,
    192: 12,
    256: 14,
}

DEFAULT_KEY_BYTES = 16


@dataclass(frozen=True)
class RoundKeySet:
    """Expanded key: ``rounds + 1`` round keys of four 32-bit words each."""

    rounds: int
    words: tuple[int, ...]

    def __post_init__(self) -> None:
        expected = 4 * (self.rounds + 1)
        if len(self.words) != expected:
            raise ValueError(
                f"Expected {expected} words for {self.rounds} rounds, got {len(self.words)}"
            )

    def __len__(self) -> int:
        return self.rounds + 1

    def __getitem__(self, round_num: int) -> tuple[int, ...]:
        if not 0 <= round_num <= self.rounds:
            raise IndexError(f"Round key {round_num} out of range 0..{self.rounds}")
        return self.words[4 * round_num:4 * round_num + 4]


def rounds_for_key(key: bytes) -> int | None:
    """Return the round count for a standard key length, or None."""
    return ROUNDS_BY_KEY_BITS.get(len(key) * 8)


def normalize_key(key: bytes) -> tuple[bytes, int]:
    """
    Apply the key length policy.

    Args:
        key: Raw key bytes of any length

    Returns:
        Tuple of (key bytes actually scheduled, number of rounds)
    """
    rounds = rounds_for_key(key)
    if rounds is not None:
        return bytes(key), rounds

    coerced = bytes(key[:DEFAULT_KEY_BYTES]).ljust(DEFAULT_KEY_BYTES, b"\x00")
    return coerced, ROUNDS_BY_KEY_BITS[DEFAULT_KEY_BYTES * 8]


def rot_word(word: int) -> int:
    """Rotate a 32-bit word left by one byte: [a,b,c,d] -> [b,c,d,a]."""
    return ((word << 8) | (word >> 24)) & 0xffffffff


def sub_word(word: int) -> int:
    """Apply the S-box to each byte of a 32-bit word."""
    result = 0
    for shift in (24, 16, 8, 0):
        result |= SBOX[(word >> shift) & 0xff] << shift
    return result


def expand_key(key: bytes) -> RoundKeySet:
    """
    Expand a key into all round keys.

    The key is first passed through normalize_key, so any key length is
    accepted.

    Args:
        key: Raw key bytes

    Returns:
        RoundKeySet with 4 * (rounds + 1) words
    """
    key, rounds = normalize_key(key)
    nk = len(key) // 4
    total_words = 4 * (rounds + 1)

    w = [int.from_bytes(key[4 * i:4 * i + 4], "big") for i in range(nk)]

    for i in range(nk, total_words):
        temp = w[i - 1]
        if i % nk == 0:
            temp = sub_word(rot_word(temp)) ^ (RCON[i // nk - 1] << 24)
        elif nk > 6 and i % nk == 4:
            temp = sub_word(temp)
        w.append(w[i - nk] ^ temp)

    return RoundKeySet(rounds=rounds, words=tuple(w))


def round_key_to_state(round_key: tuple[int, ...]) -> list[list[int]]:
    """Lay out a round key (4 words) as a 4x4 state, one word per column."""
    state = [[0 for _ in range(4)] for _ in range(4)]
    for col, word in enumerate(round_key):
        for row in range(4):
            state[row][col] = (word >> (8 * (3 - row))) & 0xff
    return state
