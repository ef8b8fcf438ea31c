"""
AES round pipeline.

Forward schedule (Nr = 10, 12 or 14):
- Round 0: AddRoundKey
- Rounds 1..Nr-1: SubBytes, ShiftRows, MixColumns, AddRoundKey
- Round Nr: SubBytes, ShiftRows, AddRoundKey (no MixColumns)

Inverse schedule:
- Round Nr: AddRoundKey
- Rounds Nr-1..1: InvShiftRows, InvSubBytes, AddRoundKey, InvMixColumns
- Round 0: InvShiftRows, InvSubBytes, AddRoundKey

Every step takes a state and returns a new one; inputs are never mutated.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from .gf256 import gf_mul
from .key_schedule import RoundKeySet, expand_key, round_key_to_state
from .tables import SBOX, INV_SBOX
from .utils import bytes_to_state, state_to_bytes, copy_state

if TYPE_CHECKING:
    from .trace import TraceRecorder

State = list[list[int]]

MIX_MATRIX = (
    (2, 3, 1, 1),
    (1, 2, 3, 1),
    (1, 1, 2, 3),
    (3, 1, 1, 2),
)

INV_MIX_MATRIX = (
    (14, 11, 13, 9),
    (9, 14, 11, 13),
    (13, 9, 14, 11),
    (11, 13, 9, 14),
)


def sub_bytes(state: State) -> State:
    """Substitute every byte through the S-box."""
    return [[SBOX[b] for b in row] for row in state]


def inv_sub_bytes(state: State) -> State:
    """Substitute every byte through the inverse S-box."""
    return [[INV_SBOX[b] for b in row] for row in state]


def shift_rows(state: State) -> State:
    """Rotate row r left by r positions."""
    return [row[r:] + row[:r] for r, row in enumerate(state)]


def inv_shift_rows(state: State) -> State:
    """Rotate row r right by r positions."""
    return [row[4 - r:] + row[:4 - r] for r, row in enumerate(state)]


def _mix(state: State, matrix: tuple[tuple[int, ...], ...]) -> State:
    result = [[0 for _ in range(4)] for _ in range(4)]
    for col in range(4):
        column = [state[row][col] for row in range(4)]
        for row in range(4):
            acc = 0
            for coeff, value in zip(matrix[row], column):
                acc ^= value if coeff == 1 else gf_mul(coeff, value)
            result[row][col] = acc
    return result


def mix_columns(state: State) -> State:
    """Multiply each column by the fixed {2,3,1,1} circulant matrix."""
    return _mix(state, MIX_MATRIX)


def inv_mix_columns(state: State) -> State:
    """Multiply each column by the inverse {14,11,13,9} circulant matrix."""
    return _mix(state, INV_MIX_MATRIX)


def add_round_key(state: State, round_key: tuple[int, ...]) -> State:
    """
    XOR a round key into the state.

    Word ``col`` of the round key is applied to column ``col``, most
    significant byte to row 0.
    """
    result = copy_state(state)
    for col, word in enumerate(round_key):
        for row in range(4):
            result[row][col] ^= (word >> (8 * (3 - row))) & 0xff
    return result


_STEPS: dict[str, Callable[[State], State]] = {
    "SubBytes": sub_bytes,
    "ShiftRows": shift_rows,
    "MixColumns": mix_columns,
    "InvSubBytes": inv_sub_bytes,
    "InvShiftRows": inv_shift_rows,
    "InvMixColumns": inv_mix_columns,
}


def encrypt_schedule(rounds: int) -> list[tuple[int, list[str]]]:
    """Forward schedule as (round key index, operations) pairs."""
    schedule = [(0, ["AddRoundKey"])]
    for rnd in range(1, rounds):
        schedule.append((rnd, ["SubBytes", "ShiftRows", "MixColumns", "AddRoundKey"]))
    schedule.append((rounds, ["SubBytes", "ShiftRows", "AddRoundKey"]))
    return schedule


def decrypt_schedule(rounds: int) -> list[tuple[int, list[str]]]:
    """Inverse schedule as (round key index, operations) pairs."""
    schedule = [(rounds, ["AddRoundKey"])]
    for rnd in range(rounds - 1, 0, -1):
        schedule.append((rnd, ["InvShiftRows", "InvSubBytes", "AddRoundKey", "InvMixColumns"]))
    schedule.append((0, ["InvShiftRows", "InvSubBytes", "AddRoundKey"]))
    return schedule


class RoundPipeline:
    """
    Runs the forward or inverse AES rounds over single 16-byte blocks.

    The pipeline holds the expanded key and an optional tracer; it keeps no
    state between blocks.
    """

    def __init__(
        self,
        round_keys: RoundKeySet,
        tracer: TraceRecorder | None = None,
    ):
        self.round_keys = round_keys
        self.tracer = tracer

    @property
    def rounds(self) -> int:
        return self.round_keys.rounds

    def encrypt_block(self, block: bytes, block_index: int = 0) -> bytes:
        """Encrypt one 16-byte block."""
        return self._run(block, encrypt_schedule(self.rounds), block_index)

    def decrypt_block(self, block: bytes, block_index: int = 0) -> bytes:
        """Decrypt one 16-byte block."""
        return self._run(block, decrypt_schedule(self.rounds), block_index)

    def _run(
        self,
        block: bytes,
        schedule: list[tuple[int, list[str]]],
        block_index: int,
    ) -> bytes:
        state = bytes_to_state(block)

        for round_num, operations in schedule:
            round_key = self.round_keys[round_num]

            if self.tracer:
                self.tracer.record(
                    block=block_index,
                    round=round_num,
                    operation="round_start: " + " -> ".join(operations),
                    state=copy_state(state),
                    round_key=round_key_to_state(round_key),
                )

            for op in operations:
                if op == "AddRoundKey":
                    state = add_round_key(state, round_key)
                else:
                    state = _STEPS[op](state)

                if self.tracer and self.tracer.verbose:
                    self.tracer.record(
                        block=block_index,
                        round=round_num,
                        operation=op,
                        state=copy_state(state),
                    )

        return state_to_bytes(state)


def encrypt_block(
    key: bytes,
    block: bytes,
    tracer: TraceRecorder | None = None,
) -> bytes:
    """
    Convenience function: expand key and encrypt a single block (no padding).

    Args:
        key: Raw key bytes (coerced per the key length policy)
        block: 16-byte block
        tracer: Optional trace recorder

    Returns:
        16-byte ciphertext block
    """
    return RoundPipeline(expand_key(key), tracer=tracer).encrypt_block(block)


def decrypt_block(
    key: bytes,
    block: bytes,
    tracer: TraceRecorder | None = None,
) -> bytes:
    """Convenience function: expand key and decrypt a single block."""
    return RoundPipeline(expand_key(key), tracer=tracer).decrypt_block(block)
