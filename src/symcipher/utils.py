"""
Block/state conversions and hex formatting.

AES state is 4x4 bytes in column-major order:
  state[row][col] where row, col in [0..3]

Column-major mapping from a 16-byte block:
  byte[0]  -> state[0][0]
  byte[1]  -> state[1][0]
  byte[2]  -> state[2][0]
  byte[3]  -> state[3][0]
  byte[4]  -> state[0][1]
  ...
  byte[15] -> state[3][3]
"""

from .tables import BLOCK_SIZE


def bytes_to_state(data: bytes) -> list[list[int]]:
    """
    Convert a 16-byte block to a 4x4 AES state (column-major).

    Args:
        data: 16 bytes of input

    Returns:
        4x4 list of integers (0-255)
    """
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"Expected {BLOCK_SIZE} bytes, got {len(data)}")

    state = [[0 for _ in range(4)] for _ in range(4)]
    for col in range(4):
        for row in range(4):
            state[row][col] = data[col * 4 + row]
    return state


def state_to_bytes(state: list[list[int]]) -> bytes:
    """
    Convert a 4x4 AES state back to a 16-byte block (column-major).

    Args:
        state: 4x4 list of integers

    Returns:
        16 bytes
    """
    result = []
    for col in range(4):
        for row in range(4):
            result.append(state[row][col])
    return bytes(result)


def chunk_blocks(data: bytes) -> list[bytes]:
    """
    Split data into 16-byte blocks.

    The length of data must already be a multiple of the block size
    (padded plaintext or regrouped ciphertext).
    """
    if len(data) % BLOCK_SIZE:
        raise ValueError(
            f"Data length {len(data)} is not a multiple of {BLOCK_SIZE}"
        )
    return [data[i:i + BLOCK_SIZE] for i in range(0, len(data), BLOCK_SIZE)]


def hex_to_bytes(hex_str: str) -> bytes:
    """Convert hex string to bytes."""
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to lowercase hex string."""
    return data.hex()


def state_to_hex(state: list[list[int]]) -> str:
    """
    Convert state to hex string (via bytes).
    """
    return bytes_to_hex(state_to_bytes(state))


def format_state_line(state: list[list[int]]) -> str:
    """
    Format state as 4 space-separated 32-bit column words.

    e.g. "00102030 40506070 8090a0b0 c0d0e0f0"
    """
    words = []
    for col in range(4):
        words.append("".join(f"{state[row][col]:02x}" for row in range(4)))
    return " ".join(words)


def copy_state(state: list[list[int]]) -> list[list[int]]:
    """
    Deep copy a 4x4 state.
    """
    return [[state[row][col] for col in range(4)] for row in range(4)]
