"""
PKCS7-style padding.

Two policies are part of the contract:

* ``pad`` always appends padding, so an input whose length is already a
  multiple of the block size grows by one full block of ``0x10`` bytes.
* ``unpad`` is tolerant: when the trailing bytes do not form a valid pad it
  returns the data unchanged instead of raising.
"""

from .tables import BLOCK_SIZE


def pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Append 1..block_size bytes, each equal to the pad length.

    Args:
        data: Bytes to pad
        block_size: Block size in bytes (default 16)

    Returns:
        Padded bytes whose length is a multiple of block_size
    """
    pad_len = block_size - (len(data) % block_size)
    return data + bytes([pad_len]) * pad_len


def unpad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Strip a valid pad, or return data unchanged when there is none.

    The last byte is read as the candidate pad length p. The pad is stripped
    only if 1 <= p <= block_size and all of the trailing p bytes equal p.
    """
    if not data:
        return data

    pad_len = data[-1]
    if not 1 <= pad_len <= block_size or pad_len > len(data):
        return data
    if any(b != pad_len for b in data[-pad_len:]):
        return data
    return data[:-pad_len]
