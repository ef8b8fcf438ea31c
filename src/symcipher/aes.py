"""
AES text cipher.

Plaintext is UTF-8 encoded, padded (always, see padding), split into 16-byte
blocks and encrypted block by block with no chaining. The ciphertext is
emitted as space-separated decimal byte values with no block delimiter.

Decryption reverses this; unpadding is tolerant, so a wrong key yields
garbled text rather than an error.
"""

from __future__ import annotations

from .errors import MalformedCiphertext
from .interfaces import BaseCipher
from .key_schedule import expand_key
from .padding import pad, unpad
from .rounds import RoundPipeline
from .tables import BLOCK_SIZE
from .utils import chunk_blocks
from .wire import AES_MIN_TOKENS, encode_bytes, decode_bytes, looks_encrypted

TEXT_ENCODING = "utf-8"


def encode_key(key: str) -> bytes:
    """Key text to raw key bytes (UTF-8)."""
    return key.encode(TEXT_ENCODING, errors="replace")


class AESCipher(BaseCipher):
    """AES-128/192/256 over text, ECB-style, decimal wire format."""

    name = "aes"
    description = "AES-128/192/256 (key length selects rounds), PKCS7 padding, decimal wire text"

    def encrypt(self, plaintext: str, key: str) -> str:
        data = pad(plaintext.encode(TEXT_ENCODING, errors="replace"), BLOCK_SIZE)
        ciphertext = self.encrypt_bytes(data, encode_key(key))
        return encode_bytes(ciphertext)

    def decrypt(self, ciphertext: str, key: str) -> str:
        data = decode_bytes(ciphertext, multiple_of=BLOCK_SIZE)
        plaintext = unpad(self.decrypt_bytes(data, encode_key(key)), BLOCK_SIZE)
        return plaintext.decode(TEXT_ENCODING, errors="replace")

    def looks_encrypted(self, text: str) -> bool:
        return looks_encrypted(text, AES_MIN_TOKENS)

    def encrypt_bytes(self, data: bytes, key: bytes) -> bytes:
        """
        Encrypt already-padded data block by block.

        Args:
            data: Bytes whose length is a multiple of 16
            key: Raw key bytes

        Returns:
            Ciphertext bytes of the same length
        """
        pipeline = RoundPipeline(expand_key(key), tracer=self.tracer)
        return b"".join(
            pipeline.encrypt_block(block, i)
            for i, block in enumerate(chunk_blocks(data))
        )

    def decrypt_bytes(self, data: bytes, key: bytes) -> bytes:
        """Decrypt ciphertext bytes block by block (padding is left in place)."""
        if len(data) % BLOCK_SIZE:
            raise MalformedCiphertext(
                f"Ciphertext length {len(data)} is not a multiple of {BLOCK_SIZE}"
            )
        pipeline = RoundPipeline(expand_key(key), tracer=self.tracer)
        return b"".join(
            pipeline.decrypt_block(block, i)
            for i, block in enumerate(chunk_blocks(data))
        )
