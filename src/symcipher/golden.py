"""Golden reference AES using PyCryptodome."""

from Crypto.Cipher import AES

VALID_KEY_LENGTHS = (16, 24, 32)


def _check(key: bytes, block: bytes) -> None:
    if len(key) not in VALID_KEY_LENGTHS:
        raise ValueError(f"Key must be 16, 24 or 32 bytes, got {len(key)}")
    if len(block) != 16:
        raise ValueError(f"Block must be 16 bytes, got {len(block)}")


def golden_encrypt_block(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt a single block using PyCryptodome AES-ECB.

    Args:
        key: 16, 24 or 32-byte AES key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext block

    Raises:
        ValueError: If key or plaintext has the wrong length
    """
    _check(key, plaintext)
    return AES.new(key, AES.MODE_ECB).encrypt(plaintext)


def golden_decrypt_block(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt a single block using PyCryptodome AES-ECB."""
    _check(key, ciphertext)
    return AES.new(key, AES.MODE_ECB).decrypt(ciphertext)


def validate_against_golden(
    key: bytes, plaintext: bytes, candidate_ciphertext: bytes
) -> tuple[bool, str]:
    """Validate a candidate ciphertext against the golden reference.

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = golden_encrypt_block(key, plaintext)
    if candidate_ciphertext == expected:
        return True, ""
    return False, (
        f"Ciphertext mismatch: expected {expected.hex()}, "
        f"got {candidate_ciphertext.hex()}"
    )


# FIPS-197 Appendix C and NIST known-answer vectors
FIPS_197_TEST_VECTORS = [
    {
        "name": "FIPS-197 C.1 (AES-128)",
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    {
        "name": "FIPS-197 C.2 (AES-192)",
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f1011121314151617"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("dda97ca4864cdfe06eaf70a0ec0d7191"),
    },
    {
        "name": "FIPS-197 C.3 (AES-256)",
        "key": bytes.fromhex(
            "000102030405060708090a0b0c0d0e0f101112131415161718191a1b1c1d1e1f"
        ),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("8ea2b7ca516745bfeafc49904b496089"),
    },
    {
        "name": "FIPS-197 B (AES-128)",
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    {
        "name": "All zeros (AES-128)",
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "name": "All ones (AES-128)",
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]
