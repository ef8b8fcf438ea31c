"""Tests for the AES text cipher: padding, wire format, key policy, heuristic."""

import pytest
from Crypto.Cipher import AES

from symcipher.aes import AESCipher
from symcipher.errors import MalformedCiphertext
from symcipher.padding import pad, unpad
from symcipher.wire import Direction, split_tokens


KEYS = {
    128: "0123456789abcdef",
    192: "0123456789abcdef01234567",
    256: "0123456789abcdef0123456789abcdef",
}


@pytest.fixture
def cipher() -> AESCipher:
    return AESCipher()


class TestPadding:

    @pytest.mark.parametrize("length", range(0, 33))
    def test_pad_length(self, length):
        padded = pad(bytes(length))
        pad_len = 16 - (length % 16)

        assert len(padded) % 16 == 0
        assert len(padded) == length + pad_len
        assert padded[-pad_len:] == bytes([pad_len]) * pad_len
        assert unpad(padded) == bytes(length)

    def test_exact_multiple_gets_full_block(self):
        padded = pad(b"A" * 16)
        assert padded == b"A" * 16 + bytes([16]) * 16

    def test_unpad_invalid_pattern_passes_through(self):
        data = b"A" * 13 + b"\x01\x02\x03"
        assert unpad(data) == data

    def test_unpad_zero_pad_byte_passes_through(self):
        data = b"A" * 15 + b"\x00"
        assert unpad(data) == data

    def test_unpad_too_large_pad_byte_passes_through(self):
        data = b"A" * 15 + b"\x11"
        assert unpad(data) == data

    def test_unpad_partial_run_passes_through(self):
        data = b"A" * 13 + b"\x02\x03\x03"
        assert unpad(data) == data

    def test_unpad_empty(self):
        assert unpad(b"") == b""


class TestRoundTrip:

    @pytest.mark.parametrize("bits", sorted(KEYS))
    @pytest.mark.parametrize("length", range(0, 101))
    def test_encrypt_decrypt(self, cipher, bits, length):
        plaintext = "".join(chr(ord("a") + (i % 26)) for i in range(length))
        key = KEYS[bits]

        assert cipher.decrypt(cipher.encrypt(plaintext, key), key) == plaintext

    @pytest.mark.parametrize("plaintext", [
        "Hello World!",
        "Héllo Wörld! 🌟",
        "Test123!@#$%^&*()",
        "line one\nline two\r\n\ttabbed",
        "This is a longer message that will span multiple AES blocks for testing purposes.",
    ])
    def test_process_round_trip(self, cipher, plaintext):
        key = "testkey123456789"
        encrypted = cipher.process(plaintext, key)

        assert encrypted != plaintext
        assert cipher.process(encrypted, key) == plaintext

    def test_short_key_round_trip(self, cipher):
        encrypted = cipher.process("Hello World!", "short")
        assert cipher.process(encrypted, "short") == "Hello World!"

    def test_wrong_key_does_not_raise(self, cipher):
        encrypted = cipher.encrypt("secret message", KEYS[128])
        result = cipher.decrypt(encrypted, "another key 1234")
        assert result != "secret message"


class TestWireOutput:

    def test_output_is_decimal_bytes(self, cipher):
        encrypted = cipher.encrypt("Hello World!", KEYS[128])
        tokens = encrypted.split(" ")

        assert not encrypted.endswith(" ")
        assert len(tokens) == 16
        assert all(0 <= int(t) <= 255 for t in tokens)

    @pytest.mark.parametrize("bits", sorted(KEYS))
    def test_matches_library_ecb(self, cipher, bits):
        key = KEYS[bits]
        plaintext = "The quick brown fox jumps over the lazy dog"

        expected = AES.new(key.encode(), AES.MODE_ECB).encrypt(pad(plaintext.encode()))
        tokens = cipher.encrypt(plaintext, key).split(" ")

        assert bytes(int(t) for t in tokens) == expected

    def test_padding_boundary_adds_block(self, cipher):
        key = KEYS[128]
        encrypted = cipher.encrypt("A" * 16, key)
        data = bytes(int(t) for t in encrypted.split(" "))

        assert len(data) == 32
        assert cipher.decrypt_bytes(data, key.encode())[-16:] == bytes([16]) * 16

    def test_empty_plaintext_is_one_block(self, cipher):
        encrypted = cipher.encrypt("", KEYS[128])

        assert len(encrypted.split(" ")) == 16
        assert cipher.process(encrypted, KEYS[128]) == ""

    def test_utf8_byte_length_drives_block_count(self, cipher):
        # 8 characters, 16 UTF-8 bytes
        plaintext = "éééééééé"
        assert len(plaintext.encode("utf-8")) == 16

        encrypted = cipher.encrypt(plaintext, KEYS[128])

        assert len(encrypted.split(" ")) == 32


class TestKeyCoercion:

    def test_short_key_equals_zero_padded_key(self, cipher):
        assert cipher.encrypt("payload", "abcde") == cipher.encrypt("payload", "abcde" + "\x00" * 11)

    def test_keys_differing_after_coercion_point(self, cipher):
        """Only the first 16 bytes of a non-standard key are used."""
        a = cipher.encrypt("payload", "0123456789abcdefXYZ")
        b = cipher.encrypt("payload", "0123456789abcdefQRS")
        assert a == b

    def test_five_byte_key_and_trailing_zero_byte(self, cipher):
        assert cipher.encrypt("payload", "abcde") == cipher.encrypt("payload", "abcde\x00")

    def test_distinct_short_keys_differ(self, cipher):
        assert cipher.encrypt("payload", "abcde") != cipher.encrypt("payload", "abcdf")

    def test_standard_lengths_are_not_coerced(self, cipher):
        truncated = cipher.encrypt("payload", KEYS[256][:16])
        assert cipher.encrypt("payload", KEYS[256]) != truncated

    def test_empty_key_is_all_zero_key(self, cipher):
        assert cipher.encrypt("payload", "") == cipher.encrypt("payload", "\x00" * 16)


class TestMalformedCiphertext:

    def test_token_count_not_multiple_of_16(self, cipher):
        text = " ".join(["1"] * 17)
        with pytest.raises(MalformedCiphertext, match="multiple of 16"):
            cipher.decrypt(text, KEYS[128])

    def test_heuristic_path_raises_too(self, cipher):
        text = " ".join(["7"] * 20)
        with pytest.raises(MalformedCiphertext):
            cipher.process(text, KEYS[128])

    def test_out_of_range_value(self, cipher):
        text = " ".join(["256"] + ["1"] * 15)
        with pytest.raises(MalformedCiphertext, match="out of range"):
            cipher.decrypt(text, KEYS[128])

    def test_non_numeric_token(self, cipher):
        text = " ".join(["x"] + ["1"] * 15)
        with pytest.raises(MalformedCiphertext, match="not a decimal integer"):
            cipher.decrypt(text, KEYS[128])

    def test_is_a_value_error(self, cipher):
        with pytest.raises(ValueError):
            cipher.decrypt("1 2 3", KEYS[128])

    def test_decrypt_bytes_wrong_length(self, cipher):
        with pytest.raises(MalformedCiphertext):
            cipher.decrypt_bytes(bytes(17), KEYS[128].encode())


class TestDirectionHeuristic:

    def test_sixteen_numbers_are_treated_as_ciphertext(self, cipher):
        """Known false positive: numeric plaintext is decrypted, not encrypted."""
        plaintext = " ".join(str(i) for i in range(1, 17))

        assert cipher.looks_encrypted(plaintext)
        assert cipher.detect_direction(plaintext) is Direction.DECRYPT
        assert cipher.process(plaintext, KEYS[128]) == cipher.decrypt(plaintext, KEYS[128])

    def test_fifteen_numbers_are_plaintext(self, cipher):
        plaintext = " ".join(str(i) for i in range(1, 16))
        assert cipher.detect_direction(plaintext) is Direction.ENCRYPT

    def test_digits_without_space_are_plaintext(self, cipher):
        assert not cipher.looks_encrypted("1234567890123456")

    def test_explicit_encrypt_avoids_false_positive(self, cipher):
        plaintext = " ".join(str(i) for i in range(1, 17))
        encrypted = cipher.apply(plaintext, KEYS[128], Direction.ENCRYPT)

        assert len(split_tokens(encrypted)) == 48
        assert cipher.apply(encrypted, KEYS[128], Direction.DECRYPT) == plaintext

    def test_trailing_newline_is_plaintext(self, cipher):
        encrypted = cipher.encrypt("abc", KEYS[128])
        assert not cipher.looks_encrypted(encrypted + "\n")
