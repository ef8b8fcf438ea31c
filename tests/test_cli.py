"""Tests for the command-line interface and file helpers."""

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from symcipher.cli import main
from symcipher.facade import decrypt, encrypt
from symcipher.fileio import (
    direction_for_path,
    output_path_for,
    read_text,
    write_text,
)
from symcipher.wire import Direction


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestFileHelpers:

    def test_direction_for_path(self):
        assert direction_for_path("notes.txt") is Direction.ENCRYPT
        assert direction_for_path("notes.txt.enc") is Direction.DECRYPT
        assert direction_for_path(Path("dir/archive.enc")) is Direction.DECRYPT

    def test_output_path_encrypt(self, tmp_path):
        src = tmp_path / "notes.txt"
        assert output_path_for(src, Direction.ENCRYPT) == tmp_path / "notes.txt.enc"

    def test_output_path_decrypt(self, tmp_path):
        src = tmp_path / "notes.txt.enc"
        assert output_path_for(src, Direction.DECRYPT) == tmp_path / "decrypted_notes.txt"

    def test_output_path_decrypt_without_suffix(self, tmp_path):
        src = tmp_path / "blob"
        assert output_path_for(src, Direction.DECRYPT) == tmp_path / "decrypted_blob"

    def test_byte_preserving_round_trip(self, tmp_path):
        path = tmp_path / "raw.bin"
        data = bytes(range(256))
        path.write_bytes(data)

        text = read_text(path)
        assert len(text) == 256

        write_text(path, text)
        assert path.read_bytes() == data

    def test_write_replaces_wide_characters(self, tmp_path):
        path = tmp_path / "out.txt"
        write_text(path, "a€b")
        assert path.read_bytes() == b"a?b"

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_text(tmp_path / "missing.txt")


class TestRunCommand:

    def test_encrypt_then_decrypt(self, runner, tmp_path):
        src = tmp_path / "message.txt"
        src.write_bytes("Héllo Wörld!\nsecond line\n".encode("utf-8"))

        result = runner.invoke(main, ["run", str(src), "mykey"])
        assert result.exit_code == 0, result.output
        assert "Encrypting file..." in result.output

        enc = tmp_path / "message.txt.enc"
        assert enc.exists()
        tokens = enc.read_text().split(" ")
        assert len(tokens) % 16 == 0

        result = runner.invoke(main, ["run", str(enc), "mykey"])
        assert result.exit_code == 0, result.output
        assert "Decrypting file..." in result.output
        assert "Operation completed successfully" in result.output

        dec = tmp_path / "decrypted_message.txt"
        assert dec.read_bytes() == src.read_bytes()

    def test_binary_file_round_trip(self, runner, tmp_path):
        src = tmp_path / "data.bin"
        src.write_bytes(bytes(range(256)) * 3)

        assert runner.invoke(main, ["run", str(src), "k" * 32]).exit_code == 0
        assert runner.invoke(main, ["run", str(src) + ".enc", "k" * 32]).exit_code == 0

        assert (tmp_path / "decrypted_data.bin").read_bytes() == src.read_bytes()

    def test_xor_algorithm(self, runner, tmp_path):
        src = tmp_path / "plain.txt"
        src.write_text("xor me please")

        result = runner.invoke(main, ["run", str(src), "key", "--algorithm", "xor"])
        assert result.exit_code == 0, result.output

        enc = tmp_path / "plain.txt.enc"
        assert enc.read_text().endswith(" ")

        result = runner.invoke(main, ["run", str(enc), "key", "-a", "xor"])
        assert result.exit_code == 0, result.output
        assert (tmp_path / "decrypted_plain.txt").read_text() == "xor me please"

    def test_suffix_direction_overrides_content(self, runner, tmp_path):
        """A numeric plaintext file is still encrypted when it has no .enc suffix."""
        src = tmp_path / "numbers.txt"
        numbers = " ".join(str(i) for i in range(1, 17))
        src.write_text(numbers)

        assert runner.invoke(main, ["run", str(src), "key"]).exit_code == 0

        encrypted = (tmp_path / "numbers.txt.enc").read_text()
        assert decrypt(encrypted, "key") == numbers

    def test_auto_direction(self, runner, tmp_path):
        src = tmp_path / "numbers.txt"
        src.write_text(" ".join(["7"] * 17))

        result = runner.invoke(main, ["run", str(src), "key", "--auto-direction"])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_auto_direction_names_output_from_content(self, runner, tmp_path):
        src = tmp_path / "cipher.txt"
        src.write_text(encrypt("auto detected", "key"))

        result = runner.invoke(main, ["run", str(src), "key", "--auto-direction"])

        assert result.exit_code == 0, result.output
        assert "Decrypting file..." in result.output
        assert "Encrypting file..." not in result.output
        out = tmp_path / "decrypted_cipher.txt"
        assert out.read_text() == "auto detected"
        assert not (tmp_path / "cipher.txt.enc").exists()

    def test_auto_direction_encrypts_plain_enc_file(self, runner, tmp_path):
        src = tmp_path / "notes.enc"
        src.write_text("plain words")

        result = runner.invoke(main, ["run", str(src), "key", "--auto-direction"])

        assert result.exit_code == 0, result.output
        assert "Encrypting file..." in result.output
        assert decrypt((tmp_path / "notes.enc.enc").read_text(), "key") == "plain words"

    def test_malformed_ciphertext_file(self, runner, tmp_path):
        enc = tmp_path / "broken.enc"
        enc.write_text("1 2 3")

        result = runner.invoke(main, ["run", str(enc), "key"])

        assert result.exit_code == 1
        assert "multiple of 16" in result.output
        assert not (tmp_path / "decrypted_broken").exists()

    def test_missing_input_file(self, runner, tmp_path):
        result = runner.invoke(main, ["run", str(tmp_path / "nope.txt"), "key"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_missing_input_leaves_no_trace_file(self, runner, tmp_path):
        trace = tmp_path / "trace.jsonl"

        result = runner.invoke(
            main, ["run", str(tmp_path / "nope.txt"), "key", "--trace", str(trace)]
        )

        assert result.exit_code == 1
        assert not trace.exists()

    def test_trace_file(self, runner, tmp_path):
        src = tmp_path / "t.txt"
        src.write_text("trace")
        trace = tmp_path / "trace.jsonl"

        result = runner.invoke(main, ["run", str(src), "key", "--trace", str(trace)])
        assert result.exit_code == 0, result.output

        records = [json.loads(line) for line in trace.read_text().splitlines()]
        assert records[0]["operation"] == "direction"
        assert records[0]["heuristic"] is False
        assert len(records) == 1 + 11


class TestTextCommand:

    def test_aes_round_trip(self, runner):
        result = runner.invoke(main, ["text", "hello there", "key"])
        assert result.exit_code == 0
        ciphertext = result.output.strip()

        result = runner.invoke(main, ["text", ciphertext, "key"])
        assert result.exit_code == 0
        assert result.output == "hello there\n"

    def test_explicit_encrypt(self, runner):
        numbers = " ".join(str(i) for i in range(1, 17))
        result = runner.invoke(main, ["text", numbers, "key", "-d", "encrypt"])

        assert result.exit_code == 0
        assert decrypt(result.output.strip(), "key") == numbers

    def test_malformed(self, runner):
        result = runner.invoke(main, ["text", "1 2 3", "key", "-d", "decrypt"])
        assert result.exit_code == 1

    def test_empty_xor_key(self, runner):
        result = runner.invoke(main, ["text", "abc", "", "-a", "xor"])
        assert result.exit_code == 1
        assert "must not be empty" in result.output


class TestOtherCommands:

    def test_verify(self, runner):
        result = runner.invoke(main, ["verify", "--verbose"])
        assert result.exit_code == 0, result.output
        assert "6/6 vectors passed" in result.output
        assert "FIPS-197 C.3 (AES-256): [OK] PASS" in result.output

    def test_list(self, runner):
        result = runner.invoke(main, ["list"])
        assert result.exit_code == 0
        assert "aes" in result.output
        assert "xor" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "symcipher" in result.output
