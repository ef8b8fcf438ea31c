"""Command-line interface for symcipher."""

from __future__ import annotations

import sys
from typing import TextIO

import click

from . import __version__
from .errors import CipherError
from .facade import get_algorithm, list_algorithms, process_text
from .fileio import direction_for_path, output_path_for, read_text, write_text
from .golden import FIPS_197_TEST_VECTORS, validate_against_golden
from .interfaces import ALGORITHM_NAMES, DIRECTION_MODES, CipherConfig
from .rounds import encrypt_block, decrypt_block
from .trace import TraceRecorder, format_status, print_header
from .utils import bytes_to_hex
from .wire import Direction


@click.group()
@click.version_option(version=__version__, prog_name="symcipher")
def main() -> None:
    """Symmetric text cipher: AES (128/192/256) and repeating-key XOR.

    Ciphertext is written as space-separated decimal byte values.
    """
    pass


@main.command(name="list")
def list_cmd() -> None:
    """List available algorithms."""
    click.echo("Available algorithms:")
    click.echo("")
    for algo in list_algorithms():
        click.echo(f"  {algo['name']}")
        click.echo(f"    {algo['description']}")
        click.echo("")


@main.command()
@click.argument("file_path", type=click.Path(dir_okay=False))
@click.argument("key")
@click.option(
    "--algorithm", "-a",
    type=click.Choice(ALGORITHM_NAMES),
    default="aes",
    show_default=True,
    help="Cipher to use",
)
@click.option(
    "--auto-direction",
    is_flag=True,
    help="Pick the direction from the file content instead of the .enc suffix",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Print per-round state traces",
)
@click.option(
    "--trace",
    "trace_path",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write a JSON Lines trace to FILE",
)
def run(
    file_path: str,
    key: str,
    algorithm: str,
    auto_direction: bool,
    verbose: bool,
    trace_path: str | None,
) -> None:
    """Encrypt FILE_PATH, or decrypt it when it ends in .enc.

    With --auto-direction the file content decides instead of the suffix.
    """
    config = CipherConfig(
        algorithm=algorithm,
        direction="auto" if auto_direction else direction_for_path(file_path).value,
    )

    trace_file: TextIO | None = None
    try:
        content = read_text(file_path)

        if auto_direction:
            direction = get_algorithm(algorithm)().detect_direction(content)
        else:
            direction = direction_for_path(file_path)
        output_path = output_path_for(file_path, direction)

        if trace_path:
            trace_file = open(trace_path, "w")
        tracer = None
        if verbose or trace_file:
            tracer = TraceRecorder(verbose=verbose, trace_file=trace_file)

        if direction is Direction.DECRYPT:
            click.echo("Decrypting file...")
        else:
            click.echo("Encrypting file...")

        result = process_text(content, key, config, tracer=tracer)
        write_text(output_path, result)
    except (OSError, CipherError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        if trace_file:
            trace_file.close()

    click.echo(f"Operation completed successfully: {output_path}")


@main.command()
@click.argument("text")
@click.argument("key")
@click.option(
    "--algorithm", "-a",
    type=click.Choice(ALGORITHM_NAMES),
    default="aes",
    show_default=True,
    help="Cipher to use",
)
@click.option(
    "--direction", "-d",
    type=click.Choice(DIRECTION_MODES),
    default="auto",
    show_default=True,
    help="Transform direction (auto uses the content heuristic)",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Print per-round state traces",
)
def text(text: str, key: str, algorithm: str, direction: str, verbose: bool) -> None:
    """Transform TEXT with KEY and print the result."""
    config = CipherConfig(algorithm=algorithm, direction=direction)
    tracer = TraceRecorder(verbose=verbose) if verbose else None
    try:
        result = process_text(text, key, config, tracer=tracer)
    except CipherError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(result)


@main.command()
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Show every vector, not only failures",
)
def verify(verbose: bool) -> None:
    """Check the engine against FIPS-197 vectors and PyCryptodome."""
    print_header("AES known-answer tests")

    failures = 0
    for vec in FIPS_197_TEST_VECTORS:
        ciphertext = encrypt_block(vec["key"], vec["plaintext"])
        matches_vector = ciphertext == vec["ciphertext"]
        matches_golden, detail = validate_against_golden(
            vec["key"], vec["plaintext"], ciphertext
        )
        round_trip = decrypt_block(vec["key"], ciphertext) == vec["plaintext"]
        passed = matches_vector and matches_golden and round_trip

        if not passed:
            failures += 1
        if verbose or not passed:
            click.echo(f"{vec['name']}: {format_status(passed)}")
            click.echo(f"  Ciphertext: {bytes_to_hex(ciphertext)}")
            if detail:
                click.echo(f"  {detail}")
            if not round_trip:
                click.echo("  Decryption did not restore the plaintext")

    total = len(FIPS_197_TEST_VECTORS)
    click.echo(f"\n{total - failures}/{total} vectors passed")
    if failures:
        sys.exit(1)


if __name__ == "__main__":
    main()
