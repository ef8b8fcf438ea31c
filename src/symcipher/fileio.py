"""
File helpers for the command-line front end.

Files are read and written as ISO-8859-1 so every byte maps to exactly one
character and back. Direction and output naming follow the ``.enc`` suffix
convention:

  notes.txt      -> encrypt -> notes.txt.enc
  notes.txt.enc  -> decrypt -> decrypted_notes.txt
"""

from __future__ import annotations

from pathlib import Path

from .wire import Direction

FILE_ENCODING = "iso-8859-1"
ENCRYPTED_SUFFIX = ".enc"
DECRYPTED_PREFIX = "decrypted_"


def read_text(path: str | Path) -> str:
    """Read a file as byte-preserving text.

    Raises:
        OSError: If the file cannot be read
    """
    return Path(path).read_bytes().decode(FILE_ENCODING)


def write_text(path: str | Path, data: str) -> None:
    """Write text back as bytes; characters above U+00FF become '?'.

    Raises:
        OSError: If the file cannot be written
    """
    Path(path).write_bytes(data.encode(FILE_ENCODING, errors="replace"))


def direction_for_path(path: str | Path) -> Direction:
    """Files ending in .enc are decrypted, everything else is encrypted."""
    if str(path).endswith(ENCRYPTED_SUFFIX):
        return Direction.DECRYPT
    return Direction.ENCRYPT


def output_path_for(path: str | Path, direction: Direction) -> Path:
    """
    Derive the output file name.

    Args:
        path: Input file path
        direction: Direction the file is processed in

    Returns:
        ``<path>.enc`` when encrypting; ``decrypted_<name>`` (with a trailing
        .enc removed) in the same directory when decrypting
    """
    path = Path(path)
    if direction is Direction.ENCRYPT:
        return path.with_name(path.name + ENCRYPTED_SUFFIX)

    name = path.name
    if name.endswith(ENCRYPTED_SUFFIX):
        name = name[:-len(ENCRYPTED_SUFFIX)]
    return path.with_name(DECRYPTED_PREFIX + name)
