"""Rendering a sandpile grid as a 4-bit palette BMP image."""

from __future__ import annotations

import os
from collections.abc import Callable, Sequence
from itertools import zip_longest
from pathlib import Path
from typing import NamedTuple
import struct

FILE_HEADER_SIZE = 14
INFO_HEADER_SIZE = 40
PALETTE_SIZE = 64
BITS_PER_PIXEL = 4
MAX_COLOR_INDEX = 4


class _Color(NamedTuple):
    r: int
    g: int
    b: int


_PALETTE = (
    _Color(250, 250, 250),  # white: empty cell
    _Color(0, 102, 0),  # green: one grain
    _Color(204, 0, 204),  # purple: two grains
    _Color(253, 220, 7),  # yellow: three grains
    _Color(32, 32, 32),  # black: unstable
)


def color_index(piles: int) -> int:
    """Map a pile size to its palette index; every unstable pile is black."""
    return MAX_COLOR_INDEX if piles > 3 else piles


def _palette_bytes() -> bytes:
    entries = b"".join(bytes((c.b, c.g, c.r, 0)) for c in _PALETTE)
    return entries.ljust(PALETTE_SIZE, b"\0")


def _pixel_rows(matrix: Sequence[Sequence[int]], width: int) -> bytes:
    row_bytes = (width + 1) // 2
    padding = b"\0" * ((4 - row_bytes % 4) % 4)
    out = bytearray()
    for row in matrix:
        indices = [color_index(piles) for piles in row[:width]]
        for high, low in zip_longest(indices[::2], indices[1::2], fillvalue=0):
            out.append((high << 4) | low)
        out += padding
    return bytes(out)


def encode_bmp(matrix: Sequence[Sequence[int]]) -> bytes:
    """Return the BMP file for a grid, rows written in the grid's order."""
    if not matrix or not matrix[0]:
        raise ValueError("cannot encode an empty grid")
    height = len(matrix)
    width = len(matrix[0])
    offset = FILE_HEADER_SIZE + INFO_HEADER_SIZE + PALETTE_SIZE
    file_size = offset + (width * height + 1) // 2

    file_header = b"BM" + struct.pack("<IHHI", file_size & 0xFFFFFFFF, 0, 0, offset)
    info_header = struct.pack(
        "<IIIHHIIIIII",
        INFO_HEADER_SIZE,
        width & 0xFFFFFFFF,
        height & 0xFFFFFFFF,
        1,
        BITS_PER_PIXEL,
        0,
        0,
        0,
        0,
        len(_PALETTE),
        0,
    )
    return file_header + info_header + _palette_bytes() + _pixel_rows(matrix, width)


def _ask_to_create(directory: str) -> bool:
    print("\x1b[1;33mIndicate output path don't exist. Do you want to create it?\x1b[0;0m")
    print(f"Path: {directory}")
    try:
        answer = input("(y / n) ").strip()
    except EOFError:
        return False
    return not answer.startswith("n")


def export(
    matrix: Sequence[Sequence[int]],
    directory: str | os.PathLike[str],
    filename: str,
    confirm: Callable[[str], bool] | None = None,
) -> Path | None:
    """Write the grid as ``directory/filename``.

    A missing directory is created only if ``confirm`` (by default a prompt on
    the terminal) agrees; otherwise nothing is written and None is returned.
    """
    data = encode_bmp(matrix)
    target_dir = Path(directory)
    if not target_dir.exists():
        ask = confirm if confirm is not None else _ask_to_create
        if not ask(os.fspath(directory)):
            return None
        target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / filename
    path.write_bytes(data)
    return path