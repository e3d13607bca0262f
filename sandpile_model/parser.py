"""Command-line arguments and the tab-separated grain file."""

from __future__ import annotations

import os
import re
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from sandpile_model.model import CRITICAL, Sandpile

MIN_ARGUMENTS = 8

_OPTIONS = {
    "--input": "input_path",
    "-i": "input_path",
    "--output": "output_path",
    "-o": "output_path",
    "--max-iter": "max_iter",
    "-m": "max_iter",
    "--freq": "freq",
    "-f": "freq",
}
_NUMERIC = {"max_iter", "freq"}
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class UsageError(ValueError):
    """The command line does not describe a valid run."""


@dataclass
class Args:
    """Options of one run."""

    input_path: str = ""
    output_path: str = ""
    max_iter: int = 0
    freq: int = 0


def _to_count(value: str, option: str) -> int:
    match = _LEADING_INT.match(value)
    if match is None:
        raise UsageError(f"{option} expects a number, got {value!r}")
    number = int(match.group(1))
    if number < 0:
        raise UsageError(f"{option} expects a non-negative number, got {value!r}")
    return number


def parse_args(argv: Sequence[str]) -> Args:
    """Parse options (without the program name); raise UsageError if invalid."""
    argv = list(argv)
    if len(argv) < MIN_ARGUMENTS:
        raise UsageError(f"expected at least {MIN_ARGUMENTS} arguments")

    values: dict[str, object] = {}
    tokens = iter(argv)
    for arg in tokens:
        name = _OPTIONS.get(arg)
        if name is None:
            raise UsageError(f"unknown argument {arg!r}")
        try:
            value = next(tokens)
        except StopIteration:
            raise UsageError(f"missing value for {arg}") from None
        values[name] = _to_count(value, arg) if name in _NUMERIC else value

    args = Args(**values)
    if not args.input_path:
        raise UsageError("no input file given")
    if not args.output_path:
        raise UsageError("no output path given")
    return args


def _records(text: str) -> Iterator[tuple[int, int, int]]:
    """Yield (x, y, piles) triples until the first token that is not an integer."""
    numbers: list[int] = []
    for token in text.split():
        try:
            numbers.append(int(token))
        except ValueError:
            return
        if len(numbers) == 3:
            x, y, piles = numbers
            if piles < 0:
                raise ValueError(f"negative pile count {piles} at ({x}, {y})")
            yield x, y, piles
            numbers = []


def read_sandpile(path: str | os.PathLike[str]) -> Sandpile:
    """Build a sandpile from lines of ``x y piles`` covering their bounding box."""
    with open(path, encoding="utf-8") as handle:
        records = list(_records(handle.read()))
    if not records:
        raise ValueError(f"no grain records in {os.fspath(path)!r}")

    xs = [x for x, _, _ in records]
    ys = [y for _, y, _ in records]
    min_x, min_y = min(xs), min(ys)
    width = max(xs) - min_x + 1
    height = max(ys) - min_y + 1

    matrix = [[0] * width for _ in range(height)]
    for x, y, piles in records:
        matrix[y - min_y][x - min_x] = piles

    unstables = sum(1 for _, _, piles in records if piles >= CRITICAL)
    return Sandpile(matrix, unstables)