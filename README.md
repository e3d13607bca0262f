# sandpile-model

A simulator for the Abelian sandpile model. It reads a starting grid from a
whitespace-separated file, topples every cell holding four or more grains,
grows the grid whenever grains fall off an edge, and saves the resulting
state as a 4-bit palette BMP image.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

The input file is a sequence of integer triples separated by whitespace,
usually one per line:

```
x	y	grains
```

- The grid covers the bounding box of all given coordinates; cells that are
  not listed start empty.
- If a coordinate appears more than once, the last value wins.
- Reading stops at the first token that is not an integer.
- A negative grain count, a file with no triples, or a file that cannot be
  opened is an error.

## Command

```
sandpile-model -i input.tsv -o out/ -m 10000 -f 500
```

| Option | Meaning |
| --- | --- |
| `-i`, `--input <file>` | input file |
| `-o`, `--output <path>` | directory the images are written to |
| `-m`, `--max-iter <n>` | maximum number of topplings; `0` means run until stable |
| `-f`, `--freq <n>` | save an intermediate image every `n` topplings; `0` saves none |

All four options are expected, each followed by its value. Numeric values
must be non-negative integers (a leading integer is taken, e.g. `10x` reads
as `10`). Any unknown option, a missing value, or a missing input or output
path prints `Incorrect usage!` and the help text, and the command exits with
status 1. An input file that cannot be read exits with status 1 as well.

The final state is written to `sandpile-output.bmp` in the output directory.
Intermediate states are written to `sandpile-<n>.bmp`, where `<n>` is the
number of topplings done so far; no intermediate image is written on the
toppling just before the last one allowed by `--max-iter`.

If the output directory does not exist, the command asks whether to create
it. Answering with anything starting with `n` (or closing standard input)
skips writing that image.

## Colours

| Grains | Colour |
| --- | --- |
| 0 | white |
| 1 | green |
| 2 | purple |
| 3 | yellow |
| 4 or more | black |

Pixel rows are stored in the order of the grid's rows, two cells per byte,
each row padded to a multiple of four bytes.

## Using it as a library

```python
from sandpile_model.model import Sandpile
from sandpile_model.parser import read_sandpile
from sandpile_model.image import encode_bmp, export

pile = read_sandpile("input.tsv")          # or Sandpile([[0, 0], [0, 5]])
done = pile.shake(max_iter=0, freq=0)      # returns the number of topplings
print(done, pile.is_stable())

data = encode_bmp(pile.matrix)             # bytes of a BMP file
export(pile.matrix, "out", "final.bmp", confirm=lambda path: True)
```

- `Sandpile(matrix, unstables=None)` holds a list of rows of grain counts;
  when `unstables` is omitted it is counted from the matrix.
- `Sandpile.collapse(i, j)` topples one cell, growing the grid as needed, and
  returns `False` if the cell was stable. An index outside the grid raises
  `IndexError`.
- `Sandpile.shake(max_iter, freq, on_snapshot)` sweeps the grid row by row;
  every `freq` topplings it calls `on_snapshot(count, matrix)`.
- `parse_args(argv)` returns an `Args` with `input_path`, `output_path`,
  `max_iter` and `freq`, or raises `UsageError`.
- `color_index(piles)` gives the palette index for a grain count.
- `export(matrix, directory, filename, confirm)` returns the written path, or
  `None` if `confirm` declined to create a missing directory. An empty grid
  raises `ValueError`.
- `sandpile_model.cli` provides `usage_text()`, `print_usage()`,
  `print_args(args)` and `main(argv=None)`.