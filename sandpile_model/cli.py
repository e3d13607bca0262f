"""Command that runs a sandpile from a grain file and saves images of it."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from sandpile_model.image import export
from sandpile_model.parser import Args, UsageError, parse_args, read_sandpile

OUTPUT_NAME = "sandpile-output.bmp"

_OPTIONS = (
    ("-i --input <.tsv file>", "\t\t\t", "input file"),
    ("-o --output <path>", "\t\t\t\t", "path to the output directory"),
    ("-m --max-iter <unsigned number>", "\t\t", "maximum counts of providing iterations"),
    ("-f --freq <number>", "\t\t\t\t", "frequency of saving got image states"),
)


def usage_text() -> str:
    """Return the help text listing the command's options."""
    lines = [
        "Usage: ./sandpile-model [parameters][paths... / size...]",
        "Parameters:",
    ]
    lines.extend(f"  {flags}{gap}{description}" for flags, gap, description in _OPTIONS)
    return "\n".join(lines) + "\n"


def print_usage() -> None:
    """Write the help text to standard output and flush it."""
    stream = sys.stdout
    stream.write(usage_text())
    stream.flush()


def print_args(args: Args) -> None:
    """Print the parsed options, for debugging."""
    print(
        "\x1b[33m[PrintArgs] >> "
        f"\t input_path: {args.input_path}\n"
        f"\t\t output_path: {args.output_path}\n"
        f"\t\t max iter: {args.max_iter}\n"
        f"\t\t freq: {args.freq}\n"
        "\x1b[0m",
        end="",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the model; return the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        args = parse_args(argv)
    except UsageError:
        print("\x1b[1;31mIncorrect usage!\x1b[0m", file=sys.stderr)
        print_usage()
        return 1

    try:
        sandpile = read_sandpile(args.input_path)
    except (OSError, ValueError):
        print(
            "\x1b[1;31mError while parsing .tsv input file.\x1b[0m Please retry.",
            file=sys.stderr,
        )
        return 1

    def snapshot(done: int, matrix: list[list[int]]) -> None:
        export(matrix, args.output_path, f"sandpile-{done}.bmp")

    sandpile.shake(args.max_iter, args.freq, snapshot)
    export(sandpile.matrix, args.output_path, OUTPUT_NAME)

    print(
        "\x1b[1;32mSuccessfully created sandpile model.\x1b[0;0m "
        f"Check > {args.output_path}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())