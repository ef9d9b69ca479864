"""Command dispatcher: reads menu selections from a script and writes a report."""

from __future__ import annotations

import argparse
import io
import sys
from typing import Iterable, Iterator, TextIO

from .control import AddBike, AddMember, Login, Logout, RentBike, RentBikeList
from .entity import RentalSystem

INPUT_FILE_NAME = "input.txt"
OUTPUT_FILE_NAME = "output.txt"
EXIT_MESSAGE = "6.1. 종료"


def _read_menu(tokens: Iterator[str]) -> tuple[int, int] | None:
    """Return the next pair of menu numbers, or ``None`` when the input is exhausted."""
    first = next(tokens, None)
    if first is None:
        return None
    second = next(tokens, None)
    if second is None:
        return None
    try:
        return int(first), int(second)
    except ValueError:
        raise ValueError(f"invalid menu selection: {first!r} {second!r}") from None


def do_task(tokens: Iterable[str], out: TextIO) -> RentalSystem:
    """Run menu commands from ``tokens`` until the exit command or end of input.

    Returns the rental system the commands acted on.
    """
    stream = iter(tokens)
    system = RentalSystem()
    system.users.initialize()

    handlers = {
        (1, 1): AddMember(system).start,
        (2, 1): Login(system).start,
        (2, 2): Logout(system).start,
        (3, 1): AddBike(system).start,
        (4, 1): RentBike(system).start,
        (5, 1): RentBikeList(system).start,
    }

    while (menu := _read_menu(stream)) is not None:
        if menu == (6, 1):
            print(EXIT_MESSAGE, file=out)
            break
        handler = handlers.get(menu)
        if handler is not None:
            handler(stream, out)
    return system


def run(text: str) -> str:
    """Run the commands in ``text`` and return the produced report."""
    out = io.StringIO()
    do_task(text.split(), out)
    return out.getvalue()


def main(argv: list[str] | None = None) -> int:
    """Read commands from the input file and write the report to the output file."""
    parser = argparse.ArgumentParser(description="Process bike rental commands.")
    parser.add_argument("input", nargs="?", default=INPUT_FILE_NAME, help="command file")
    parser.add_argument("output", nargs="?", default=OUTPUT_FILE_NAME, help="report file")
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as in_fp:
            text = in_fp.read()
    except OSError as exc:
        print(f"cannot read {args.input}: {exc}", file=sys.stderr)
        return 1

    with open(args.output, "w", encoding="utf-8") as out_fp:
        do_task(text.split(), out_fp)
    return 0


if __name__ == "__main__":
    sys.exit(main())