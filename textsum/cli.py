from __future__ import annotations

import argparse
import math
import os
import sys
from typing import Sequence, TextIO

from pypdf.errors import PdfReadError

from .counter import count_characters
from .display import DEFAULT_TITLE, DEFAULT_WIDTH, LAYOUTS, ReportConfig, render
from .ranking import rank
from .tools.filesystem import read_source


DEFAULT_TOP = 9


def parse_proportion(raw: str) -> tuple[float, float]:
    parts = raw.replace("/", ":").split(":")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"proportion must look like 7:3, got {raw!r}")
    try:
        left, right = float(parts[0]), float(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"proportion parts must be numbers, got {raw!r}") from None
    if not (math.isfinite(left) and math.isfinite(right)):
        raise argparse.ArgumentTypeError(f"proportion parts must be finite, got {raw!r}")
    if left <= 0 or right <= 0:
        raise argparse.ArgumentTypeError(f"proportion parts must be > 0, got {raw!r}")
    return left, right


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textsum",
        description="Summarise a block of text: most common words and character counts",
    )
    parser.add_argument(
        "source",
        nargs="+",
        help=(
            "A file path, '-' for stdin, or the text itself. Several arguments are joined as text. "
            "Put '--' before text that starts with '-'."
        ),
    )
    parser.add_argument("-n", "--top", type=int, default=os.getenv("TEXTSUM_TOP", str(DEFAULT_TOP)))
    parser.add_argument("-w", "--width", type=int, default=os.getenv("TEXTSUM_WIDTH", str(DEFAULT_WIDTH)))
    parser.add_argument(
        "--proportion",
        type=parse_proportion,
        default=os.getenv("TEXTSUM_PROPORTION", "7:3"),
        help="Width ratio of the words column to the counts column.",
    )
    parser.add_argument(
        "--layout",
        choices=sorted(LAYOUTS),
        default=os.getenv("TEXTSUM_LAYOUT", "columns"),
    )
    parser.add_argument("--suffix", default=os.getenv("TEXTSUM_SUFFIX", "..."), help="Marks truncated text.")
    parser.add_argument("--title", default=None, help="Report title (defaults to the source name).")
    return parser


def run(
    argv: Sequence[str] | None = None,
    stdout: TextIO | None = None,
    stdin: TextIO | None = None,
) -> int:
    out = stdout if stdout is not None else sys.stdout
    args = build_parser().parse_args(argv)

    try:
        if len(args.source) == 1:
            source = read_source(args.source[0], stdin=stdin)
            text, label = source.text, source.label
        else:
            text, label = " ".join(args.source), "<text>"

        counts = count_characters(text)
        ranked = rank(counts.words, args.top)
        config = ReportConfig(
            width=args.width,
            proportion=args.proportion,
            suffix=args.suffix,
            columns=LAYOUTS[args.layout],
            title=args.title if args.title is not None else f"{DEFAULT_TITLE}: {label}",
        )
        lines = render(ranked, counts, config)
    except (OSError, ValueError, PdfReadError) as exc:
        print(f"textsum: error: {exc}", file=sys.stderr)
        return 2

    for line in lines:
        print(line, file=out)
    return 0


def main() -> None:
    code = run()
    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
