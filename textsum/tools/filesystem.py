from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .docs import extract_text_from_bytes


STDIN_SOURCE = "-"


@dataclass
class SourceText:
    text: str
    label: str
    kind: str


def read_source(source: str, stdin: TextIO | None = None) -> SourceText:
    """
    Resolve a command line argument into text.

    "-" reads standard input, an existing path is read as a document and
    anything else is taken as the literal text to summarise.
    """
    if source == STDIN_SOURCE:
        stream = stdin if stdin is not None else sys.stdin
        return SourceText(text=stream.read(), label="<stdin>", kind="stdin")

    path = existing_path(source)
    if path is None:
        return SourceText(text=source, label="<text>", kind="literal")
    if path.is_dir():
        raise IsADirectoryError(str(path))

    text, kind = extract_text_from_bytes(path.name, path.read_bytes())
    return SourceText(text=text, label=path.name, kind=kind)


def existing_path(source: str) -> Path | None:
    if not source.strip():
        return None
    try:
        candidate = Path(source).expanduser()
        if not candidate.exists():
            return None
    except (OSError, ValueError):
        # names too long for the filesystem, or with NUL bytes, are text
        return None
    return candidate.resolve()
