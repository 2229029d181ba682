import io
from pathlib import Path

import pytest

from textsum.tools.filesystem import existing_path, read_source


def test_read_source_literal_text() -> None:
    source = read_source("just some words")
    assert source.text == "just some words"
    assert source.kind == "literal"
    assert source.label == "<text>"


def test_read_source_from_file(tmp_path: Path) -> None:
    path = tmp_path / "sample.txt"
    path.write_text("a b c d d d da a a a a", encoding="utf-8")

    source = read_source(str(path))
    assert source.text == "a b c d d d da a a a a"
    assert source.kind == "text"
    assert source.label == "sample.txt"


def test_read_source_from_stdin() -> None:
    source = read_source("-", stdin=io.StringIO("piped text"))
    assert source.text == "piped text"
    assert source.kind == "stdin"


def test_read_source_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(IsADirectoryError):
        read_source(str(tmp_path))


def test_read_source_unsupported_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "bundle.zip"
    path.write_bytes(b"PK\x03\x04")
    with pytest.raises(ValueError):
        read_source(str(path))


def test_existing_path_treats_odd_strings_as_text() -> None:
    assert existing_path("") is None
    assert existing_path("   ") is None
    assert existing_path("x" * 5000) is None
    assert existing_path("bad\x00name") is None
    assert existing_path("surely/not/a/real/file.txt") is None
