from __future__ import annotations

import codecs
import io
import zipfile
from pathlib import Path

from pypdf import PdfReader

try:
    import docx  # type: ignore
except Exception:  # pragma: no cover
    docx = None


TEXT_EXTENSIONS = {
    "",
    ".txt",
    ".text",
    ".md",
    ".markdown",
    ".rst",
    ".log",
    ".csv",
    ".tsv",
    ".json",
    ".yaml",
    ".yml",
    ".toml",
    ".ini",
    ".html",
    ".htm",
    ".xml",
    ".py",
    ".rs",
}


def extract_text_from_bytes(filename: str, data: bytes) -> tuple[str, str]:
    ext = Path(filename).suffix.lower()

    if ext in TEXT_EXTENSIONS:
        return _decode_text(data), "text"

    if ext == ".pdf":
        return _extract_pdf(data), "pdf"

    if ext == ".docx":
        if docx is None:
            raise ValueError("python-docx is required for .docx support")
        return _extract_docx(data), "docx"

    raise ValueError(f"Unsupported file extension: {ext}")


def _decode_text(data: bytes) -> str:
    # utf-16 only with a BOM, otherwise even-length latin-1 input decodes as garbage
    encodings = ("utf-16",) if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)) else ()
    for enc in (*encodings, "utf-8-sig"):
        try:
            return data.decode(enc)
        except UnicodeDecodeError:
            continue
    # latin-1 maps every byte
    return data.decode("latin-1")


def _extract_pdf(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    pages: list[str] = []
    for page in reader.pages:
        pages.append(page.extract_text() or "")
    return "\n\n".join(pages)


def _extract_docx(data: bytes) -> str:
    assert docx is not None
    from docx.opc.exceptions import PackageNotFoundError

    try:
        document = docx.Document(io.BytesIO(data))
    except (zipfile.BadZipFile, KeyError, PackageNotFoundError) as exc:
        raise ValueError(f"Could not read .docx: {exc}") from exc
    return "\n".join(p.text for p in document.paragraphs)
