"""Load writing samples from various formats."""

from pathlib import Path

import ebooklib
from bs4 import BeautifulSoup
from ebooklib import epub

from kalam_style.errors import UnsupportedFormatError


PLAIN_TEXT_SUFFIXES = {".txt", ".md", ".markdown"}


def load_text(path: Path) -> str:
    """
    Load a writing sample from file and return plain text.

    Supports:
    - .txt and .md files (read directly)
    - .epub files (extract text from HTML)
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in PLAIN_TEXT_SUFFIXES:
        return load_txt(path)
    elif suffix == ".epub":
        return load_epub(path)
    else:
        raise UnsupportedFormatError(f"Unsupported file format: {suffix or path.name}")


def load_txt(path: Path) -> str:
    """Load a plain text file."""
    # Try common encodings
    for encoding in ["utf-8", "utf-8-sig", "cp1252"]:
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue

    # latin-1 decodes any byte sequence
    return path.read_text(encoding="latin-1")


def html_to_text(html: bytes | str) -> str:
    """Visible text of an HTML document, one non-blank line per line."""
    soup = BeautifulSoup(html, "html.parser")

    for element in soup(["script", "style"]):
        element.decompose()

    lines = [line.strip() for line in soup.get_text(separator="\n").splitlines()]
    return "\n".join(line for line in lines if line)


def load_epub(path: Path) -> str:
    """Load an EPUB file and extract text, one chapter per paragraph block."""
    book = epub.read_epub(str(path))
    texts: list[str] = []

    for item in book.get_items():
        if item.get_type() == ebooklib.ITEM_DOCUMENT:
            text = html_to_text(item.get_content())
            if text:
                texts.append(text)

    return "\n\n".join(texts)
