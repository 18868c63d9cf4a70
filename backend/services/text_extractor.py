"""Resume text extraction for uploaded .txt and .pdf files."""

import io
import logging
from pathlib import PurePath

import pdfplumber

logger = logging.getLogger(__name__)

SUPPORTED_TYPES: dict[str, str] = {
    ".txt": "text/plain",
    ".pdf": "application/pdf",
}


class TextExtractionError(Exception):
    """The file could not be turned into text."""


class UnsupportedFileType(TextExtractionError):
    pass


def extract_text_plain(content: bytes) -> str:
    """Decode a UTF-8 text file. Invalid bytes are replaced, a BOM is dropped."""
    return content.decode("utf-8-sig", errors="replace")


def extract_text_pdf(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file, one page per line block."""
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.warning("PDF reading error: %s", e)
        raise TextExtractionError("Could not parse PDF file") from e
    return "\n".join(pages).strip()


def extract_text(content: bytes, filename: str) -> str:
    """Dispatch on the file extension."""
    suffix = PurePath(filename or "").suffix.lower()
    if suffix not in SUPPORTED_TYPES:
        raise UnsupportedFileType(f"Unsupported file type: {suffix or filename!r}")
    if suffix == ".pdf":
        return extract_text_pdf(content)
    return extract_text_plain(content)
