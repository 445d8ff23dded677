"""Plain-text extraction from uploaded resume files (PDF, DOCX, TXT)."""

import io
import logging
from pathlib import PurePath

import pdfplumber
from docx import Document

from services.text_utils import clean_text

logger = logging.getLogger(__name__)

# Fewer characters than this means a scanned or image-only document
MIN_DOCUMENT_CHARS = 50

SUPPORTED_EXTENSIONS = (".pdf", ".docx", ".doc", ".txt")


class UnsupportedFormatError(ValueError):
    """The file extension is not one we can extract text from."""


class DocumentParseError(ValueError):
    """The file could not be read, or held no usable text."""


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all paragraph text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_txt(txt_bytes: bytes) -> str:
    return txt_bytes.decode("utf-8", errors="replace").strip()


def parse_resume(filename: str, content: bytes) -> str:
    """Dispatch on file extension and return cleaned resume text.

    Raises UnsupportedFormatError for unknown extensions and
    DocumentParseError when extraction fails or yields too little text.
    """
    extension = PurePath(filename or "").suffix.lower()
    if extension not in SUPPORTED_EXTENSIONS:
        raise UnsupportedFormatError(f"Unsupported file format: {extension or filename}")

    if extension == ".txt":
        text = extract_text_txt(content)
        if not text:
            raise DocumentParseError("TXT file appears to be empty")
        return clean_text(text)

    try:
        if extension == ".pdf":
            text = extract_text(content)
        else:
            text = extract_text_docx(content)
    except Exception as e:
        logger.warning("Failed to parse %s: %s", filename, e)
        raise DocumentParseError(f"Failed to parse {extension[1:].upper()}: {e}") from e

    if len(text) < MIN_DOCUMENT_CHARS:
        if extension == ".pdf":
            raise DocumentParseError("PDF appears to be empty or contains only images")
        raise DocumentParseError("DOCX appears to be empty")

    logger.info("%s parsed: %d characters", extension[1:].upper(), len(text))
    return clean_text(text)
