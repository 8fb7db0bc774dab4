"""
Text extraction for uploaded and downloaded documents.

PDF structure is left entirely to pypdf; this layer only adapts the raw
bytes and fills in missing values, so callers always get a string back.
"""
import io
import logging
import zipfile
from dataclasses import dataclass
from pathlib import Path

from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError
from pypdf import PdfReader
from pypdf.errors import PyPdfError

from app.utils.html_to_text import html_to_text

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".txt", ".html", ".htm", ".docx")


class UnsupportedDocumentType(ValueError):
    """Raised when no extractor exists for a file type."""


@dataclass
class PdfText:
    text: str
    pages: int


def parse_pdf_document(file_content: bytes) -> PdfText:
    """Extract text and page count from a PDF payload.

    Unreadable payloads yield empty text and zero pages.
    """
    try:
        reader = PdfReader(io.BytesIO(file_content))
        page_texts = [page.extract_text() or "" for page in reader.pages]
        pages = len(reader.pages)
    except (PyPdfError, ValueError, KeyError, TypeError) as e:
        logger.warning("Could not read PDF payload: %s", e)
        return PdfText(text="", pages=0)

    text = "\n".join(t for t in page_texts if t)
    return PdfText(text=text or "", pages=pages or 0)


def parse_pdf(file_content: bytes) -> str:
    """Extract the plain text of a PDF."""
    return parse_pdf_document(file_content).text


def parse_docx(file_content: bytes) -> str:
    try:
        document = DocxDocument(io.BytesIO(file_content))
    except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as e:
        logger.warning("Could not read DOCX payload: %s", e)
        return ""
    return "\n".join(p.text for p in document.paragraphs if p.text.strip())


def parse_text_document(file_content: bytes, file_extension: str) -> str:
    """
    Extract plain text from a document based on its extension.

    Args:
        file_content: Raw bytes of the file
        file_extension: Extension including the dot, e.g. ".pdf"

    Returns:
        Extracted text (possibly empty)

    Raises:
        UnsupportedDocumentType: if the extension has no extractor
    """
    ext = file_extension.lower()
    if not ext.startswith("."):
        ext = "." + ext

    if ext == ".pdf":
        return parse_pdf(file_content)
    if ext == ".txt":
        return file_content.decode("utf-8", errors="replace")
    if ext in (".html", ".htm"):
        return html_to_text(file_content.decode("utf-8", errors="replace"))
    if ext == ".docx":
        return parse_docx(file_content)

    raise UnsupportedDocumentType(
        f"File type not supported. Allowed types: {', '.join(SUPPORTED_EXTENSIONS)}"
    )


def extension_for(filename: str, mime: str = "") -> str:
    """Pick the extractor extension from a MIME type, falling back to the filename."""
    mime = (mime or "").lower()
    if "pdf" in mime:
        return ".pdf"
    if "html" in mime:
        return ".html"
    if "wordprocessingml" in mime or "msword" in mime:
        return ".docx"
    if mime.startswith("text/plain"):
        return ".txt"
    return Path(filename or "").suffix.lower()
