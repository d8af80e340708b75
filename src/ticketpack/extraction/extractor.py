"""Upload-to-text conversion for PRD files."""

from __future__ import annotations

import io
import logging
import re
import zipfile
from pathlib import PurePath

import docx
from docx.opc.exceptions import PackageNotFoundError
from PyPDF2 import PdfReader
from PyPDF2.errors import PyPdfError

from ticketpack.contracts.config import TicketPackConfig
from ticketpack.contracts.exceptions import ExtractionError, FileTooLargeError, UnsupportedFileTypeError

_LOG = logging.getLogger(__name__)

TEXT_EXTENSIONS = frozenset({"txt", "md", "markdown", "csv", "json"})
TRUNCATION_MARKER = "\n\n[TRUNCATED]"

_WHITESPACE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Drop NUL characters and collapse every whitespace run to one space."""
    return _WHITESPACE.sub(" ", text.replace("\x00", "")).strip()


def truncate(text: str, max_chars: int) -> str:
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER


def file_extension(filename: str) -> str:
    return PurePath(filename).suffix.lstrip(".").lower()


class TextExtractor:
    """Convert an uploaded PRD (plain text, PDF or DOCX) into raw text."""

    def __init__(self, config: TicketPackConfig | None = None) -> None:
        self._config = config or TicketPackConfig()

    def extract(self, data: bytes, filename: str, content_type: str | None = None) -> str:
        """Extract normalized, length-capped text from *data*.

        Args:
            data: Raw file bytes.
            filename: Original file name; its extension selects the extractor.
            content_type: Optional MIME type; any ``text/*`` type is read as text.

        Returns:
            Whitespace-normalized text, truncated with a marker if too long.

        Raises:
            FileTooLargeError: *data* exceeds the configured byte limit.
            UnsupportedFileTypeError: No extractor handles the extension.
            ExtractionError: The file could not be parsed or held no text.
        """
        self.check_size(len(data))

        extension = file_extension(filename)
        if (content_type or "").startswith("text/") or extension in TEXT_EXTENSIONS:
            raw = data.decode("utf-8", errors="replace")
        elif extension == "pdf":
            raw = self._extract_pdf(data)
        elif extension == "docx":
            raw = self._extract_docx(data)
        else:
            raise UnsupportedFileTypeError("Unsupported file type. Use .txt, .md, .pdf, or .docx.")

        text = truncate(normalize_whitespace(raw), self._config.max_extracted_chars)
        if not text:
            raise ExtractionError(f"No text could be extracted from {filename}")
        _LOG.debug("Extracted %d chars from %s", len(text), filename)
        return text

    def check_size(self, size: int) -> None:
        """Raise :class:`FileTooLargeError` when *size* bytes exceeds the upload limit."""
        if size > self._config.max_file_bytes:
            limit_mb = self._config.max_file_bytes / (1024 * 1024)
            raise FileTooLargeError(f"File too large (max {limit_mb:g}MB). Paste the PRD text instead.")

    def _extract_pdf(self, data: bytes) -> str:
        try:
            reader = PdfReader(io.BytesIO(data))
            page_count = min(len(reader.pages), self._config.max_pdf_pages)
            chunks: list[str] = []
            total = 0
            for index in range(page_count):
                page_text = reader.pages[index].extract_text() or ""
                chunks.append(page_text)
                total += len(page_text)
                if total > self._config.max_extracted_chars:
                    break
        except (PyPdfError, ValueError, KeyError) as exc:
            raise ExtractionError(f"Failed to read PDF: {exc}") from exc
        _LOG.debug("Read %d PDF page(s)", len(chunks))
        return "\n\n".join(chunks)

    @staticmethod
    def _extract_docx(data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as exc:
            raise ExtractionError(f"Failed to read DOCX: {exc}") from exc
        return "\n".join(paragraph.text for paragraph in document.paragraphs)
