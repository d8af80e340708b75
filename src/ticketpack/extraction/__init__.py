"""PRD text extraction from uploaded files."""

from ticketpack.extraction.extractor import TextExtractor

__all__ = ["TextExtractor"]
