"""
Build searchable documents of text runs from PDF files.
"""
import logging
from typing import List, Optional, Union

import fitz  # PyMuPDF

from searchlight.core.page.models import Document, Page, Run
from searchlight.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


class PDFDocumentReader:
    """
    Loads a PDF and lays its text out as runs, one run per text span.

    Every call to build_document() produces a fresh Document, the way a
    viewer regenerates its text layer after a zoom change.
    """

    def __init__(self):
        self.doc: Optional[fitz.Document] = None
        self.total_pages: int = 0
        self.current_file_path: Optional[str] = None

    def load_pdf(self, source: Union[str, bytes]) -> int:
        """
        Load a PDF document.

        Args:
            source: Path to the PDF file, or its raw bytes

        Returns:
            Number of pages

        Raises:
            DocumentLoadError: If the file cannot be opened as a PDF
        """
        if self.doc is not None:
            self.close_document()

        try:
            if isinstance(source, (bytes, bytearray)):
                self.doc = fitz.open(stream=bytes(source), filetype="pdf")
            else:
                self.doc = fitz.open(source)
                self.current_file_path = str(source)
        except Exception as e:
            raise DocumentLoadError(f"Error loading PDF: {e}", original_error=e) from e

        self.total_pages = self.doc.page_count
        logger.debug("Loaded PDF with %d page(s)", self.total_pages)
        return self.total_pages

    def close_document(self) -> None:
        """Close the current PDF document and clear all state."""
        if self.doc is not None:
            self.doc.close()
            self.doc = None

        self.total_pages = 0
        self.current_file_path = None

    def build_document(self, zoom: float = 1.0) -> Document:
        """
        Extract every page's text runs.

        Args:
            zoom: Scale applied to run bounding boxes

        Returns:
            Document with one Page per PDF page
        """
        if self.doc is None:
            raise DocumentLoadError("No PDF document loaded")

        pages = [self._build_page(page_idx, zoom) for page_idx in range(self.total_pages)]
        return Document(pages=pages)

    def _build_page(self, page_index: int, zoom: float) -> Page:
        page = self.doc.load_page(page_index)
        text_dict = page.get_text("dict", sort=True)
        runs: List[Run] = []

        for block_idx, block_data in enumerate(text_dict.get("blocks", [])):
            # Skip image blocks
            if block_data.get("type") != 0:
                continue

            for line_idx, line_data in enumerate(block_data.get("lines", [])):
                spans = line_data.get("spans", [])

                for span_idx, span_data in enumerate(spans):
                    text = span_data.get("text", "")
                    is_last = span_idx == len(spans) - 1

                    if not text and not is_last:
                        continue

                    x0, y0, x1, y1 = span_data.get("bbox", (0, 0, 0, 0))
                    runs.append(Run(
                        identity=(page_index, block_idx, line_idx, span_idx),
                        text=text,
                        has_eol=is_last,
                        bbox=(x0 * zoom, y0 * zoom, x1 * zoom, y1 * zoom),
                    ))

        return Page(index=page_index, runs=runs, handle=page_index)

    @property
    def page_count(self) -> int:
        return self.total_pages
