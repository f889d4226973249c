"""
PDF loading into searchable documents.
"""
from .pdf_reader import PDFDocumentReader

__all__ = ["PDFDocumentReader"]
