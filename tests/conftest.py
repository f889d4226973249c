"""Shared fixtures for the searchlight test suite."""
import fitz
import pytest
from PyQt5.QtCore import QCoreApplication

from searchlight.core.page.models import Document
from searchlight.core.search.controller import SearchController


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def controller():
    ctrl = SearchController()
    yield ctrl
    if not ctrl.is_destroyed:
        ctrl.destroy()


@pytest.fixture
def make_document():
    def _make(*pages):
        return Document.from_texts(pages)
    return _make


@pytest.fixture
def pdf_bytes() -> bytes:
    doc = fitz.open()
    page = doc.new_page()
    page.insert_text((72, 72), "The quick brown fox", fontsize=12)
    page.insert_text((72, 120), "jumps over the lazy dog", fontsize=12)
    second = doc.new_page()
    second.insert_text((72, 72), "A brown bear", fontsize=12)
    data = doc.tobytes()
    doc.close()
    return data
