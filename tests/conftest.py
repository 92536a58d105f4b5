import fitz
import pytest


@pytest.fixture
def make_pdf():
    """Build a PDF in memory: one list of (text, x, baseline_y) per page."""
    def _make(pages, width=595, height=842):
        doc = fitz.open()
        for runs in pages:
            page = doc.new_page(width=width, height=height)
            for text, x, y in runs:
                page.insert_text((x, y), text, fontsize=11)
        data = doc.tobytes()
        doc.close()
        return data
    return _make
