"""
PyMuPDF page renderer: opens a PDF from an in-memory buffer and hands out
pages whose text runs are reported in PDF user space (origin bottom-left),
in content-stream order.
"""
import logging
from typing import List

import fitz

from spearmint.errors import RENDER_ERRORS, RenderFailure
from spearmint.features.schema import RawTextItem

logger = logging.getLogger(__name__)


class PdfPage:
    def __init__(self, page: fitz.Page):
        self._page = page

    def get_viewport_height(self) -> float:
        return float(self._page.rect.height)

    def get_text_items(self) -> List[RawTextItem]:
        """
        One item per show-text run, in content-stream order. MuPDF's "dict"
        spans merge neighbouring runs, so the text trace is used instead.
        """
        try:
            trace = self._page.get_texttrace()
        except RENDER_ERRORS as exc:
            raise RenderFailure(
                f"could not read text on page {self._page.number + 1}: {exc}"
            ) from exc

        # MuPDF space is top-left; undo the page transform to get user space
        to_user = ~self._page.transformation_matrix
        items: List[RawTextItem] = []
        for run in sorted(trace, key=lambda t: t["seqno"]):
            chars = run["chars"]
            if not chars:
                continue
            text = "".join(chr(ch[0]) for ch in chars if ch[0] >= 0)
            cos, sin = run.get("dir", (1.0, 0.0))
            size = run["size"]
            origin = fitz.Point(chars[0][2]) * to_user
            x0, y0, x1, y1 = run["bbox"]
            items.append(RawTextItem(
                text=text,
                transform=(size * cos, -size * sin,
                           size * sin, size * cos,
                           origin.x, origin.y),
                width=x1 - x0,
                height=size,
            ))
        logger.debug("page %d: %d raw text runs", self._page.number + 1, len(items))
        return items


class PdfRenderer:
    """Page renderer over a PDF byte buffer. Use as a context manager."""

    def __init__(self, data: bytes):
        try:
            self._doc = fitz.open(stream=data, filetype="pdf")
        except RENDER_ERRORS as exc:
            raise RenderFailure(f"could not open PDF: {exc}") from exc
        if self._doc.page_count == 0:
            self._doc.close()
            raise RenderFailure("PDF has no pages")

    def __enter__(self) -> "PdfRenderer":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._doc.close()

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def get_page(self, index: int) -> PdfPage:
        try:
            return PdfPage(self._doc.load_page(index))
        except RENDER_ERRORS as exc:
            raise RenderFailure(f"could not load page {index + 1}: {exc}") from exc
