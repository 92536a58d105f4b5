import io
import logging
from typing import Iterable

from docx import Document
from docx.shared import Pt

from spearmint.errors import CodecFailure
from spearmint.features.schema import StructuredBlock

logger = logging.getLogger(__name__)

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


def add_block(doc, blk: StructuredBlock) -> None:
    if blk.page_break_before:
        par = doc.add_paragraph(blk.text)
        par.paragraph_format.page_break_before = True
        return

    if blk.level:
        doc.add_heading(blk.text, level=blk.level)
        return

    run = doc.add_paragraph().add_run(blk.text)
    run.bold = blk.bold
    if blk.font_size:
        run.font.size = Pt(blk.font_size)


def write_docx(blocks: Iterable[StructuredBlock]) -> bytes:
    """Serialise blocks into a single-section .docx and return its bytes."""
    doc = Document()
    count = 0
    try:
        for blk in blocks:
            add_block(doc, blk)
            count += 1
        buf = io.BytesIO()
        doc.save(buf)
    except (ValueError, KeyError) as exc:
        # lxml rejects control characters that some PDFs carry in their text
        raise CodecFailure(f"could not write Word document: {exc}") from exc

    logger.debug("docx: wrote %d blocks", count)
    return buf.getvalue()
