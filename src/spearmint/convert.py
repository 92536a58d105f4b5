"""
Public entry points: PDF bytes in, Word or Excel bytes out.

Each page is rendered, extracted, grouped and structured before the next
one is touched. `progress(done, total)` is called after every page; raising
from it abandons the conversion and nothing is returned.
"""
import logging
from typing import Callable, Iterator, List, Optional

from spearmint.config import DEFAULT_CONFIG, LayoutConfig
from spearmint.export.docxout import DOCX_MEDIA_TYPE, write_docx
from spearmint.export.xlsxout import XLSX_MEDIA_TYPE, write_xlsx
from spearmint.extraction.fragments import extract_fragments
from spearmint.extraction.renderer import PdfRenderer
from spearmint.features.schema import ConversionResult, Sheet, StructuredBlock, TextFragment
from spearmint.layout.flow import iter_flow_pages, strip_pdf_extension, title_block
from spearmint.layout.tables import iter_table_pages

logger = logging.getLogger(__name__)

Progress = Callable[[int, int], None]

MODES = ("word", "excel")


def output_name(file_name: str, mode: str) -> str:
    base = strip_pdf_extension(file_name)
    if mode == "word":
        return f"{base}.docx"
    if mode == "excel":
        return f"{base}-tables.xlsx"
    raise ValueError(f"unknown conversion mode: {mode!r}")


def iter_page_fragments(renderer: PdfRenderer) -> Iterator[List[TextFragment]]:
    for pno in range(renderer.page_count):
        frags = extract_fragments(renderer.get_page(pno))
        logger.debug("page %d: %d fragments", pno + 1, len(frags))
        yield frags


def _report(progress: Optional[Progress], done: int, total: int) -> None:
    logger.info("page %d/%d done", done, total)
    if progress is not None:
        progress(done, total)


def convert_to_word(data: bytes, file_name: str,
                    config: LayoutConfig = DEFAULT_CONFIG,
                    progress: Optional[Progress] = None) -> ConversionResult:
    blocks: List[StructuredBlock] = [title_block(file_name)]
    with PdfRenderer(data) as renderer:
        total = renderer.page_count
        pages = iter_page_fragments(renderer)
        for done, chunk in enumerate(iter_flow_pages(pages, total, config), start=1):
            blocks.extend(chunk)
            _report(progress, done, total)

    return ConversionResult(
        data=write_docx(blocks),
        file_name=output_name(file_name, "word"),
        media_type=DOCX_MEDIA_TYPE,
        page_count=total,
    )


def convert_to_excel(data: bytes, file_name: str,
                     config: LayoutConfig = DEFAULT_CONFIG,
                     progress: Optional[Progress] = None) -> ConversionResult:
    sheets: List[Sheet] = []
    with PdfRenderer(data) as renderer:
        total = renderer.page_count
        pages = iter_page_fragments(renderer)
        for page_no, sheet in iter_table_pages(pages, total, config):
            if sheet is None:
                logger.info("page %d: no text, no sheet", page_no)
            else:
                sheets.append(sheet)
            _report(progress, page_no, total)

    return ConversionResult(
        data=write_xlsx(sheets),
        file_name=output_name(file_name, "excel"),
        media_type=XLSX_MEDIA_TYPE,
        page_count=total,
    )


def convert(data: bytes, file_name: str, mode: str = "word",
            config: LayoutConfig = DEFAULT_CONFIG,
            progress: Optional[Progress] = None) -> ConversionResult:
    if mode == "word":
        return convert_to_word(data, file_name, config, progress)
    if mode == "excel":
        return convert_to_excel(data, file_name, config, progress)
    raise ValueError(f"unknown conversion mode: {mode!r}")
