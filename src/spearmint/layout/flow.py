import logging
import re
from typing import Iterable, Iterator, List, Sequence

from spearmint.config import DEFAULT_CONFIG, LayoutConfig
from spearmint.features.schema import Line, StructuredBlock, TextFragment
from spearmint.layout.lines import group_into_lines, line_text

logger = logging.getLogger(__name__)

PDF_EXT_RE = re.compile(r"\.pdf$", re.IGNORECASE)


def strip_pdf_extension(name: str) -> str:
    return PDF_EXT_RE.sub("", name)


def title_block(document_name: str) -> StructuredBlock:
    return StructuredBlock(text=strip_pdf_extension(document_name), level=1)


def looks_like_heading(text: str, line: Line, config: LayoutConfig = DEFAULT_CONFIG) -> bool:
    # short lines built from few runs are usually titles or labels
    return (len(text) < config.heading_max_chars
            and len(line) <= config.heading_max_fragments)


def page_blocks(fragments: Sequence[TextFragment],
                config: LayoutConfig = DEFAULT_CONFIG) -> List[StructuredBlock]:
    blocks: List[StructuredBlock] = []
    for line in group_into_lines(fragments, config.flow_line_tolerance):
        text = line_text(line)
        if not text:
            continue
        heading = looks_like_heading(text, line, config)
        blocks.append(StructuredBlock(
            text=text,
            bold=heading,
            font_size=config.heading_font_size if heading else config.body_font_size,
        ))
    return blocks


def iter_flow_pages(pages: Iterable[Sequence[TextFragment]], total: int,
                    config: LayoutConfig = DEFAULT_CONFIG) -> Iterator[List[StructuredBlock]]:
    """Yield the blocks of each page in turn: label, body lines, page break."""
    for pno, fragments in enumerate(pages):
        out: List[StructuredBlock] = []
        if total > 1:
            out.append(StructuredBlock(text=f"Page {pno + 1}", level=2))
        body = page_blocks(fragments, config)
        out.extend(body)
        if pno < total - 1:
            out.append(StructuredBlock(text="", page_break_before=True))
        logger.debug("page %d: %d body blocks", pno + 1, len(body))
        yield out


def build_flow(pages: Sequence[Sequence[TextFragment]],
               document_title: str,
               config: LayoutConfig = DEFAULT_CONFIG) -> List[StructuredBlock]:
    blocks = [title_block(document_title)]
    for chunk in iter_flow_pages(pages, len(pages), config):
        blocks.extend(chunk)
    return blocks
