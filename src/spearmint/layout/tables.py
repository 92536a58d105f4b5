import logging
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from spearmint.config import DEFAULT_CONFIG, LayoutConfig
from spearmint.features.schema import Grid, Line, Sheet, TextFragment
from spearmint.layout.columns import assign_column, detect_columns
from spearmint.layout.lines import group_into_lines

logger = logging.getLogger(__name__)


def is_blank_row(row: List[str]) -> bool:
    return not any(cell.strip() for cell in row)


def build_grid(lines: List[Line], cols: List[int]) -> Grid:
    """
    One row per line, one cell per column. Runs landing in the same cell are
    space-joined left to right. Rows with nothing but whitespace are dropped,
    otherwise wide line spacing turns into phantom empty rows.
    """
    grid: Grid = []
    for line in lines:
        row = [""] * len(cols)
        for frag in line:
            c = assign_column(frag.x, cols)
            row[c] = f"{row[c]} {frag.text}" if row[c] else frag.text
        if not is_blank_row(row):
            grid.append(row)
    return grid


def column_widths(grid: Grid, col_cnt: int,
                  lo: int = DEFAULT_CONFIG.min_column_width,
                  hi: int = DEFAULT_CONFIG.max_column_width) -> List[int]:
    widths = []
    for c in range(col_cnt):
        longest = max([lo] + [len(row[c]) for row in grid if c < len(row)])
        widths.append(min(hi, longest))
    return widths


def sheet_name(page_no: int, page_total: int, config: LayoutConfig = DEFAULT_CONFIG) -> str:
    # original page numbers are kept even when earlier pages were skipped
    return config.default_sheet_name if page_total == 1 else f"Page {page_no}"


def page_sheet(fragments: Sequence[TextFragment], page_no: int, page_total: int,
               config: LayoutConfig = DEFAULT_CONFIG) -> Optional[Sheet]:
    lines = group_into_lines(fragments, config.table_line_tolerance)
    if not lines:
        return None

    cols = detect_columns(lines, config.column_min_gap)
    grid = build_grid(lines, cols)
    logger.debug("page %d: %d lines -> %d rows x %d cols",
                 page_no, len(lines), len(grid), len(cols))
    return Sheet(
        name=sheet_name(page_no, page_total, config),
        page_number=page_no,
        grid=grid,
        widths=column_widths(grid, len(cols),
                             config.min_column_width, config.max_column_width),
    )


def iter_table_pages(pages: Iterable[Sequence[TextFragment]], total: int,
                     config: LayoutConfig = DEFAULT_CONFIG) -> Iterator[Tuple[int, Optional[Sheet]]]:
    """Yield (1-based page number, sheet or None for a page without text)."""
    for pno, fragments in enumerate(pages):
        yield pno + 1, page_sheet(fragments, pno + 1, total, config)


def build_tables(pages: Sequence[Sequence[TextFragment]],
                 document_name: str,
                 config: LayoutConfig = DEFAULT_CONFIG) -> List[Sheet]:
    sheets = [sheet for _, sheet in iter_table_pages(pages, len(pages), config) if sheet is not None]
    logger.debug("%s: %d of %d pages produced a sheet",
                 document_name, len(sheets), len(pages))
    return sheets
