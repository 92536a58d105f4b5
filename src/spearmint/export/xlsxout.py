import io
import logging
from typing import Iterable

import openpyxl
from openpyxl.utils import get_column_letter
from openpyxl.utils.exceptions import IllegalCharacterError

from spearmint.errors import CodecFailure
from spearmint.features.schema import Sheet

logger = logging.getLogger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def fill_sheet(ws, sheet: Sheet) -> None:
    ws.title = sheet.name
    for r, row in enumerate(sheet.grid, start=1):
        for c, text in enumerate(row, start=1):
            if not text:
                continue
            # text like "=1+1" must stay a string, never become a formula
            cell = ws.cell(row=r, column=c, value=text)
            cell.data_type = "s"
    for c, width in enumerate(sheet.widths, start=1):
        ws.column_dimensions[get_column_letter(c)].width = width


def write_xlsx(sheets: Iterable[Sheet]) -> bytes:
    """
    One worksheet per Sheet, in order, with the supplied column widths.
    A workbook needs at least one sheet, so an empty input is a failure.
    """
    sheets = list(sheets)
    if not sheets:
        raise CodecFailure("no pages with extractable text, nothing to put in a workbook")

    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    try:
        for sheet in sheets:
            fill_sheet(wb.create_sheet(), sheet)
        buf = io.BytesIO()
        wb.save(buf)
    except (ValueError, IllegalCharacterError) as exc:
        raise CodecFailure(f"could not write workbook: {exc}") from exc

    logger.debug("xlsx: wrote %d sheets", len(sheets))
    return buf.getvalue()
