import logging
from typing import Iterable, List

from spearmint.config import COLUMN_MIN_GAP
from spearmint.features.schema import Line

logger = logging.getLogger(__name__)


def column_starts(xs: Iterable[int], min_gap: float = COLUMN_MIN_GAP) -> List[int]:
    # first-seen anchor is kept, never averaged
    cols: List[int] = []
    for x in sorted(set(xs)):
        if not cols or x - cols[-1] > min_gap:
            cols.append(x)
    return cols


def detect_columns(lines: List[Line], min_gap: float = COLUMN_MIN_GAP) -> List[int]:
    cols = column_starts((f.x for line in lines for f in line), min_gap)
    logger.debug("column starts (%d): %s", len(cols), cols)
    return cols


def assign_column(x: float, cols: List[int]) -> int:
    """Index of the nearest column anchor; on a tie the leftmost wins."""
    return min(range(len(cols)), key=lambda i: (abs(x - cols[i]), i))
