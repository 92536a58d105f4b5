from dataclasses import dataclass

FLOW_LINE_TOLERANCE   = 5           # same line if |dy| <= 5 units
TABLE_LINE_TOLERANCE  = 8           # looser: table cells drift by sub-pixels
COLUMN_MIN_GAP        = 20          # new column if x - prev anchor > 20
HEADING_MAX_CHARS     = 60
HEADING_MAX_FRAGMENTS = 3
HEADING_FONT_SIZE     = 12.0        # pt
BODY_FONT_SIZE        = 10.0        # pt
MIN_COLUMN_WIDTH      = 10          # characters
MAX_COLUMN_WIDTH      = 50
DEFAULT_SHEET_NAME    = "Sheet1"


@dataclass(frozen=True)
class LayoutConfig:
    """
    Tunable thresholds for line grouping, heading detection and column
    clustering. The heading thresholds are heuristics, not guarantees.
    """
    flow_line_tolerance: int = FLOW_LINE_TOLERANCE
    table_line_tolerance: int = TABLE_LINE_TOLERANCE
    column_min_gap: int = COLUMN_MIN_GAP
    heading_max_chars: int = HEADING_MAX_CHARS
    heading_max_fragments: int = HEADING_MAX_FRAGMENTS
    heading_font_size: float = HEADING_FONT_SIZE
    body_font_size: float = BODY_FONT_SIZE
    min_column_width: int = MIN_COLUMN_WIDTH
    max_column_width: int = MAX_COLUMN_WIDTH
    default_sheet_name: str = DEFAULT_SHEET_NAME


DEFAULT_CONFIG = LayoutConfig()
