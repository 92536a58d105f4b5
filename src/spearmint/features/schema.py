from dataclasses import dataclass, field
from typing import List, Optional, Tuple

Transform = Tuple[float, float, float, float, float, float]

@dataclass(frozen=True)
class RawTextItem:
    text: str
    transform: Transform
    width: float
    height: float

@dataclass(frozen=True)
class TextFragment:
    text: str
    x: int
    y: int
    width: int
    height: int

Line = List[TextFragment]
Grid = List[List[str]]

@dataclass(frozen=True)
class StructuredBlock:
    text: str
    level: int = 0                  # 0 body, 1 title, 2 page label
    bold: bool = False
    font_size: Optional[float] = None
    page_break_before: bool = False

@dataclass(frozen=True)
class Sheet:
    name: str
    page_number: int
    grid: Grid = field(default_factory=list)
    widths: List[int] = field(default_factory=list)

@dataclass(frozen=True)
class ConversionResult:
    data: bytes
    file_name: str
    media_type: str
    page_count: int
