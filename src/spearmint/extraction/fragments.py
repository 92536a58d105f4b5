import math
from typing import List

from spearmint.features.schema import TextFragment


def round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def extract_fragments(page) -> List[TextFragment]:
    """
    Turn a page's raw text runs into top-origin, integer-rounded fragments.

    `page` needs `get_text_items()` and `get_viewport_height()`. The vertical
    flip (height - ty) happens here and nowhere else. Whitespace-only runs are
    dropped; an image-only page simply yields [].
    """
    height = page.get_viewport_height()
    out: List[TextFragment] = []
    for item in page.get_text_items():
        if not item.text.strip():
            continue
        tx, ty = item.transform[4], item.transform[5]
        out.append(
            TextFragment(
                text=item.text,
                x=round_half_up(tx),
                y=round_half_up(height - ty),
                width=round_half_up(item.width),
                height=round_half_up(item.height),
            )
        )
    return out
