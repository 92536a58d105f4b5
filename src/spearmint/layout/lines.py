from typing import Iterable, List

from spearmint.features.schema import Line, TextFragment


def group_into_lines(fragments: Iterable[TextFragment], tolerance: float) -> List[Line]:
    """
    Cluster fragments into baseline rows.

    A fragment joins the current row while its y is within `tolerance` of the
    row's *first* fragment, so slightly sloped text cannot drift the row.
    Sorts are stable: exact (y, x) ties keep renderer order.
    """
    ordered = sorted(fragments, key=lambda f: (f.y, f.x))

    lines: List[Line] = []
    for frag in ordered:
        if lines and abs(frag.y - lines[-1][0].y) <= tolerance:
            lines[-1].append(frag)
        else:
            lines.append([frag])

    # rows must read left to right whatever order the input came in
    return [sorted(line, key=lambda f: f.x) for line in lines]


def line_text(line: Line) -> str:
    return " ".join(f.text for f in line).strip()
