from __future__ import annotations
from typing import List

from kmptrace.models import Step, StepKind

CELL = 3        # width of one text/pattern column
LABEL = 9       # width of the row-label gutter


def _row(label: str, cells: List[str]) -> str:
    return f"{label:<{LABEL}}" + "".join(f"{c:>{CELL}}" for c in cells)


def render_frame(text: str, pattern: str, step: Step) -> str:
    """
    Render one step as a fixed-width frame:

        idx        0  1  2  3
        text       a  b  a  b
        pattern          a  b
        compare          ^
        prefix     1  2  1  0
    """
    n = len(text)
    offset = step.text_index - step.pattern_index  # where pattern[0] sits under text

    pat_cells = [""] * max(n, offset + len(pattern))
    for k, ch in enumerate(pattern):
        pat_cells[offset + k] = ch

    marks = [""] * len(pat_cells)
    if step.kind is StepKind.FULL_MATCH:
        for k in range(offset, step.text_index + 1):
            marks[k] = "="
    else:
        marks[step.text_index] = "^" if step.match else "x"
        if step.kind is StepKind.REALIGN:
            marks[step.text_index] = ">"

    lines = [
        _row("idx", [str(k) for k in range(n)]),
        _row("text", list(text)),
        _row("pattern", pat_cells),
        _row("compare", marks).rstrip(),
        _row("prefix", [str(v) for v in step.snapshot]),
    ]
    return "\n".join(line.rstrip() for line in lines)


def render_header(index: int, total: int, step: Step) -> str:
    extra = f"  failure={step.failure_value}" if step.failure_value is not None else ""
    return f"step {index}/{total}  [{step.kind.value}]  comparisons={step.comparisons}{extra}"
