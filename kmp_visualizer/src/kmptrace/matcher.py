from __future__ import annotations
from typing import Optional

from .errors import EmptyPatternError, EmptyTextError
from .failure import build_failure_function
from .models import MatchResult, Step, StepKind
from .narration import describe


class _Scan:
    """Mutable state of one run; never outlives TraceableMatcher.run()."""

    def __init__(self, text: str, pattern: str) -> None:
        self.text = text
        self.pattern = pattern
        self.snapshot: list[int] = [0] * len(text)
        self.steps: list[Step] = []
        self.comparisons = 0

    def emit(self, kind: StepKind, text_index: int, pattern_index: int, *,
             match: bool = False, shift: bool = False,
             failure_value: Optional[int] = None, highlight: Optional[int] = None) -> None:
        self.steps.append(Step(
            kind=kind,
            text_index=text_index,
            pattern_index=pattern_index,
            match=match,
            shift=shift,
            status=describe(kind, text_index, pattern_index, failure_value, self.text, self.pattern),
            comparisons=self.comparisons,
            snapshot=tuple(self.snapshot),
            failure_value=failure_value,
            highlight_index=highlight,
        ))


class TraceableMatcher:
    """
    KMP scan instrumented to emit one Step per decision point.

    Every step captures its own copy of the prefix snapshot, so later
    mutation never alters steps already emitted. The matcher only holds its
    inputs; each call to run() keeps its scan state local, so one instance
    may be run repeatedly or from several threads.
    """

    def __init__(self, text: str, pattern: str) -> None:
        self.text = text
        self.pattern = pattern

    def validate(self) -> None:
        if not self.pattern:
            raise EmptyPatternError()
        if not self.text:
            raise EmptyTextError()

    # /* ~~~ Build the failure table, then scan text and record every decision ~~~ */
    def run(self) -> MatchResult:
        self.validate()

        text, pattern = self.text, self.pattern
        n, m = len(text), len(pattern)
        failure = build_failure_function(pattern)

        scan = _Scan(text, pattern)
        snapshot = scan.snapshot
        positions: list[int] = []

        i = j = 0
        while i < n:
            scan.comparisons += 1
            if text[i] == pattern[j]:
                if j + 1 > snapshot[i]:
                    snapshot[i] = j + 1
                scan.emit(StepKind.MATCH, i, j, match=True, highlight=i)
                i += 1
                j += 1
                if j == m:
                    start = i - m
                    positions.append(start)
                    # relabel the whole span as 1..m now that the match is known
                    for k in range(start, i):
                        snapshot[k] = k - start + 1
                    scan.emit(StepKind.FULL_MATCH, i - 1, j - 1, match=True, shift=True,
                              failure_value=failure[j - 1], highlight=None)
                    j = failure[j - 1]
            elif j > 0:
                scan.emit(StepKind.MISMATCH, i, j, failure_value=failure[j - 1], highlight=i)
                j = failure[j - 1]
                scan.emit(StepKind.REALIGN, i, j, shift=True, highlight=i)
            else:
                scan.emit(StepKind.ADVANCE, i, 0, highlight=i)
                i += 1

        return MatchResult(
            failure_function=failure,
            steps=tuple(scan.steps),
            positions=tuple(positions),
            comparisons=scan.comparisons,
            found=bool(positions),
        )
