from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from .config import NONE_INDEX
from .errors import InputError


class StepKind(Enum):
    MATCH = "match"              # text[i] == pattern[j], both cursors advance
    FULL_MATCH = "full_match"    # whole pattern matched, pattern realigned via failure table
    MISMATCH = "mismatch"        # text[i] != pattern[j] with j > 0
    REALIGN = "realign"          # pattern cursor moved back after a mismatch, i stays
    ADVANCE = "advance"          # text[i] != pattern[0], text cursor advances


@dataclass(frozen=True)
class Step:
    kind: StepKind
    text_index: int
    pattern_index: int
    match: bool
    shift: bool
    status: str                          # human-readable narration
    comparisons: int                     # character comparisons so far
    snapshot: tuple[int, ...]            # prefix-match lengths per text position
    failure_value: Optional[int] = None  # failure-table value consulted, if any
    highlight_index: Optional[int] = None  # None once a match is complete

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "kind": self.kind.value,
            "textIndex": self.text_index,
            "patternIndex": self.pattern_index,
            "match": self.match,
            "shift": self.shift,
            "status": self.status,
            "comparisons": self.comparisons,
            "prefixFunction": list(self.snapshot),
            "highlightPrefixIndex": NONE_INDEX if self.highlight_index is None else self.highlight_index,
        }
        if self.failure_value is not None:
            out["failureValue"] = self.failure_value
        return out


@dataclass(frozen=True)
class MatchError:
    kind: str       # "EmptyPatternError" | "EmptyTextError"
    message: str

    @classmethod
    def from_exception(cls, exc: InputError) -> "MatchError":
        return cls(kind=exc.kind, message=str(exc))


@dataclass(frozen=True)
class MatchResult:
    """
    Outcome of one match run.

    `steps` is in emission order (the replay order); `positions` are match
    start indices in the order they were found. An error result carries only
    `error`: no failure table, no steps.
    """
    failure_function: tuple[int, ...] = ()
    steps: tuple[Step, ...] = ()
    positions: tuple[int, ...] = ()
    comparisons: int = 0
    found: bool = False
    error: Optional[MatchError] = None

    @classmethod
    def failed(cls, exc: InputError) -> "MatchResult":
        return cls(error=MatchError.from_exception(exc))

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "failureFunction": list(self.failure_function),
            "steps": [s.to_dict() for s in self.steps],
            "found": self.found,
            "positions": list(self.positions),
            "comparisons": self.comparisons,
        }
        if self.error is not None:
            out["error"] = self.error.message
        return out
