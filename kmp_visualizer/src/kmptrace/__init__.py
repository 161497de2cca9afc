"""Public API for the traced KMP matching engine."""
from __future__ import annotations

from .engine import match
from .errors import EmptyPatternError, EmptyTextError, InputError, KMPTraceError
from .failure import build_failure_function
from .matcher import TraceableMatcher
from .models import MatchError, MatchResult, Step, StepKind

__all__ = [
    "match",
    "build_failure_function",
    "TraceableMatcher",
    "MatchResult",
    "MatchError",
    "Step",
    "StepKind",
    "KMPTraceError",
    "InputError",
    "EmptyPatternError",
    "EmptyTextError",
]
