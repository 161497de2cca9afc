# kmptrace/engine.py
from __future__ import annotations

import logging
import time

from .errors import InputError
from .matcher import TraceableMatcher
from .models import MatchResult

log = logging.getLogger(__name__)


def match(text: str, pattern: str) -> MatchResult:
    """
    Run a traced KMP search of `pattern` in `text`.

    Input errors (empty pattern, empty text) are returned inside the result,
    never raised, so callers can render them without exception handling.
    """
    t0 = time.perf_counter()
    try:
        result = TraceableMatcher(text, pattern).run()
    except InputError as exc:
        log.warning("match() rejected input: %s", exc)
        return MatchResult.failed(exc)

    log.info(
        "match() n=%d m=%d steps=%d comparisons=%d matches=%d in %.2fms",
        len(text), len(pattern), len(result.steps), result.comparisons,
        len(result.positions), (time.perf_counter() - t0) * 1000,
    )
    return result
