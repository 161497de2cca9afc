from __future__ import annotations
from typing import Optional

from .models import Step, StepKind


def describe(kind: StepKind, text_index: int, pattern_index: int,
             failure_value: Optional[int], text: str, pattern: str) -> str:
    """Narrate one decision point from its structured fields alone."""
    i, j = text_index, pattern_index
    if kind is StepKind.MATCH:
        return (f"Comparing text[{i}]='{text[i]}' with pattern[{j}]='{pattern[j]}': match found. "
                f"Advancing to text[{i + 1}] and pattern[{j + 1}].")
    if kind is StepKind.FULL_MATCH:
        # text_index/pattern_index point at the last matched cell
        start = i - j
        return (f"Full pattern match found at text index {start}! "
                f"Using failure function value {failure_value} to shift pattern to pattern[{failure_value}].")
    if kind is StepKind.MISMATCH:
        return (f"Mismatch at text[{i}]='{text[i]}' and pattern[{j}]='{pattern[j]}'. "
                f"Using failure function value {failure_value} to shift pattern to pattern[{failure_value}].")
    if kind is StepKind.REALIGN:
        return f"Pattern shifted to align at pattern[{j}] with text[{i}]='{text[i]}' based on failure function."
    if kind is StepKind.ADVANCE:
        return (f"Mismatch at text[{i}]='{text[i]}' and pattern[0]='{pattern[0]}'. "
                f"No prefix to use, advancing to text[{i + 1}].")
    raise ValueError(f"Unknown step kind: {kind!r}")


def describe_step(step: Step, text: str, pattern: str) -> str:
    """Re-derive a step's narration (e.g. for clients that dropped `status`)."""
    return describe(step.kind, step.text_index, step.pattern_index, step.failure_value, text, pattern)
