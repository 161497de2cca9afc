from __future__ import annotations


def build_failure_function(pattern: str) -> tuple[int, ...]:
    """
    KMP failure (prefix) function: failure[i] is the length of the longest
    proper prefix of pattern that is also a suffix of pattern[:i+1].
    Total fallback work is bounded by len(pattern).
    """
    if not pattern:
        raise ValueError("build_failure_function(): pattern must be non-empty")

    failure = [0] * len(pattern)
    j = 0  # candidate border length carried over from position i-1
    for i in range(1, len(pattern)):
        if pattern[i] == pattern[j]:
            j += 1
        else:
            while j > 0 and pattern[i] != pattern[j]:
                j = failure[j - 1]
            if pattern[i] == pattern[j]:
                j += 1
        failure[i] = j
    return tuple(failure)
