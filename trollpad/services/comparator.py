"""Exact, code-unit-level comparison of the editor text against the retyped text.

No normalization of any kind: case, whitespace and line breaks all count. When one
buffer is a strict prefix of the other, the mismatch is reported at the length of
the shorter buffer.
"""

from __future__ import annotations

from trollpad.domain.models import IDENTICAL, MatchResult, Mismatch, MismatchReport
from trollpad.utils.constants import CONTEXT_RADIUS


def first_mismatch(expected: str, actual: str) -> int | None:
    """Index of the first differing code unit, or None if the buffers are identical."""
    for i, (a, b) in enumerate(zip(expected, actual)):
        if a != b:
            return i
    if len(expected) != len(actual):
        return min(len(expected), len(actual))
    return None


def compare(expected: str, actual: str) -> MatchResult:
    locus = first_mismatch(expected, actual)
    if locus is None:
        return IDENTICAL
    return Mismatch(locus)


def escape_newlines(text: str) -> str:
    return text.replace("\n", "\\n")


def context_window(text: str, locus: int, radius: int = CONTEXT_RADIUS) -> str:
    """Slice of ``text`` around ``locus``, clamped to the buffer, newlines escaped."""
    start = max(0, locus - radius)
    end = min(len(text), locus + radius)
    return escape_newlines(text[start:end])


def build_report(expected: str, actual: str) -> MismatchReport | None:
    result = compare(expected, actual)
    if not isinstance(result, Mismatch):
        return None
    return report_for(expected, actual, result.locus)


def report_for(expected: str, actual: str, locus: int) -> MismatchReport:
    return MismatchReport(
        locus=locus,
        expected_snippet=context_window(expected, locus),
        actual_snippet=context_window(actual, locus),
    )
