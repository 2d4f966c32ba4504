from __future__ import annotations

from typing import Iterable

from .types import ClassMatch, SpanReplacement


def select_matches(matches: Iterable[ClassMatch]) -> list[ClassMatch]:
    """Order matches rightmost first, dropping duplicates and overlaps.

    Two matchers can report the same span; only the first one is kept so the
    same class string is never spliced twice.
    """
    ranked = sorted(matches, key=lambda m: (-m.start, -(m.end - m.start)))

    # selected spans are disjoint with descending starts; only the last can overlap
    selected: list[ClassMatch] = []
    for candidate in ranked:
        if selected and _overlaps(candidate.start, candidate.end, selected[-1].start, selected[-1].end):
            continue
        selected.append(candidate)
    return selected


def apply_replacements(text: str, replacements: list[SpanReplacement]) -> tuple[str, int]:
    if not replacements:
        return text, 0

    result = text
    changed = 0
    for replacement in sorted(replacements, key=lambda r: (r.start, r.end), reverse=True):
        if replacement.start < 0 or replacement.end > len(text) or replacement.end < replacement.start:
            continue
        current = result[replacement.start : replacement.end]
        if current == replacement.replacement:
            continue
        result = result[: replacement.start] + replacement.replacement + result[replacement.end :]
        changed += 1

    return result, changed


def _overlaps(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    return start_a < end_b and start_b < end_a
