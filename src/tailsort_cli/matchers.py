from __future__ import annotations

import logging
import re
from typing import Any, Callable, Iterable, Sequence

from .types import ClassMatch, LangConfig, Matcher

logger = logging.getLogger(__name__)

_PATTERN_FLAGS = re.IGNORECASE


class MatcherConfigError(ValueError):
    pass


def build_matchers(config: LangConfig) -> list[Matcher]:
    """Normalize a language config into a list of matchers.

    A list made only of strings is one matcher whose patterns narrow each
    other; any other list yields one matcher per element.
    """
    if config is None:
        return []
    if isinstance(config, list):
        if not config:
            return []
        if not _is_string_list(config):
            return [_build_matcher(item) for item in config]
        return [_build_matcher(config)]
    if isinstance(config, (str, dict)):
        return [_build_matcher(config)]
    return []


def match_nested(
    patterns: Sequence[re.Pattern[str]],
    text: str,
    on_match: Callable[[str, int], None],
    base_offset: int = 0,
) -> None:
    """Report every value captured by the last pattern of a narrowing chain.

    Each pattern after the first only searches inside the value captured by
    the previous one. Offsets passed to ``on_match`` are absolute within the
    text given to the outermost call (plus ``base_offset``).
    """
    if not patterns:
        return

    head, rest = patterns[0], patterns[1:]
    for match in head.finditer(text):
        group_index = _first_populated_group(match)
        if group_index is None:
            continue

        value = match.group(group_index)
        offset = base_offset + match.start(group_index)

        if not rest:
            on_match(value, offset)
        else:
            match_nested(rest, value, on_match, offset)


def collect_matches(
    matchers: Iterable[Matcher],
    text: str,
    ignore_marker: str | None = None,
) -> tuple[list[ClassMatch], int]:
    """Run every matcher over ``text``.

    Returns the surviving matches and how many were skipped because they
    carry ``ignore_marker``.
    """
    matches: list[ClassMatch] = []
    ignored = 0

    for matcher in matchers:

        def _on_match(value: str, offset: int, matcher: Matcher = matcher) -> None:
            nonlocal ignored
            if ignore_marker and ignore_marker in value:
                ignored += 1
                return
            matches.append(ClassMatch(text=value, start=offset, matcher=matcher))

        match_nested(matcher.patterns, text, _on_match)

    logger.debug("collected %d class strings (%d ignored)", len(matches), ignored)
    return matches, ignored


def _build_matcher(value: Any) -> Matcher:
    if isinstance(value, str):
        return Matcher(patterns=(_compile(value, _PATTERN_FLAGS),))
    if isinstance(value, list):
        if _is_string_list(value):
            return Matcher(patterns=tuple(_compile(item, _PATTERN_FLAGS) for item in value))
        return Matcher()
    if not isinstance(value, dict):
        return Matcher()

    regex = value.get("regex")
    if isinstance(regex, str):
        patterns: tuple[re.Pattern[str], ...] = (_compile(regex, _PATTERN_FLAGS),)
    elif isinstance(regex, list) and _is_string_list(regex):
        patterns = tuple(_compile(item, _PATTERN_FLAGS) for item in regex)
    else:
        patterns = ()

    raw_separator = value.get("separator")
    separator = _compile(raw_separator, 0) if isinstance(raw_separator, str) else None

    replacement = value.get("replacement") or raw_separator
    if not isinstance(replacement, str):
        replacement = None

    return Matcher(patterns=patterns, separator=separator, replacement=replacement)


def _compile(pattern: str, flags: int) -> re.Pattern[str]:
    try:
        return re.compile(pattern, flags)
    except re.error as exc:
        raise MatcherConfigError(f"Invalid regular expression {pattern!r}: {exc}") from exc


def _first_populated_group(match: re.Match[str]) -> int | None:
    for index in range(1, (match.re.groups or 0) + 1):
        if match.group(index):
            return index
    return None


def _is_string_list(value: list[Any]) -> bool:
    return all(isinstance(item, str) for item in value)
