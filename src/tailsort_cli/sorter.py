"""Token splitting, deduplication and ordering for class strings."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Sequence

from .types import SortOptions

_WHITESPACE = re.compile(r"\s")
_WHITESPACE_RUN = re.compile(r"\s+")
_DOT = re.compile(r"\.")


@dataclass(frozen=True)
class TokenSplit:
    tokens: list[str]
    joiner: str
    leading_dot: bool

    def join(self, tokens: Iterable[str]) -> str:
        result = self.joiner.join(tokens).strip()
        if self.leading_dot:
            return "." + result
        return result


def split_tokens(raw: str, options: SortOptions) -> TokenSplit:
    """Split ``raw`` into tokens, dropping empties and optionally duplicates.

    Without an explicit separator, whitespace-separated strings split on
    whitespace runs and anything else splits on ``.`` (HAML-style
    ``.foo.bar`` shorthand). A leading dot is remembered so it can be put
    back when rejoining.
    """
    if _WHITESPACE.search(raw):
        default_separator, default_joiner, dotted = _WHITESPACE_RUN, " ", False
    else:
        default_separator, default_joiner, dotted = _DOT, ".", True

    separator = options.separator or default_separator
    tokens = [token for token in separator.split(raw) if token]

    if options.remove_duplicates:
        tokens = list(dict.fromkeys(tokens))

    return TokenSplit(
        tokens=tokens,
        joiner=options.replacement or default_joiner,
        leading_dot=dotted and raw.startswith("."),
    )


def order_tokens(
    tokens: Sequence[str],
    sort_order: Sequence[str],
    prepend_custom: bool = False,
    custom_prefix: str = "",
) -> list[str]:
    if custom_prefix:
        sort_order = [custom_prefix + name for name in sort_order]

    positions: dict[str, int] = {}
    for index, name in enumerate(sort_order):
        positions.setdefault(name, index)

    known = sorted((token for token in tokens if token in positions), key=positions.__getitem__)
    custom = [token for token in tokens if token not in positions]

    if prepend_custom:
        return custom + known
    return known + custom


def sort_tokens(raw: str, sort_order: Sequence[str], options: SortOptions) -> str:
    if not raw:
        return ""

    split = split_tokens(raw, options)
    ordered = order_tokens(
        split.tokens,
        sort_order,
        prepend_custom=options.prepend_custom,
        custom_prefix=options.custom_prefix,
    )
    return split.join(ordered)
