from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Union

LangConfig = Union[str, list[Any], dict[str, Any], None]


@dataclass(frozen=True)
class Matcher:
    patterns: tuple[re.Pattern[str], ...] = ()
    separator: re.Pattern[str] | None = None
    replacement: str | None = None


@dataclass(frozen=True)
class ClassMatch:
    text: str
    start: int
    matcher: Matcher = field(default_factory=Matcher, compare=False)

    @property
    def end(self) -> int:
        return self.start + len(self.text)


@dataclass(frozen=True)
class SortOptions:
    remove_duplicates: bool = True
    prepend_custom: bool = False
    custom_prefix: str = ""
    separator: re.Pattern[str] | None = None
    replacement: str | None = None


@dataclass(frozen=True)
class SpanReplacement:
    start: int
    end: int
    replacement: str
