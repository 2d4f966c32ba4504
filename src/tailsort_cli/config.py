r"""Language defaults and the JSON config file.

Example ``tailsort.json``::

    {
      "sortOrder": ["container", "flex", "p-4"],
      "removeDuplicates": true,
      "prependCustomClasses": false,
      "customTailwindPrefix": "tw-",
      "languages": {
        "html": "class=\"([^\"]+)\"",
        ".vue": ["<template>([\\s\\S]*)</template>", "class=\"([^\"]+)\""]
      }
    }

``langConfig`` applies one language config to every file and wins over
``languages``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .types import LangConfig, SortOptions

HTML_CLASS_REGEX = r'\bclass\s*=\s*"([^"]+)"'
JSX_CLASS_REGEX = r"""\bclassName\s*=\s*(?:"([^"]+)"|'([^']+)'|\{\s*`([^`$]+)`\s*\})"""
CSS_APPLY_REGEX = r"@apply\s+([^;]+?)\s*(?:!important)?\s*;"
HAML_CLASS_REGEX = r"(?m)^[ \t]*(?:%[\w-]+)?((?:\.[\w:/-]+)+)"

DEFAULT_LANGUAGE_CONFIGS: dict[str, LangConfig] = {
    "html": HTML_CLASS_REGEX,
    "javascript": [{"regex": JSX_CLASS_REGEX}, {"regex": HTML_CLASS_REGEX}],
    "css": CSS_APPLY_REGEX,
    "haml": HAML_CLASS_REGEX,
}

EXTENSION_LANGUAGES: dict[str, str] = {
    ".html": "html",
    ".htm": "html",
    ".vue": "html",
    ".svelte": "html",
    ".erb": "html",
    ".php": "html",
    ".twig": "html",
    ".jsx": "javascript",
    ".tsx": "javascript",
    ".js": "javascript",
    ".ts": "javascript",
    ".css": "css",
    ".scss": "css",
    ".sass": "css",
    ".less": "css",
    ".pcss": "css",
    ".haml": "haml",
}

FALLBACK_LANGUAGE = "html"


class ConfigError(RuntimeError):
    pass


@dataclass
class TailsortConfig:
    lang_config: LangConfig = None
    languages: dict[str, LangConfig] = field(default_factory=dict)
    sort_order: list[str] | None = None
    remove_duplicates: bool | None = None
    prepend_custom: bool | None = None
    custom_prefix: str | None = None
    order_command: str | None = None
    ignore_marker: str | None = None
    ignore_all_marker: str | None = None

    @classmethod
    def from_dict(cls, value: dict[str, Any]) -> "TailsortConfig":
        languages = value.get("languages", {})
        if not isinstance(languages, dict):
            raise ConfigError("Invalid config: 'languages' must be an object.")

        sort_order = value.get("sortOrder")
        if sort_order is not None and not (
            isinstance(sort_order, list) and all(isinstance(item, str) for item in sort_order)
        ):
            raise ConfigError("Invalid config: 'sortOrder' must be a list of strings.")

        return cls(
            lang_config=value.get("langConfig"),
            languages=languages,
            sort_order=sort_order,
            remove_duplicates=_optional(value, "removeDuplicates", bool),
            prepend_custom=_optional(value, "prependCustomClasses", bool),
            custom_prefix=_optional(value, "customTailwindPrefix", str),
            order_command=_optional(value, "orderCommand", str),
            ignore_marker=_optional(value, "ignoreMarker", str),
            ignore_all_marker=_optional(value, "ignoreAllMarker", str),
        )

    def sort_options(
        self,
        *,
        remove_duplicates: bool | None = None,
        prepend_custom: bool | None = None,
        custom_prefix: str | None = None,
    ) -> SortOptions:
        """Merge CLI values over file values over built-in defaults."""
        defaults = SortOptions()
        return SortOptions(
            remove_duplicates=_first_set(remove_duplicates, self.remove_duplicates, defaults.remove_duplicates),
            prepend_custom=_first_set(prepend_custom, self.prepend_custom, defaults.prepend_custom),
            custom_prefix=_first_set(custom_prefix, self.custom_prefix, defaults.custom_prefix),
        )

    def language_config_for(self, path: Path) -> LangConfig:
        if self.lang_config is not None:
            return self.lang_config
        return language_config_for(path, self.languages)


def language_config_for(path: Path, overrides: dict[str, LangConfig] | None = None) -> LangConfig:
    """Resolve the class regex config for ``path`` by its suffix.

    ``overrides`` may be keyed by suffix (``".vue"``) or language name
    (``"html"``); a suffix key is more specific and wins.
    """
    overrides = overrides or {}
    suffix = path.suffix.lower()
    if suffix in overrides:
        return overrides[suffix]

    language = EXTENSION_LANGUAGES.get(suffix, FALLBACK_LANGUAGE)
    if language in overrides:
        return overrides[language]
    return DEFAULT_LANGUAGE_CONFIGS[language]


def load_config_file(path: Path) -> TailsortConfig:
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError(f"Config file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file is not valid JSON: {path} ({exc})") from exc

    if not isinstance(payload, dict):
        raise ConfigError(f"Config file must contain a JSON object: {path}")

    return TailsortConfig.from_dict(payload)


def _optional(value: dict[str, Any], key: str, expected: type) -> Any:
    item = value.get(key)
    if item is None:
        return None
    if not isinstance(item, expected):
        raise ConfigError(f"Invalid config: '{key}' must be of type {expected.__name__}.")
    return item


def _first_set(*values: Any) -> Any:
    for item in values:
        if item is not None:
            return item
    return None
