import json
from pathlib import Path

import pytest

from tailsort_cli.config import (
    CSS_APPLY_REGEX,
    DEFAULT_LANGUAGE_CONFIGS,
    ConfigError,
    TailsortConfig,
    language_config_for,
    load_config_file,
)
from tailsort_cli.ordering import StaticOrderProvider
from tailsort_cli.rewriter import rewrite_text
from tailsort_cli.types import SortOptions

ORDER = StaticOrderProvider(["flex", "p-4"])


def test_language_config_by_extension() -> None:
    assert language_config_for(Path("App.tsx")) == DEFAULT_LANGUAGE_CONFIGS["javascript"]
    assert language_config_for(Path("page.VUE")) == DEFAULT_LANGUAGE_CONFIGS["html"]
    assert language_config_for(Path("view.haml")) == DEFAULT_LANGUAGE_CONFIGS["haml"]
    assert language_config_for(Path("notes.unknown")) == DEFAULT_LANGUAGE_CONFIGS["html"]


def test_language_overrides_by_suffix_and_name() -> None:
    overrides = {"html": "h=(.*)", ".vue": "v=(.*)"}

    assert language_config_for(Path("a.vue"), overrides) == "v=(.*)"
    assert language_config_for(Path("a.html"), overrides) == "h=(.*)"
    assert language_config_for(Path("a.css"), overrides) == CSS_APPLY_REGEX


def test_jsx_defaults_cover_quotes_and_template_literals() -> None:
    config = DEFAULT_LANGUAGE_CONFIGS["javascript"]
    source = (
        '<div className="p-4 flex" />\n'
        "<div className='p-4 flex' />\n"
        "<div className={`p-4 flex`} />\n"
    )
    expected = (
        '<div className="flex p-4" />\n'
        "<div className='flex p-4' />\n"
        "<div className={`flex p-4`} />\n"
    )
    assert rewrite_text(source, config, SortOptions(), ORDER) == expected


def test_jsx_template_literal_with_interpolation_is_untouched() -> None:
    source = '<div className={`flex ${a ? "x" : "y"} ${b ? "z" : "w"} p-4`} />'

    result = rewrite_text(source, DEFAULT_LANGUAGE_CONFIGS["javascript"], SortOptions())

    assert result == source
    assert result.count("?") == 2


def test_css_apply_default() -> None:
    source = ".btn { @apply p-4 flex !important; }\n.card { @apply p-4 flex; }"
    expected = ".btn { @apply flex p-4 !important; }\n.card { @apply flex p-4; }"
    assert rewrite_text(source, CSS_APPLY_REGEX, SortOptions(), ORDER) == expected


def test_load_config_file(tmp_path: Path) -> None:
    path = tmp_path / "tailsort.json"
    path.write_text(
        json.dumps(
            {
                "sortOrder": ["flex", "p-4"],
                "removeDuplicates": False,
                "customTailwindPrefix": "tw-",
                "languages": {".svelte": "class:(.*)"},
                "orderCommand": "sorter --json",
                "ignoreMarker": "skip-sort",
            }
        ),
        encoding="utf-8",
    )

    config = load_config_file(path)

    assert config.sort_order == ["flex", "p-4"]
    assert config.remove_duplicates is False
    assert config.custom_prefix == "tw-"
    assert config.order_command == "sorter --json"
    assert config.ignore_marker == "skip-sort"
    assert config.language_config_for(Path("App.svelte")) == "class:(.*)"


def test_lang_config_applies_to_every_file() -> None:
    config = TailsortConfig(lang_config="x=(.*)", languages={".vue": "v=(.*)"})
    assert config.language_config_for(Path("a.vue")) == "x=(.*)"
    assert config.language_config_for(Path("a.tsx")) == "x=(.*)"


def test_sort_options_merge_order() -> None:
    config = TailsortConfig(remove_duplicates=False, custom_prefix="tw-")

    assert config.sort_options() == SortOptions(remove_duplicates=False, prepend_custom=False, custom_prefix="tw-")
    assert config.sort_options(prepend_custom=True, custom_prefix="x-") == SortOptions(
        remove_duplicates=False, prepend_custom=True, custom_prefix="x-"
    )
    assert TailsortConfig().sort_options() == SortOptions()


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        json.dumps({"sortOrder": "flex"}),
        json.dumps({"removeDuplicates": "yes"}),
        json.dumps({"languages": []}),
    ],
)
def test_invalid_config_files(tmp_path: Path, content: str) -> None:
    path = tmp_path / "tailsort.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config_file(path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config_file(tmp_path / "missing.json")
