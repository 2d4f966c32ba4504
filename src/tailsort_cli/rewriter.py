from __future__ import annotations

import dataclasses
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from .matchers import build_matchers, collect_matches
from .ordering import BaseOrderProvider, StaticOrderProvider
from .spans import apply_replacements, select_matches
from .types import ClassMatch, LangConfig, SortOptions, SpanReplacement

logger = logging.getLogger(__name__)

IGNORE_ALL_MARKER = "headwind-ignore-all"
IGNORE_MARKER = "headwind-ignore"


class RewriteError(RuntimeError):
    pass


@dataclass
class ProcessingReport:
    path: str
    matches_found: int
    replacements_applied: int
    ignored: int
    changed: bool

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.path,
            "matches_found": self.matches_found,
            "replacements_applied": self.replacements_applied,
            "ignored": self.ignored,
            "changed": self.changed,
        }


@dataclass
class RewriteResult:
    text: str
    matches_found: int = 0
    replacements_applied: int = 0
    ignored: int = 0
    skipped_document: bool = False

    @property
    def changed(self) -> bool:
        return self.replacements_applied > 0


def rewrite_text(
    text: str,
    lang_config: LangConfig,
    options: SortOptions,
    provider: BaseOrderProvider | None = None,
    *,
    ignore_all_marker: str = IGNORE_ALL_MARKER,
    ignore_marker: str = IGNORE_MARKER,
) -> str:
    """Sort every class string found in ``text`` and return the new text.

    The result is identical to the input when nothing needed sorting.
    """
    return rewrite_document(
        text,
        lang_config,
        options,
        provider,
        ignore_all_marker=ignore_all_marker,
        ignore_marker=ignore_marker,
    ).text


def rewrite_document(
    text: str,
    lang_config: LangConfig,
    options: SortOptions,
    provider: BaseOrderProvider | None = None,
    *,
    ignore_all_marker: str = IGNORE_ALL_MARKER,
    ignore_marker: str = IGNORE_MARKER,
) -> RewriteResult:
    if ignore_all_marker and ignore_all_marker in text:
        logger.debug("document carries %r, skipping", ignore_all_marker)
        return RewriteResult(text=text, skipped_document=True)

    matchers = build_matchers(lang_config)
    matches, ignored = collect_matches(matchers, text, ignore_marker)
    if not matches:
        return RewriteResult(text=text, ignored=ignored)

    order_provider = provider or StaticOrderProvider()

    selected = select_matches(matches)
    replacements: list[SpanReplacement] = []
    for match in selected:
        sorted_classes = order_provider.sort(match.text, _options_for(match, options))
        if sorted_classes != match.text:
            replacements.append(
                SpanReplacement(start=match.start, end=match.end, replacement=sorted_classes)
            )

    result, applied = apply_replacements(text, replacements)
    logger.debug("sorted %d of %d class strings", applied, len(selected))

    return RewriteResult(
        text=result,
        matches_found=len(selected),
        replacements_applied=applied,
        ignored=ignored,
    )


def rewrite_file(
    path: Path,
    lang_config: LangConfig,
    options: SortOptions,
    provider: BaseOrderProvider | None = None,
    *,
    dry_run: bool = False,
    ignore_all_marker: str = IGNORE_ALL_MARKER,
    ignore_marker: str = IGNORE_MARKER,
) -> ProcessingReport:
    try:
        with path.open(encoding="utf-8", newline="") as handle:
            content = handle.read()
    except UnicodeDecodeError as exc:
        raise RewriteError(f"File is not valid UTF-8: {path}") from exc

    result = rewrite_document(
        content,
        lang_config,
        options,
        provider,
        ignore_all_marker=ignore_all_marker,
        ignore_marker=ignore_marker,
    )

    changed = result.text != content
    if changed and not dry_run:
        with path.open("w", encoding="utf-8", newline="") as handle:
            handle.write(result.text)
        logger.info("rewrote %s", path)

    return ProcessingReport(
        path=str(path),
        matches_found=result.matches_found,
        replacements_applied=result.replacements_applied,
        ignored=result.ignored,
        changed=changed,
    )


def write_report(report_path: Path, reports: list[ProcessingReport]) -> None:
    report_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {
        "files": [report.to_dict() for report in reports],
        "changed": sum(1 for report in reports if report.changed),
    }
    report_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def _options_for(match: ClassMatch, options: SortOptions) -> SortOptions:
    matcher = match.matcher
    if matcher.separator is None and matcher.replacement is None:
        return options
    return dataclasses.replace(
        options,
        separator=matcher.separator or options.separator,
        replacement=matcher.replacement or options.replacement,
    )
