from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import DEFAULT_LANGUAGE_CONFIGS, EXTENSION_LANGUAGES, ConfigError, TailsortConfig, load_config_file
from .matchers import MatcherConfigError
from .ordering import OrderingError, available_providers, build_provider, validate_command_provider
from .rewriter import IGNORE_ALL_MARKER, IGNORE_MARKER, ProcessingReport, RewriteError, rewrite_file, write_report

app = typer.Typer(help="Sort utility classes inside class attributes of source files.")
languages_app = typer.Typer(help="Inspect built-in language configs.")
providers_app = typer.Typer(help="Inspect class order providers.")
app.add_typer(languages_app, name="languages")
app.add_typer(providers_app, name="providers")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
    )


@app.command("sort")
def sort_command(
    files: list[Path] = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Files to process."),
    config_path: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="JSON config file with langConfig, languages, sortOrder and sorting options.",
    ),
    no_duplicates: bool = typer.Option(False, "--no-duplicates", help="Keep repeated classes instead of dropping them."),
    prepend_custom: bool = typer.Option(
        False,
        "--prepend-custom",
        help="Place classes missing from the sort order before the sorted ones.",
    ),
    prefix: Optional[str] = typer.Option(None, "--prefix", help='Custom utility prefix, e.g. "tw-".'),
    order_cmd: Optional[str] = typer.Option(
        None,
        "--order-cmd",
        envvar="TAILSORT_ORDER_CMD",
        help="Local command that reorders a JSON class payload. Overrides sortOrder.",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Only list files that would change."),
    report_path: Optional[Path] = typer.Option(None, "--report", help="Optional JSON processing report."),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging."),
) -> None:
    _configure_logging(verbose)

    try:
        config = load_config_file(config_path) if config_path is not None else TailsortConfig()
        options = config.sort_options(
            remove_duplicates=False if no_duplicates else None,
            prepend_custom=True if prepend_custom else None,
            custom_prefix=prefix,
        )
        command = order_cmd or config.order_command
        provider = build_provider(
            "command" if command else "static",
            order=config.sort_order,
            order_cmd=command,
        )

        reports: list[ProcessingReport] = []
        for path in files:
            reports.append(
                rewrite_file(
                    path,
                    config.language_config_for(path),
                    options,
                    provider,
                    dry_run=dry_run,
                    ignore_all_marker=config.ignore_all_marker or IGNORE_ALL_MARKER,
                    ignore_marker=config.ignore_marker or IGNORE_MARKER,
                )
            )
    except (ConfigError, MatcherConfigError, OrderingError, RewriteError, OSError, ValueError) as exc:
        typer.echo(f"Sorting failed: {exc}", err=True)
        raise typer.Exit(1)

    if report_path is not None:
        write_report(report_path, reports)

    changed = [report for report in reports if report.changed]
    for report in changed:
        typer.echo(f"{'Would sort' if dry_run else 'Sorted'}: {report.path}")
    typer.echo(
        "Summary: "
        f"files={len(reports)}, "
        f"changed={len(changed)}, "
        f"class_strings={sum(report.matches_found for report in reports)}"
    )

    if dry_run and changed:
        raise typer.Exit(1)


@languages_app.command("list")
def list_languages() -> None:
    for language in DEFAULT_LANGUAGE_CONFIGS:
        extensions = sorted(ext for ext, name in EXTENSION_LANGUAGES.items() if name == language)
        typer.echo(f"{language}: {' '.join(extensions)}")


@providers_app.command("list")
def list_providers() -> None:
    for name in available_providers():
        typer.echo(name)


@providers_app.command("validate")
def validate_provider(
    order_cmd: Optional[str] = typer.Option(
        None,
        "--order-cmd",
        envvar="TAILSORT_ORDER_CMD",
        help="Order command to validate.",
    ),
) -> None:
    if not order_cmd:
        typer.echo("--order-cmd (or TAILSORT_ORDER_CMD) is required.", err=True)
        raise typer.Exit(1)
    try:
        ordered = validate_command_provider(order_cmd)
    except OrderingError as exc:
        typer.echo(f"order command validation failed: {exc}", err=True)
        raise typer.Exit(1)
    typer.echo(f"order command is available: {' '.join(ordered)}")


if __name__ == "__main__":
    app()
