import json
import shlex
import sys
from pathlib import Path

from typer.testing import CliRunner

from tailsort_cli.cli import app

runner = CliRunner()

ADAPTER = Path(__file__).resolve().parent.parent / "examples" / "order_adapter_example.py"


def test_sort_command_rewrites_file(tmp_path: Path) -> None:
    path = tmp_path / "index.html"
    path.write_text('<div class="p-4 flex container">x</div>', encoding="utf-8")

    result = runner.invoke(app, ["sort", str(path)])

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8") == '<div class="container flex p-4">x</div>'
    assert "Summary: files=1, changed=1" in result.output


def test_dry_run_reports_and_exits_nonzero(tmp_path: Path) -> None:
    path = tmp_path / "App.tsx"
    source = 'export const A = () => <div className="p-4 flex" />;'
    path.write_text(source, encoding="utf-8")

    result = runner.invoke(app, ["sort", "--dry-run", str(path)])

    assert result.exit_code == 1
    assert f"Would sort: {path}" in result.output
    assert path.read_text(encoding="utf-8") == source


def test_config_file_and_cli_options(tmp_path: Path) -> None:
    config_path = tmp_path / "tailsort.json"
    config_path.write_text(json.dumps({"sortOrder": ["flex", "p-4"]}), encoding="utf-8")
    path = tmp_path / "page.html"
    path.write_text('<div class="custom tw-p-4 tw-flex tw-flex">x</div>', encoding="utf-8")

    result = runner.invoke(
        app,
        ["sort", "--config", str(config_path), "--prefix", "tw-", "--no-duplicates", "--prepend-custom", str(path)],
    )

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8") == '<div class="custom tw-flex tw-flex tw-p-4">x</div>'


def test_order_command_option(tmp_path: Path) -> None:
    path = tmp_path / "page.html"
    path.write_text('<div class="p-4 custom flex">x</div>', encoding="utf-8")
    command = f"{shlex.quote(sys.executable)} {shlex.quote(str(ADAPTER))}"

    result = runner.invoke(app, ["sort", "--order-cmd", command, str(path)])

    assert result.exit_code == 0, result.output
    assert path.read_text(encoding="utf-8") == '<div class="flex p-4 custom">x</div>'


def test_report_option(tmp_path: Path) -> None:
    path = tmp_path / "page.html"
    path.write_text('<div class="flex p-4">x</div>', encoding="utf-8")
    report_path = tmp_path / "report.json"

    result = runner.invoke(app, ["sort", "--report", str(report_path), str(path)])

    assert result.exit_code == 0, result.output
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["changed"] == 0
    assert payload["files"][0]["matches_found"] == 1


def test_invalid_config_exits_with_error(tmp_path: Path) -> None:
    config_path = tmp_path / "tailsort.json"
    config_path.write_text("{broken", encoding="utf-8")
    path = tmp_path / "page.html"
    path.write_text('<div class="p-4 flex">x</div>', encoding="utf-8")

    result = runner.invoke(app, ["sort", "--config", str(config_path), str(path)])

    assert result.exit_code == 1
    assert "Sorting failed" in result.output


def test_invalid_regex_in_config_exits_with_error(tmp_path: Path) -> None:
    config_path = tmp_path / "tailsort.json"
    config_path.write_text(json.dumps({"langConfig": "class=\"([^\"]+\""}), encoding="utf-8")
    path = tmp_path / "page.html"
    path.write_text('<div class="p-4 flex">x</div>', encoding="utf-8")

    result = runner.invoke(app, ["sort", "--config", str(config_path), str(path)])

    assert result.exit_code == 1
    assert "Invalid regular expression" in result.output


def test_languages_and_providers_list() -> None:
    languages = runner.invoke(app, ["languages", "list"])
    assert languages.exit_code == 0
    assert "haml: .haml" in languages.output

    providers = runner.invoke(app, ["providers", "list"])
    assert providers.exit_code == 0
    assert providers.output.split() == ["static", "command"]


def test_providers_validate() -> None:
    command = f"{shlex.quote(sys.executable)} {shlex.quote(str(ADAPTER))}"

    ok = runner.invoke(app, ["providers", "validate", "--order-cmd", command])
    assert ok.exit_code == 0, ok.output
    assert "container flex p-4" in ok.output

    missing = runner.invoke(app, ["providers", "validate"], env={"TAILSORT_ORDER_CMD": ""})
    assert missing.exit_code == 1
