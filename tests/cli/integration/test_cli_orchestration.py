"""CLI orchestration integration tests."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner
from openpyxl import Workbook
from ui_test_gen.cli import cli
from ui_test_gen.tool_invocation import COMMANDS_LISTING, OPERATIONS_LISTING

_CSV = (
    "file_name,test_url,test_description,test_selector,test_hide,test_action,test_env\n"
    "pdp,https://prep.example.com/p,Full Page,body,.modal,scroll down,prep\n"
    "pdp,https://int.example.com/p,Top Section,.top,,,int\n"
)


def test_generate_command_reads_csv_file_and_prints_text(tmp_path: Path) -> None:
    csv_path = tmp_path / "cases.csv"
    csv_path.write_text(_CSV, encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(cli, ["generate", "--input", str(csv_path)])

    assert result.exit_code == 0, result.output
    assert "CORE TEST SCRIPT TEMPLATE" in result.output
    assert "export class PdpPage {" in result.output
    assert '"prep": { baseUrl: "https://prep.example.com/p"' in result.output


def test_generate_command_reads_stdin_and_writes_output_file(tmp_path: Path) -> None:
    output_path = tmp_path / "out" / "instructions.md"
    runner = CliRunner()

    result = runner.invoke(cli, ["generate", "--output", str(output_path)], input=_CSV)

    assert result.exit_code == 0, result.output
    assert result.output.strip() == str(output_path.resolve())
    assert "TopSectionLocator" in output_path.read_text(encoding="utf-8")


def test_generate_command_applies_configuration(tmp_path: Path) -> None:
    config_path = tmp_path / "ui-test-gen.yaml"
    config_path.write_text(
        "composition:\n  include_locator_map: false\n  representative_rows: all\n",
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["generate", "--config", str(config_path)], input=_CSV)

    assert result.exit_code == 0, result.output
    assert "export class PdpPage {" not in result.output
    assert "Top Section - Visual testing" in result.output


def test_generate_template_then_generate_from_workbook(tmp_path: Path) -> None:
    workbook_path = tmp_path / "cases.xlsx"
    runner = CliRunner()

    template_result = runner.invoke(cli, ["generate-template", "--output", str(workbook_path)])
    generate_result = runner.invoke(cli, ["generate", "--input", str(workbook_path)])

    assert template_result.exit_code == 0, template_result.output
    assert workbook_path.exists()
    assert generate_result.exit_code == 0, generate_result.output
    assert "PdpFullPageLocator" in generate_result.output
    assert "hasText: /Add to cart/i" in generate_result.output


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    output_path = tmp_path / "ui-test-gen.yaml"
    runner = CliRunner()

    first = runner.invoke(cli, ["generate-config", "--output", str(output_path)])
    second = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert first.exit_code == 0
    assert output_path.exists()
    assert second.exit_code != 0


def test_listing_commands_print_fixed_text() -> None:
    runner = CliRunner()

    tools = runner.invoke(cli, ["list-tools"])
    commands = runner.invoke(cli, ["list-commands"])

    assert tools.output.strip() == OPERATIONS_LISTING.strip()
    assert commands.output.strip() == COMMANDS_LISTING.strip()


def test_generate_from_workbook_keeps_comma_separated_hide_selectors(tmp_path: Path) -> None:
    workbook = Workbook()
    sheet = workbook.active
    sheet.append(
        ["file_name", "test_url", "test_description", "test_selector", "test_hide", "test_action"]
    )
    sheet.append(["pdp", "https://x", "Full Page", "body", ".modal, #banner", "scroll"])
    workbook_path = tmp_path / "cases.xlsx"
    workbook.save(workbook_path)
    runner = CliRunner()

    result = runner.invoke(cli, ["generate", "--input", str(workbook_path)])

    assert result.exit_code == 0, result.output
    assert 'for (const selector of [".modal", "#banner"])' in result.output
    assert "// scroll" in result.output
