"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from ui_test_gen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    GeneratorSettings,
    load_settings,
    write_placeholder_configuration,
)
from ui_test_gen.csv_ingestion import MalformedInputError
from ui_test_gen.template_generation import generate_template_workbook
from ui_test_gen.template_ingestion import TemplateValidationError, read_workbook_as_csv_text
from ui_test_gen.tool_invocation import (
    CSV_DATA_ARGUMENT,
    GENERATE_VISUAL_TESTS,
    LIST_COMMANDS,
    LIST_TOOLS,
    MissingArgumentError,
    invoke,
)

_WORKBOOK_SUFFIXES = {".xlsx", ".xlsm"}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="ui-test-gen")
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Verbosity of diagnostics written to stderr.",
)
def cli(log_level: str) -> None:
    """Playwright visual test generator utility."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@cli.command(name="generate")
@click.option(
    "--input",
    "input_path",
    required=False,
    type=click.Path(path_type=str),
    help="CSV file or test-case workbook (.xlsx); reads CSV from stdin when omitted",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON generator configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="File to write the generated text to; prints to stdout when omitted",
)
def generate(input_path: str | None, config_path: str | None, output_path: str | None) -> None:
    """Generate visual test instructions and code from test-case rows."""
    try:
        settings = load_settings(config_path)
        csv_data = _read_input(input_path)
        if _is_workbook(input_path):
            settings = _with_quoted_split(settings)
        result = invoke(GENERATE_VISUAL_TESTS, {CSV_DATA_ARGUMENT: csv_data}, settings=settings)
    except (
        ConfigurationError,
        TemplateValidationError,
        MissingArgumentError,
        MalformedInputError,
        OSError,
    ) as exc:
        raise CliError(str(exc)) from exc
    _emit(result["content"][0]["text"], output_path)


@cli.command(name="generate-template")
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the test-case template workbook to write",
)
@click.option(
    "--no-samples",
    is_flag=True,
    default=False,
    help="Write only the column headers, without sample rows.",
)
def generate_template(output_path: str, no_samples: bool) -> None:
    """Generate a test-case template workbook with the recognized columns."""
    try:
        generate_template_workbook(output_path, include_samples=not no_samples)
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(Path(output_path).resolve()))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML generator configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML generator configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="list-tools")
def list_tools() -> None:
    """List the available generator operations."""
    click.echo(invoke(LIST_TOOLS)["content"][0]["text"])


@cli.command(name="list-commands")
def list_commands() -> None:
    """List Playwright commands for running generated visual tests."""
    click.echo(invoke(LIST_COMMANDS)["content"][0]["text"])


def _read_input(input_path: str | None) -> str:
    if input_path is None:
        return click.get_text_stream("stdin").read()
    path = Path(input_path)
    if _is_workbook(input_path):
        return read_workbook_as_csv_text(path)
    if not path.exists():
        raise CliError(f"Input file not found: {path}")
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as exc:
        raise CliError(f"Input file is not valid UTF-8 text: {path} ({exc.reason})") from exc


def _is_workbook(input_path: str | None) -> bool:
    return input_path is not None and Path(input_path).suffix.lower() in _WORKBOOK_SUFFIXES


def _with_quoted_split(settings: GeneratorSettings) -> GeneratorSettings:
    # Workbook rows are serialized with csv.writer, which quotes comma-bearing cells.
    return replace(settings, csv=replace(settings.csv, split_mode="quoted"))


def _emit(text: str, output_path: str | None) -> None:
    if output_path is None:
        click.echo(text)
        return
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(destination.resolve()))


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
