"""Command line interface entry point."""

from __future__ import annotations

import dataclasses
import logging
import sys

import click

from mold_cli.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    GeneratorSettings,
    load_configuration,
    write_placeholder_configuration,
)
from mold_cli.generators import OutputFormat
from mold_cli.output_writing import render_console_output
from mold_cli.run_execution import RunExecutionError, RunRequest, execute_generation_run

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_VERBOSE_HANDLER_NAME = "mold-cli-verbose"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="mold-cli")
def cli() -> None:
    """JSON to TypeScript/Zod/Prisma generator."""


@cli.command(name="generate")
@click.argument("file", type=click.Path(path_type=str))
@click.option("-t", "--ts", "ts", is_flag=True, help="Generate TypeScript interfaces")
@click.option("-z", "--zod", "zod", is_flag=True, help="Generate Zod schema")
@click.option("-p", "--prisma", "prisma", is_flag=True, help="Generate Prisma model")
@click.option("-a", "--all", "all_formats", is_flag=True, help="Generate all formats")
@click.option(
    "-o",
    "--output",
    "output_dir",
    required=False,
    type=click.Path(file_okay=False, path_type=str),
    help="Output directory (default: stdout)",
)
@click.option(
    "-n",
    "--name",
    "name",
    required=False,
    help="Root type name (default: inferred from filename)",
)
@click.option(
    "--flat", is_flag=True, default=False, help="Keep nested objects inline (no extraction)"
)
@click.option(
    "--export", "ts_export", is_flag=True, help="Add 'export' keyword to TypeScript interfaces"
)
@click.option(
    "--readonly", "ts_readonly", is_flag=True, help="Add 'readonly' modifier to TypeScript fields"
)
@click.option("--strict", "zod_strict", is_flag=True, help="Use .strict() for Zod object schemas")
@click.option(
    "--relations/--no-relations",
    "relations",
    default=None,
    help="Render nested objects as Prisma relations (default) or Json columns",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=str),
    help="Path to a YAML generator configuration file",
)
@click.option(
    "-v", "--verbose", is_flag=True, default=False, help="Log inference details to stderr"
)
# pylint: disable=too-many-arguments
def generate(
    file: str,
    ts: bool,
    zod: bool,
    prisma: bool,
    all_formats: bool,
    output_dir: str | None,
    name: str | None,
    flat: bool,
    ts_export: bool,
    ts_readonly: bool,
    zod_strict: bool,
    relations: bool | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Generate TypeScript, Zod and/or Prisma definitions from a JSON file."""
    _configure_logging(verbose)
    formats = _selected_formats(ts=ts, zod=zod, prisma=prisma, all_formats=all_formats)
    try:
        base_settings = load_configuration(config_path) if config_path else GeneratorSettings()
    except ConfigurationError as exc:
        raise CliError(str(exc)) from exc

    settings = dataclasses.replace(
        base_settings,
        flat_mode=base_settings.flat_mode or flat,
        ts_export_interfaces=base_settings.ts_export_interfaces or ts_export,
        ts_readonly_fields=base_settings.ts_readonly_fields or ts_readonly,
        zod_strict_objects=base_settings.zod_strict_objects or zod_strict,
        prisma_generate_relations=(
            base_settings.prisma_generate_relations if relations is None else relations
        ),
    )

    try:
        outcome = execute_generation_run(
            RunRequest(
                input_path=file,
                formats=formats,
                output_dir=output_dir,
                name=name,
                settings=settings,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc

    if outcome.written:
        check = click.style("✓", fg="green", bold=True)
        for written in outcome.written:
            click.echo(f"{check} {written.label} → {written.path}")
        return
    click.echo(render_console_output(outcome.outputs, styled=True), nl=False)


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


def _selected_formats(
    *, ts: bool, zod: bool, prisma: bool, all_formats: bool
) -> frozenset[OutputFormat]:
    if all_formats:
        return frozenset(OutputFormat)
    selected = {
        OutputFormat.TYPESCRIPT: ts,
        OutputFormat.ZOD: zod,
        OutputFormat.PRISMA: prisma,
    }
    return frozenset(output_format for output_format, enabled in selected.items() if enabled)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    package_logger = logging.getLogger("mold_cli")
    package_logger.setLevel(logging.DEBUG)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _VERBOSE_HANDLER_NAME:
            package_logger.removeHandler(existing)
    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_VERBOSE_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.addHandler(handler)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), prog_name="mold", standalone_mode=False)
    except CliError as exc:
        click.echo(f"{click.style('Error:', fg='red', bold=True)} {exc}", err=True)
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
