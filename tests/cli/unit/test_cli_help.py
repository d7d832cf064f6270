"""CLI smoke tests."""

from click.testing import CliRunner

from mold_cli.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate" in result.output
    assert "generate-config" in result.output


def test_generate_help_lists_format_flags() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["generate", "-h"])

    assert result.exit_code == 0
    for flag in ("--ts", "--zod", "--prisma", "--all", "--output", "--name", "--flat"):
        assert flag in result.output
    assert "--relations / --no-relations" in result.output
