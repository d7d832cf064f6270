"""Tests for run execution domain entities."""

from __future__ import annotations

from pathlib import Path

from mold_cli.configuration.runtime_settings import GeneratorSettings
from mold_cli.generators import OutputFormat
from mold_cli.output_writing import GeneratedOutput, WrittenOutput
from mold_cli.run_execution.run_contracts import RunOutcome, RunRequest
from mold_cli.type_model import ObjectType, Schema


def test_run_request_defaults_to_stdout_and_default_settings() -> None:
    request = RunRequest(input_path="user.json", formats=frozenset({OutputFormat.ZOD}))

    assert request.output_dir is None
    assert request.name is None
    assert request.settings == GeneratorSettings()


def test_run_outcome_groups_schema_outputs_and_written_files() -> None:
    outcome = RunOutcome(
        schema=Schema(name="User", root_type=ObjectType()),
        outputs=(GeneratedOutput(label="Prisma", content="model User {\n}\n", extension="prisma"),),
        written=(WrittenOutput(label="Prisma", path=Path("/tmp/user.prisma")),),
    )

    assert outcome.schema.name == "User"
    assert outcome.outputs[0].extension == "prisma"
    assert outcome.written[0].path.name == "user.prisma"
