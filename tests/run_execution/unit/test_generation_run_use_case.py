"""Tests for the generation run use-case service."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from mold_cli.configuration.runtime_settings import GeneratorSettings
from mold_cli.generators import OutputFormat
from mold_cli.run_execution import (
    NoOutputFormatError,
    RunExecutionError,
    RunRequest,
    execute_generation_run,
    generate_outputs,
)
from mold_cli.type_model import ObjectType, Schema


def _write_input(tmp_path: Path, payload: object, name: str = "user.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_run_generates_requested_formats_in_fixed_order(tmp_path: Path) -> None:
    input_path = _write_input(tmp_path, {"id": 1, "address": {"city": "Berlin"}})

    outcome = execute_generation_run(
        RunRequest(
            input_path=str(input_path),
            formats=frozenset({OutputFormat.PRISMA, OutputFormat.TYPESCRIPT}),
        )
    )

    assert outcome.schema.name == "User"
    assert [output.label for output in outcome.outputs] == ["TypeScript", "Prisma"]
    assert outcome.written == ()
    assert "interface UserAddress {" in outcome.outputs[0].content
    assert "model UserAddress {" in outcome.outputs[1].content


def test_run_writes_files_named_after_input_stem(tmp_path: Path) -> None:
    input_path = _write_input(tmp_path, {"id": 1}, name="order-item.json")
    output_dir = tmp_path / "out"

    outcome = execute_generation_run(
        RunRequest(
            input_path=str(input_path),
            formats=frozenset(OutputFormat),
            output_dir=str(output_dir),
            name="line_item",
        )
    )

    assert outcome.schema.name == "LineItem"
    assert [item.path.name for item in outcome.written] == [
        "order-item.ts",
        "order-item.zod.ts",
        "order-item.prisma",
    ]
    assert (output_dir / "order-item.prisma").read_text(encoding="utf-8") == (
        "model LineItem {\n  id Int\n}\n"
    )


def test_run_applies_settings(tmp_path: Path) -> None:
    input_path = _write_input(tmp_path, {"user": {"name": "Ada"}})

    outcome = execute_generation_run(
        RunRequest(
            input_path=str(input_path),
            formats=frozenset({OutputFormat.TYPESCRIPT}),
            settings=GeneratorSettings(flat_mode=True, ts_export_interfaces=True),
        )
    )

    assert outcome.schema.nested_types == ()
    assert outcome.outputs[0].content.startswith("export interface User {\n  user: {\n")


def test_run_without_formats_fails(tmp_path: Path) -> None:
    input_path = _write_input(tmp_path, {"id": 1})

    with pytest.raises(NoOutputFormatError, match="No output format specified"):
        execute_generation_run(RunRequest(input_path=str(input_path), formats=frozenset()))


def test_run_reports_missing_input(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"

    with pytest.raises(RunExecutionError, match="Cannot find file"):
        execute_generation_run(
            RunRequest(input_path=str(missing), formats=frozenset({OutputFormat.ZOD}))
        )


def test_run_reports_parse_failures(tmp_path: Path) -> None:
    input_path = tmp_path / "broken.json"
    input_path.write_text("{not json", encoding="utf-8")

    with pytest.raises(RunExecutionError, match="Failed to parse .*Invalid JSON"):
        execute_generation_run(
            RunRequest(input_path=str(input_path), formats=frozenset({OutputFormat.ZOD}))
        )


def test_run_reports_non_object_root(tmp_path: Path) -> None:
    input_path = _write_input(tmp_path, [1, 2, 3])

    with pytest.raises(RunExecutionError, match="Root must be an object, got \\[1, 2, 3\\]"):
        execute_generation_run(
            RunRequest(input_path=str(input_path), formats=frozenset({OutputFormat.ZOD}))
        )


def test_generate_outputs_uses_generator_extensions() -> None:
    schema = Schema(name="Empty", root_type=ObjectType())

    outputs = generate_outputs(schema, list(OutputFormat), GeneratorSettings())

    assert [output.extension for output in outputs] == ["ts", "zod.ts", "prisma"]
    assert outputs[0].content == "interface Empty {\n}\n"
    assert outputs[2].content == "model Empty {\n}\n"
