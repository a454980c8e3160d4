#!/usr/bin/env python3

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from ts_model_codegen.ts_model_codegen import ts_model_codegen

SCHEMAS = Path(__file__).parent / "test_data" / "schemas"


@pytest.fixture
def runner():
    return CliRunner()


def test_generates_files(runner, tmp_path):
    result = runner.invoke(ts_model_codegen, [str(SCHEMAS / "user_schema.json"), str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "ts-model" / "enum" / "Status.ts").exists()
    assert (tmp_path / "ts-model" / "table" / "Role.ts").exists()
    user = (tmp_path / "ts-model" / "table" / "User.ts").read_text()
    assert "export class User {" in user
    assert "  otm_role!: Role" in user
    assert "  role!: number" in user
    assert "  created_at?: Date" in user


def test_no_annotations_flag(runner, tmp_path):
    result = runner.invoke(ts_model_codegen, [str(SCHEMAS / "user_schema.json"), str(tmp_path), "--no-annotations"])

    assert result.exit_code == 0, result.output
    user = (tmp_path / "ts-model" / "table" / "User.ts").read_text()
    assert "export interface User {" in user
    assert "  id: number" in user
    assert "  status?: Status" in user


def test_config_file(runner, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"annotation_mode": "off", "output_root": "models"}))
    out = tmp_path / "out"

    result = runner.invoke(ts_model_codegen, [str(SCHEMAS / "user_schema.json"), str(out), "--config", str(config)])

    assert result.exit_code == 0, result.output
    assert "export interface User {" in (out / "models" / "table" / "User.ts").read_text()


def test_flag_overrides_config_file(runner, tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"annotation_mode": "off"}))
    out = tmp_path / "out"

    result = runner.invoke(ts_model_codegen, [str(SCHEMAS / "user_schema.json"), str(out), "-c", str(config), "--annotations"])

    assert result.exit_code == 0, result.output
    assert "export class User {" in (out / "ts-model" / "table" / "User.ts").read_text()


def test_missing_output_argument(runner):
    result = runner.invoke(ts_model_codegen, [str(SCHEMAS / "user_schema.json")])
    assert result.exit_code == 2
    assert "Missing argument" in result.output


def test_missing_all_arguments(runner):
    result = runner.invoke(ts_model_codegen, [])
    assert result.exit_code == 2


def test_unresolved_reference_writes_nothing(runner, tmp_path):
    out = tmp_path / "out"
    result = runner.invoke(ts_model_codegen, [str(SCHEMAS / "broken_schema.json"), str(out)])

    assert result.exit_code == 1
    assert '"X"' in result.output
    assert '"status"' in result.output
    assert not out.exists()


def test_missing_input_file(runner, tmp_path):
    result = runner.invoke(ts_model_codegen, [str(tmp_path / "nope.json"), str(tmp_path / "out")])
    assert result.exit_code == 1
    assert "Cannot read schema file" in result.output


@pytest.mark.parametrize(
    "content, message",
    [
        ("{not json", "Invalid config file"),
        ('{"annotation_mode": "sometimes"}', "'sometimes' is not a valid AnnotationMode"),
        ('{"output": {"mode": "append"}}', "'append' is not a valid OutputMode"),
    ],
)
def test_malformed_config_file(runner, tmp_path, content, message):
    config = tmp_path / "config.json"
    config.write_text(content)
    out = tmp_path / "out"

    result = runner.invoke(ts_model_codegen, [str(SCHEMAS / "user_schema.json"), str(out), "-c", str(config)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error: Invalid config file" in result.output
    assert message in result.output
    assert not out.exists()
