"""
Functional tests driven by the JSON cases in test_data/functional.

Each case holds an item list, an optional config, and either the file to
inspect with expected (or unexpected) patterns, or the error compilation
must fail with.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from ts_model_codegen.pipeline import CodeGeneratorConfig, PipelineGenerator
from ts_model_codegen.pipeline import errors
from ts_model_codegen.pipeline.schema_ast import SchemaLoader


def load_all_test_cases():
    """Load all test cases from all JSON files in test_data/functional directory."""
    functional_dir = Path(__file__).parent / "test_data" / "functional"
    test_cases = []

    for json_file in sorted(functional_dir.glob("*_tests.json")):
        with open(json_file) as f:
            data = json.load(f)

        for test_case in data:
            test_case["_source_file"] = json_file.name
            test_cases.append(test_case)

    return test_cases


def _compile(test_case):
    config = CodeGeneratorConfig.from_dict(test_case.get("config", {}))
    items = SchemaLoader().parse(test_case["items"])
    return PipelineGenerator(config).compile(items)


@pytest.mark.parametrize("test_case", load_all_test_cases(), ids=lambda case: case["name"])
def test_functional_generation(test_case):
    """Unified test for all JSON test cases using a single pattern."""
    if "expected_error" in test_case:
        error_class = getattr(errors, test_case["expected_error"])
        with pytest.raises(error_class) as exc_info:
            _compile(test_case)
        for pattern in test_case.get("expected_message", []):
            assert pattern in str(exc_info.value), f"Expected '{pattern}' in error message"
        return

    output = _compile(test_case)
    files = {f.filename: f.content for f in output.all_files()}
    assert test_case["file"] in files, f"{test_case['file']} not generated (got {sorted(files)})"
    generated_code = files[test_case["file"]]

    for pattern in test_case.get("expected_contains", []):
        assert pattern in generated_code, f"Expected pattern '{pattern}' not found in output"

    for pattern in test_case.get("expected_not_contains", []):
        assert pattern not in generated_code, f"Unexpected pattern '{pattern}' found in output"


if __name__ == "__main__":
    pytest.main([__file__])
