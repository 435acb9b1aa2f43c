"""
Conformance: Reference output - out.yaml fallback when no JSON is available
Suite reference: out.yaml reference files
"""
import pytest

from tests.conformance.runner import check_outcome, run_case


# Each test case is a tuple: (description, files, expected_outcome)
# expected_outcome is either "pass" or "fail: <text in failure message>"

CASES = [
    ("equivalent_block_form", {"in.yaml": "a: [1, 2]\n", "out.yaml": "a:\n- 1\n- 2\n"}, "pass"),
    ("quoted_scalar", {"in.yaml": "'x'\n", "out.yaml": "x\n"}, "pass"),
    ("explicit_document", {"in.yaml": "--- a\n", "out.yaml": "a\n"}, "pass"),
    ("mismatch", {"in.yaml": "a: 1\n", "out.yaml": "a: 2\n"}, "fail: Expected: {'a': 2}"),
    ("invalid_reference", {"in.yaml": "a: 1\n", "out.yaml": "a: [\n"},
     "fail: Failed to parse reference output"),
    ("json_preferred", {"in.yaml": "a: 1\n", "jsonToDartStr": '{"a": 1}', "out.yaml": "a: [\n"},
     "pass"),
    ("invalid_json_reference", {"in.yaml": "a: 1\n", "jsonToDartStr": "{a: 1}"},
     "fail: Failed to parse reference output"),
    ("input_does_not_parse", {"in.yaml": "a: [\n", "out.yaml": "a: []\n"}, "fail"),
]


@pytest.mark.parametrize("description,files,expected", CASES, ids=[c[0] for c in CASES])
def test_yaml_fallback(runner, matrix_root, description, files, expected):
    """The out.yaml reference is parsed with the parser under test."""
    result = run_case(runner, matrix_root, description, files)
    check_outcome(result, expected)
