# tests/test_report.py
import logging

from kubeval.log import SUCCESS
from kubeval.models import SchemaError, ValidationResult
from kubeval.report import format_error, render_result, report_results


def test_valid_result_renders_single_success_line():
    lines = render_result(ValidationResult("good.yaml", "Deployment"))
    assert lines == [(SUCCESS, "The document good.yaml contains a valid Deployment")]


def test_invalid_result_renders_header_and_one_line_per_error():
    res = ValidationResult(
        "bad.yaml",
        "Deployment",
        errors=[
            SchemaError("spec.replicas", "Invalid type. Expected: integer, given: string"),
            SchemaError("metadata", "'name' is a required property", {"property": "name"}),
        ],
    )
    assert render_result(res) == [
        (logging.WARNING, 'The document bad.yaml contains an invalid kind "Deployment":'),
        (logging.INFO, "* Field spec.replicas: Invalid type. Expected: integer, given: string"),
        (logging.INFO, "* Field metadata.name: 'name' is a required property"),
    ]


def test_non_string_property_detail_is_ignored():
    desc = SchemaError("spec", "boom", {"property": 3})
    assert format_error(desc) == "* Field spec: boom"


def test_report_results_does_not_touch_results(caplog):
    caplog.set_level(logging.INFO)
    res = ValidationResult("bad.yaml", "Pod", errors=[SchemaError("(root)", "x")])
    report_results([res])
    assert res.errors == [SchemaError("(root)", "x")]
    assert [r.levelno for r in caplog.records] == [logging.WARNING, logging.INFO]
