from kubeval.cli import _build_parser
from kubeval.config import Settings, env_default
from kubeval.engine import DEFAULT_SCHEMA_LOCATION, EngineConfig


def test_env_default_uses_prefix_and_ignores_empty():
    assert env_default("filename", "stdin", {"KUBEVAL_FILENAME": "x.yaml"}) == "x.yaml"
    assert env_default("filename", "stdin", {"KUBEVAL_FILENAME": ""}) == "stdin"
    assert env_default("filename", "stdin", {}) == "stdin"


def test_flags_override_environment():
    parser = _build_parser({"KUBEVAL_SCHEMA_LOCATION": "/from/env"})
    args = parser.parse_args(["--schema-location", "/from/flag", "a.yaml"])
    assert Settings.from_args(args).schema_location == "/from/flag"
    assert Settings.from_args(parser.parse_args(["a.yaml"])).schema_location == "/from/env"


def test_settings_build_engine_config():
    args = _build_parser({}).parse_args(["-v", "1.9.0", "--strict", "--openshift", "-c", "a.yaml"])
    s = Settings.from_args(args)
    assert s.files == ("a.yaml",) and s.continue_on_error is True
    assert s.engine_config() == EngineConfig(
        kubernetes_version="1.9.0",
        schema_location=DEFAULT_SCHEMA_LOCATION,
        openshift=True,
        strict=True,
    )
