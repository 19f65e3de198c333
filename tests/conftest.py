# tests/conftest.py
import json
import os
from pathlib import Path

import pytest

from kubeval.errors import InvocationError
from kubeval.models import ValidationResult


class ScriptedEngine:
    """Dublê do engine: devolve respostas roteirizadas por nome e registra as chamadas."""

    def __init__(self, script: dict | None = None):
        self.script = script or {}
        self.calls: list[tuple[bytes, str]] = []

    def validate(self, content: bytes, display_name: str) -> list[ValidationResult]:
        self.calls.append((content, display_name))
        out = self.script.get(display_name)
        if out is None:
            return [ValidationResult(file_name=display_name, kind="Pod")]
        if isinstance(out, InvocationError):
            raise out
        return list(out)


@pytest.fixture
def scripted_engine():
    return ScriptedEngine


@pytest.fixture
def tty_stdin():
    """stdin "interativo": /dev/null é um char device, então o modo é o de arquivos."""
    with open(os.devnull, "rb") as f:
        yield f


@pytest.fixture
def piped_stdin(tmp_path: Path):
    """Fábrica de stdin redirecionado a partir de um arquivo regular."""
    handles = []

    def _make(content: bytes):
        p = tmp_path / f"stdin_{len(handles)}.txt"
        p.write_bytes(content)
        fh = p.open("rb")
        handles.append(fh)
        return fh

    yield _make
    for fh in handles:
        fh.close()


DEPLOYMENT_SCHEMA = {
    "type": "object",
    "required": ["apiVersion", "kind", "metadata"],
    "properties": {
        "apiVersion": {"type": "string"},
        "kind": {"type": "string"},
        "metadata": {
            "type": "object",
            "required": ["name"],
            "properties": {"name": {"type": "string"}},
        },
        "spec": {
            "type": "object",
            "properties": {"replicas": {"type": "integer"}},
        },
    },
}


@pytest.fixture
def schema_dir(tmp_path: Path) -> Path:
    """Árvore local de schemas no layout `<tipo>-json-schema/<versão>-standalone/<kind>.json`."""
    root = tmp_path / "schemas"
    for sub in ("kubernetes-json-schema/master-standalone", "kubernetes-json-schema/v1.8.0-standalone-strict"):
        d = root / sub
        d.mkdir(parents=True)
        (d / "deployment.json").write_text(json.dumps(DEPLOYMENT_SCHEMA), encoding="utf-8")
    return root
