# src/kubeval/engine.py
"""Engine de validação: YAML (multi-documento) -> schema Kubernetes/OpenShift -> jsonschema.

O orquestrador só conhece o protocolo `ValidationEngine`; os testes usam dublês.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol
from urllib.parse import urlparse

import requests
import yaml
from jsonschema import Draft4Validator
from jsonschema.validators import validator_for

from .errors import AggregatedError, InvocationError
from .models import SchemaError, ValidationResult

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_LOCATION = "https://raw.githubusercontent.com/garethr"
DEFAULT_KUBERNETES_VERSION = "master"
SCHEMA_FETCH_TIMEOUT_S = 30.0


class ValidationEngine(Protocol):
    def validate(self, content: bytes, display_name: str) -> list[ValidationResult]:
        """Retorna os resultados do input ou levanta `InvocationError`."""
        ...


@dataclass(frozen=True)
class EngineConfig:
    kubernetes_version: str = DEFAULT_KUBERNETES_VERSION
    schema_location: str = DEFAULT_SCHEMA_LOCATION
    openshift: bool = False
    strict: bool = False


def split_documents(content: bytes) -> list[bytes]:
    """Separa um stream YAML em documentos por `<lb>---<lb>` (lb = CRLF se presente)."""
    lb = b"\r\n" if b"\r\n" in content else b"\n"
    return content.split(lb + b"---" + lb)


def schema_url(kind: str, config: EngineConfig) -> str:
    """Monta a URL do schema standalone para um `kind`."""
    version = config.kubernetes_version
    if version != "master":
        version = f"v{version}"
    schema_type = "openshift" if config.openshift else "kubernetes"
    strict = "-strict" if config.strict else ""
    base = config.schema_location.rstrip("/")
    return f"{base}/{schema_type}-json-schema/{version}-standalone{strict}/{kind.lower()}.json"


def _load_schema(url: str) -> dict[str, Any]:
    """Carrega o schema de http(s), file:// ou caminho local (sem cache nem retry)."""
    scheme = urlparse(url).scheme
    try:
        if scheme in ("http", "https"):
            resp = requests.get(url, timeout=SCHEMA_FETCH_TIMEOUT_S)
            resp.raise_for_status()
            return resp.json()
        path = Path(urlparse(url).path) if scheme == "file" else Path(url)
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (requests.RequestException, OSError, ValueError) as ex:
        raise InvocationError(f"Problem loading schema from the network at {url}: {ex}") from ex


def _stringify_keys(obj: Any) -> Any:
    """Chaves YAML não-string (ex.: inteiros) viram string, como no JSON."""
    if isinstance(obj, dict):
        return {str(k): _stringify_keys(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_stringify_keys(v) for v in obj]
    return obj


class _ManifestLoader(yaml.SafeLoader):
    """SafeLoader que mantém timestamps como texto (como no JSON do manifest)."""


_ManifestLoader.add_constructor("tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str)


_REQUIRED_RE = re.compile(r"^'(?P<prop>[^']*)' is a required property$")


def _to_schema_error(err) -> SchemaError:
    """Converte um `jsonschema.ValidationError` no descritor do projeto."""
    context = ".".join(str(p) for p in err.absolute_path) or "(root)"
    details: dict[str, Any] = {}
    if err.validator == "required":
        m = _REQUIRED_RE.match(err.message)
        if m:
            details["property"] = m.group("prop")
    return SchemaError(context=context, description=err.message, details=details)


class KubernetesSchemaEngine:
    """Engine de produção. Cada chamada a `validate` é independente (sem estado)."""

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or EngineConfig()

    def validate(self, content: bytes, display_name: str) -> list[ValidationResult]:
        if len(content) == 0:
            return [ValidationResult(file_name=display_name)]

        results: list[ValidationResult] = []
        errs = AggregatedError()
        for chunk in split_documents(content):
            if len(chunk) == 0:
                results.append(ValidationResult(file_name=display_name))
                continue
            try:
                results.append(self._validate_document(chunk, display_name))
            except InvocationError as ex:
                errs.append(ex)

        if len(errs) == 1:
            raise errs.errors[0]
        if errs:
            raise errs
        return results

    def _validate_document(self, data: bytes, display_name: str) -> ValidationResult:
        result = ValidationResult(file_name=display_name)
        try:
            body = yaml.load(data, Loader=_ManifestLoader)  # noqa: S506
        except yaml.YAMLError as ex:
            raise InvocationError(f"Failed to decode YAML from {display_name}") from ex

        if not isinstance(body, dict) or len(body) == 0:
            return result
        body = _stringify_keys(body)

        kind = body.get("kind")
        if kind is None:
            raise InvocationError("Missing a kind key")
        result.kind = str(kind)
        if body.get("apiVersion") is None:
            raise InvocationError("Missing a apiVersion key")

        url = schema_url(result.kind, self.config)
        logger.debug("Schema para %s (%s): %s", display_name, result.kind, url)
        schema = _load_schema(url)

        cls = validator_for(schema, default=Draft4Validator)
        validator = cls(schema)
        errors = sorted(validator.iter_errors(body), key=lambda e: list(map(str, e.absolute_path)))
        result.errors = [_to_schema_error(e) for e in errors]
        return result
