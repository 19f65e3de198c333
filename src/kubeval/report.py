# src/kubeval/report.py
"""Renderização dos resultados em linhas de diagnóstico (não altera o veredito)."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .log import SUCCESS
from .models import SchemaError, ValidationResult

logger = logging.getLogger(__name__)


def format_error(desc: SchemaError) -> str:
    """`* Field <contexto>[.<property>]: <descrição>`."""
    prop = desc.details.get("property")
    if isinstance(prop, str):
        return f"* Field {desc.context}.{prop}: {desc.description}"
    return f"* Field {desc.context}: {desc.description}"


def render_result(result: ValidationResult) -> list[tuple[int, str]]:
    """Linhas (nível, mensagem) para um resultado."""
    if result.valid:
        return [(SUCCESS, f"The document {result.file_name} contains a valid {result.kind}")]
    lines = [
        (
            logging.WARNING,
            f'The document {result.file_name} contains an invalid kind "{result.kind}":',
        )
    ]
    lines.extend((logging.INFO, format_error(desc)) for desc in result.errors)
    return lines


def report_results(results: Iterable[ValidationResult], log: logging.Logger | None = None) -> None:
    log = log or logger
    for result in results:
        for level, msg in render_result(result):
            log.log(level, msg)
