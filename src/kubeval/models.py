# src/kubeval/models.py
"""Tipos de resultado de validação (um por documento) e descritores de violação."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SchemaError:
    """Uma violação de schema dentro de um documento já parseado."""

    context: str
    description: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Resultado de validar um documento.

    Sem erros => válido. `kind` fica vazio quando o engine não consegue determiná-lo.
    """

    file_name: str
    kind: str = ""
    errors: list[SchemaError] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors
