# src/kubeval/orchestrator.py
"""Orquestrador: valida cada input em sequência, aplica a política de erro e agrega."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from .engine import ValidationEngine
from .errors import AggregatedError, FatalError, InvocationError
from .models import ValidationResult
from .report import report_results
from .sources import DocumentInput

logger = logging.getLogger(__name__)


@dataclass
class RunOutcome:
    """Resumo de um run: resultados, erros de invocação adiados e veredito."""

    results: list[ValidationResult] = field(default_factory=list)
    errors: AggregatedError = field(default_factory=AggregatedError)
    success: bool = True

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1


def compute_success(results: Iterable[ValidationResult]) -> bool:
    """Falso se qualquer documento tiver violações de schema."""
    return all(r.valid for r in results)


def validate_inputs(
    inputs: Iterable[DocumentInput],
    engine: ValidationEngine,
    *,
    continue_on_error: bool = False,
) -> RunOutcome:
    """Valida os inputs na ordem; fail-fast por padrão.

    Com `continue_on_error`, erros de invocação vão para `outcome.errors` e o
    loop segue. Esses erros não alteram `success` (só violações de schema).
    """
    outcome = RunOutcome()
    for doc in inputs:
        try:
            subs = engine.validate(doc.content, doc.name)
        except InvocationError as ex:
            if not continue_on_error:
                raise FatalError(str(ex)) from ex
            logger.debug("Erro de invocação em %s adiado: %s", doc.name, ex)
            outcome.errors.append(ex)
            continue
        outcome.results.extend(subs)

    outcome.success = compute_success(outcome.results)
    return outcome


def run(
    inputs: Iterable[DocumentInput],
    engine: ValidationEngine,
    *,
    continue_on_error: bool = False,
    stdin_mode: bool = False,
    log: logging.Logger | None = None,
) -> RunOutcome:
    """Executa o run completo: valida, reporta e loga o agregado de erros.

    Em modo stdin há um único input e a política é sempre fail-fast.
    """
    log = log or logger
    outcome = validate_inputs(
        inputs, engine, continue_on_error=continue_on_error and not stdin_mode
    )
    report_results(outcome.results, log)
    err = outcome.errors.error_or_none()
    if err is not None:
        log.error("%s", err)
    return outcome
