# src/kubeval/errors.py
"""Hierarquia de erros: fatais (abortam o run) e de invocação (por input)."""

from __future__ import annotations

from collections.abc import Iterator


class FatalError(Exception):
    """Erro que encerra o run inteiro (sem input, arquivo ilegível, fail-fast)."""


class InvocationError(Exception):
    """O engine não conseguiu sequer validar o input (ex.: YAML inválido)."""


class AggregatedError(InvocationError):
    """Acumula erros de invocação de vários inputs (estilo multierror).

    `append` achata agregados aninhados: o relatório final lista cada erro
    subjacente individualmente.
    """

    def __init__(self, errors: list[InvocationError] | None = None) -> None:
        self.errors: list[InvocationError] = []
        for err in errors or []:
            self.append(err)
        super().__init__()

    def append(self, err: InvocationError) -> AggregatedError:
        if isinstance(err, AggregatedError):
            for sub in err.errors:
                self.append(sub)
        else:
            self.errors.append(err)
        return self

    def error_or_none(self) -> AggregatedError | None:
        return self if self.errors else None

    def __iter__(self) -> Iterator[InvocationError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)

    def __bool__(self) -> bool:
        # truthiness de exceções é sempre True; aqui queremos "vazio == nil"
        return bool(self.errors)

    def __str__(self) -> str:
        n = len(self.errors)
        if n == 0:
            return "no errors"
        head = "1 error occurred:" if n == 1 else f"{n} errors occurred:"
        return "\n".join([head] + [f"* {e}" for e in self.errors])
