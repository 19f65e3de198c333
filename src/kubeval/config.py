# src/kubeval/config.py
"""Configuração do run: flags do CLI com defaults sobrescrevíveis por env (KUBEVAL_*)."""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .engine import DEFAULT_KUBERNETES_VERSION, DEFAULT_SCHEMA_LOCATION, EngineConfig
from .sources import DEFAULT_STDIN_NAME

ENV_PREFIX = "KUBEVAL_"


def env_default(name: str, default: str, env: Mapping[str, str] | None = None) -> str:
    """Valor de `KUBEVAL_<NAME>` se definido (e não vazio), senão `default`."""
    env = os.environ if env is None else env
    return env.get(ENV_PREFIX + name.upper()) or default


@dataclass(frozen=True)
class Settings:
    files: tuple[str, ...] = ()
    kubernetes_version: str = DEFAULT_KUBERNETES_VERSION
    schema_location: str = DEFAULT_SCHEMA_LOCATION
    continue_on_error: bool = False
    openshift: bool = False
    strict: bool = False
    filename: str = DEFAULT_STDIN_NAME
    log_level: str = "info"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Settings:
        return cls(
            files=tuple(args.files),
            kubernetes_version=str(args.kubernetes_version),
            schema_location=str(args.schema_location),
            continue_on_error=bool(args.continue_on_error),
            openshift=bool(args.openshift),
            strict=bool(args.strict),
            filename=str(args.filename),
            log_level=str(args.log_level),
        )

    def engine_config(self) -> EngineConfig:
        return EngineConfig(
            kubernetes_version=self.kubernetes_version,
            schema_location=self.schema_location,
            openshift=self.openshift,
            strict=self.strict,
        )
