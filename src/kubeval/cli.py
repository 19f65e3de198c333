# src/kubeval/cli.py
"""CLI do kubeval: valida manifests Kubernetes (arquivos ou stdin) contra os schemas."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Mapping
from typing import IO

from .config import Settings, env_default
from .engine import (
    DEFAULT_KUBERNETES_VERSION,
    DEFAULT_SCHEMA_LOCATION,
    KubernetesSchemaEngine,
    ValidationEngine,
)
from .errors import FatalError
from .log import LOG_LEVELS, setup_logging
from .orchestrator import run
from .sources import DEFAULT_STDIN_NAME, resolve_inputs

__version__ = "0.1.0"

logger = logging.getLogger("kubeval")


def _build_parser(env: Mapping[str, str] | None = None) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="kubeval",
        usage="kubeval <file> [file...]",
        description="Validate a Kubernetes YAML file against the relevant schema",
    )
    p.add_argument("files", nargs="*", help="Manifests YAML a validar (ou use stdin)")
    p.add_argument(
        "-v",
        "--kubernetes-version",
        default=DEFAULT_KUBERNETES_VERSION,
        help="Version of Kubernetes to validate against",
    )
    p.add_argument(
        "--schema-location",
        default=env_default("schema_location", DEFAULT_SCHEMA_LOCATION, env),
        help=(
            "Base URL used to download schemas. Can also be specified with the "
            "environment variable KUBEVAL_SCHEMA_LOCATION"
        ),
    )
    p.add_argument(
        "-c",
        "--continue-on-error",
        action="store_true",
        help="Continue on errors and only report at the end",
    )
    p.add_argument(
        "--openshift", action="store_true", help="Use OpenShift schemas instead of upstream Kubernetes"
    )
    p.add_argument("--strict", action="store_true", help="Disallow additional properties not in schema")
    p.add_argument(
        "-f",
        "--filename",
        default=env_default("filename", DEFAULT_STDIN_NAME, env),
        help="filename to be displayed when testing manifests read from stdin",
    )
    p.add_argument("--log-level", choices=list(LOG_LEVELS), default="info")
    p.add_argument(
        "--version",
        action="version",
        version=f"kubeval {__version__}",
        help="Display the kubeval version information and exit",
    )
    return p


def main(
    argv: list[str] | None = None,
    *,
    stdin: IO | None = None,
    engine: ValidationEngine | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    """Entrypoint. Retorna o exit code (0 = todos os documentos válidos)."""
    args = _build_parser(env).parse_args(argv)
    settings = Settings.from_args(args)
    setup_logging(settings.log_level)

    stdin = sys.stdin if stdin is None else stdin
    engine = engine or KubernetesSchemaEngine(settings.engine_config())

    try:
        stdin_mode, inputs = resolve_inputs(settings.files, stdin, settings.filename)
        outcome = run(
            inputs,
            engine,
            continue_on_error=settings.continue_on_error,
            stdin_mode=stdin_mode,
            log=logger,
        )
    except FatalError as ex:
        logger.error("%s", ex)
        return 1
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
