"""Resolver backed by ``go list -json -deps``."""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from gotestdeps.errors import ResolverError
from gotestdeps.models import ModuleInfo, Package, PackageNode
from gotestdeps.resolver.base import BaseResolver

logger = logging.getLogger(__name__)


class GoModuleRecord(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    path: str = Field("", alias="Path")
    version: str = Field("", alias="Version")
    main: bool = Field(False, alias="Main")


class GoPackageError(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pos: str = Field("", alias="Pos")
    err: str = Field("", alias="Err")

    def __str__(self) -> str:
        return f"{self.pos}: {self.err}" if self.pos else self.err


class GoPackageRecord(BaseModel):
    """One object of the ``go list -json`` stream (only the fields we use)."""
    model_config = ConfigDict(populate_by_name=True)

    import_path: str = Field(alias="ImportPath")
    module: GoModuleRecord | None = Field(None, alias="Module")
    imports: list[str] = Field(default_factory=list, alias="Imports")
    dep_only: bool = Field(False, alias="DepOnly")
    standard: bool = Field(False, alias="Standard")
    error: GoPackageError | None = Field(None, alias="Error")
    deps_errors: list[GoPackageError] = Field(default_factory=list, alias="DepsErrors")


def iter_json_stream(text: str) -> Iterator[dict]:
    """Decode a stream of concatenated JSON objects."""
    decoder = json.JSONDecoder()
    pos = 0
    end = len(text)
    while True:
        while pos < end and text[pos].isspace():
            pos += 1
        if pos >= end:
            return
        obj, pos = decoder.raw_decode(text, pos)
        yield obj


def parse_records(text: str, include_tests: bool = False) -> list[GoPackageRecord]:
    try:
        return [GoPackageRecord.model_validate(obj) for obj in iter_json_stream(text)]
    except (json.JSONDecodeError, ValidationError) as e:
        raise ResolverError(f"cannot decode go list output: {e}", include_tests) from e


def collect_errors(records: list[GoPackageRecord]) -> list[str]:
    """All distinct package errors, in stream order."""
    seen: set[str] = set()
    errors: list[str] = []
    for rec in records:
        for err in ([rec.error] if rec.error else []) + rec.deps_errors:
            msg = str(err)
            if msg not in seen:
                seen.add(msg)
                errors.append(msg)
    return errors


def link_packages(records: list[GoPackageRecord]) -> list[Package]:
    """Build linked Package nodes and return the roots (non-DepOnly packages).

    Imports with no record of their own become ``None`` entries.
    """
    by_path: dict[str, Package] = {}
    for rec in records:
        module = None
        if not rec.standard and rec.module is not None and rec.module.path:
            module = ModuleInfo(
                path=rec.module.path,
                version=rec.module.version,
                main=rec.module.main,
            )
        by_path[rec.import_path] = Package(
            import_path=rec.import_path,
            module=module,
            dep_only=rec.dep_only,
        )

    for rec in records:
        pkg = by_path[rec.import_path]
        pkg.imports = [by_path.get(imp) for imp in rec.imports]

    return [pkg for pkg in by_path.values() if not pkg.dep_only]


class GoListResolver(BaseResolver):
    """Load the package graph of a Go module with the ``go`` command."""

    def __init__(self, work_dir: Path | str = ".", go_binary: str = "go"):
        self.work_dir = Path(work_dir)
        self.go_binary = go_binary

    def command(self, pattern: str, include_tests: bool) -> list[str]:
        cmd = [self.go_binary, "list", "-e", "-json", "-deps"]
        if include_tests:
            cmd.append("-test")
        cmd.append(pattern)
        return cmd

    def resolve(self, pattern: str, include_tests: bool) -> list[PackageNode]:
        cmd = self.command(pattern, include_tests)
        logger.debug("running %s in %s", " ".join(cmd), self.work_dir)

        try:
            proc = subprocess.run(
                cmd,
                cwd=self.work_dir,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise ResolverError(f"cannot run {self.go_binary}: {e}", include_tests) from e

        if proc.returncode != 0:
            stderr = proc.stderr.strip()
            raise ResolverError(
                f"go list exited with status {proc.returncode}",
                include_tests,
                stderr.splitlines() if stderr else [],
            )

        records = parse_records(proc.stdout, include_tests)
        errors = collect_errors(records)
        if errors:
            for msg in errors:
                logger.debug("%s", msg)
            raise ResolverError("aborting due to previous errors", include_tests, errors)

        roots = link_packages(records)
        logger.debug("go list reported %d packages, %d roots", len(records), len(roots))
        return roots
