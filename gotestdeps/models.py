"""Data models for the gotestdeps pipeline."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, Sequence


class PackageNode(Protocol):
    """Read-only view of a package reported by a resolver.

    The core only reads these three attributes. Identity is object identity.
    """

    @property
    def module(self) -> ModuleInfo | None: ...

    @property
    def imports(self) -> Sequence[PackageNode | None]: ...


class Classification(enum.Enum):
    MAIN = "main"
    TEST_ONLY = "test_only"
    REGULAR = "regular"


# Highest precedence first
CLASSIFICATION_ORDER = (
    Classification.MAIN,
    Classification.TEST_ONLY,
    Classification.REGULAR,
)


@dataclass(frozen=True)
class ModuleInfo:
    """Owning module of a package."""
    path: str
    version: str = ""
    main: bool = False


@dataclass(eq=False)
class Package:
    """Concrete package node produced by the bundled resolvers."""
    import_path: str
    module: ModuleInfo | None = None
    imports: list[Package | None] = field(default_factory=list)
    dep_only: bool = False

    def __repr__(self) -> str:
        return f"Package({self.import_path!r})"


def _default_styles() -> dict[Classification, str | None]:
    return {
        Classification.MAIN: None,  # opt in via GraphConfig.styles
        Classification.TEST_ONLY: "#ffdddd",
        Classification.REGULAR: None,  # diagram default
    }


@dataclass
class GraphConfig:
    """Configuration for one gotestdeps run."""
    work_dir: Path = field(default_factory=lambda: Path("."))
    pattern: str = "./..."
    go_binary: str = ""
    parallel: bool = False
    styles: dict[Classification, str | None] = field(default_factory=_default_styles)

    def __post_init__(self):
        if not self.go_binary:
            self.go_binary = os.getenv("GOTESTDEPS_GO", "go")
