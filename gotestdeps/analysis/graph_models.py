"""Data models for the module graph."""

from __future__ import annotations

from dataclasses import dataclass, field

from gotestdeps.models import Classification


@dataclass(frozen=True)
class ModuleGraph:
    nodes: frozenset[str] = frozenset()
    edges: frozenset[tuple[str, str]] = frozenset()  # (from, to), from != to
    main_module: str | None = None


@dataclass(frozen=True)
class ModuleUniverse:
    include_tests: bool
    modules: frozenset[str] = frozenset()


@dataclass(frozen=True)
class RenderedNode:
    index: int
    module_path: str
    classification: Classification

    @property
    def node_id(self) -> str:
        return f"N{self.index}"


@dataclass
class RenderedGraph:
    nodes: list[RenderedNode] = field(default_factory=list)
    edges: list[tuple[int, int]] = field(default_factory=list)  # by node index
