"""Module projection: collapse the package import graph onto owning modules."""

from __future__ import annotations

import logging
from typing import Iterable

from gotestdeps.analysis.graph_models import ModuleGraph, ModuleUniverse
from gotestdeps.analysis.traversal import traverse
from gotestdeps.models import PackageNode

logger = logging.getLogger(__name__)


def module_path_of(pkg: PackageNode | None) -> str:
    """Owning module path of ``pkg`` without version, or "" for stdlib/unowned."""
    if pkg is not None and pkg.module is not None:
        return pkg.module.path
    return ""


class ModuleGraphBuilder:
    """Build a module-level graph from a package import graph."""

    def build(self, roots: Iterable[PackageNode | None]) -> ModuleGraph:
        nodes: set[str] = set()
        edges: set[tuple[str, str]] = set()
        mains: set[str] = set()

        def visit(pkg: PackageNode) -> None:
            source = module_path_of(pkg)
            if not source:
                return  # stdlib
            nodes.add(source)
            if pkg.module.main:
                mains.add(source)

            for imp in pkg.imports:
                target = module_path_of(imp)
                if not target or target == source:
                    continue
                edges.add((source, target))
                nodes.add(target)

        visited = traverse(roots, visit)
        logger.debug(
            "projected %d packages onto %d modules, %d edges",
            visited, len(nodes), len(edges),
        )

        if len(mains) > 1:
            logger.warning("multiple main modules reported: %s", ", ".join(sorted(mains)))
        main_module = min(mains) if mains else None

        return ModuleGraph(
            nodes=frozenset(nodes),
            edges=frozenset(edges),
            main_module=main_module,
        )

    def universe(self, roots: Iterable[PackageNode | None], include_tests: bool) -> ModuleUniverse:
        """Set of module paths reachable from ``roots``."""
        modules: set[str] = set()

        def visit(pkg: PackageNode) -> None:
            path = module_path_of(pkg)
            if path:
                modules.add(path)

        traverse(roots, visit)
        return ModuleUniverse(include_tests=include_tests, modules=frozenset(modules))
