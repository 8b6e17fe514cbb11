"""Pipeline orchestrator: load x2 -> project -> diff -> render."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable

from gotestdeps.analysis.graph_models import ModuleGraph, ModuleUniverse
from gotestdeps.analysis.projection import ModuleGraphBuilder
from gotestdeps.analysis.universe import find_test_only
from gotestdeps.models import GraphConfig, PackageNode
from gotestdeps.render import render_graph
from gotestdeps.resolver import BaseResolver, GoListResolver

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, int], None]

_builder = ModuleGraphBuilder()


@dataclass(frozen=True)
class GraphResult:
    graph: ModuleGraph
    without_tests: ModuleUniverse
    with_tests: ModuleUniverse
    test_only: frozenset[str]
    text: str


def _load(resolver: BaseResolver, pattern: str, include_tests: bool) -> list[PackageNode]:
    roots = resolver.resolve(pattern, include_tests)
    logger.info("loaded %d root packages (tests=%s)", len(roots), include_tests)
    return roots


def load_both(
    resolver: BaseResolver,
    config: GraphConfig,
) -> tuple[list[PackageNode], list[PackageNode]]:
    """Resolve the pattern without and with test code. Returns (without, with)."""
    if not config.parallel:
        return (
            _load(resolver, config.pattern, False),
            _load(resolver, config.pattern, True),
        )

    with ThreadPoolExecutor(max_workers=2) as pool:
        without = pool.submit(_load, resolver, config.pattern, False)
        with_tests = pool.submit(_load, resolver, config.pattern, True)
        return without.result(), with_tests.result()


def run_graph(
    config: GraphConfig,
    resolver: BaseResolver | None = None,
    progress: ProgressCallback | None = None,
) -> GraphResult:
    """Build the module diagram for ``config``.

    Any ResolverError propagates before anything is rendered.
    """
    if resolver is None:
        resolver = GoListResolver(config.work_dir, config.go_binary)

    # Stage 1: Load
    if progress:
        progress("Loading", 0, 2)
    plain_roots, test_roots = load_both(resolver, config)
    if progress:
        progress("Loading", 2, 2)

    # Stage 2: Universes
    without_tests = _builder.universe(plain_roots, include_tests=False)
    with_tests = _builder.universe(test_roots, include_tests=True)
    test_only = find_test_only(with_tests, without_tests)
    logger.info(
        "%d modules without tests, %d with tests, %d test-only",
        len(without_tests.modules), len(with_tests.modules), len(test_only),
    )

    # Stage 3: Project
    if progress:
        progress("Projecting", 0, 1)
    graph = _builder.build(test_roots)
    if progress:
        progress("Projecting", 1, 1)

    # Stage 4: Render
    text = render_graph(graph, test_only, config.styles)

    return GraphResult(
        graph=graph,
        without_tests=without_tests,
        with_tests=with_tests,
        test_only=test_only,
        text=text,
    )
