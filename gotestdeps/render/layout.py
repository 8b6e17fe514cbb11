"""Deterministic layout: stable node indices, sorted edges, one classification per node."""

from __future__ import annotations

from gotestdeps.analysis.graph_models import ModuleGraph, RenderedGraph, RenderedNode
from gotestdeps.models import Classification


def classify(module_path: str, main_module: str | None, test_only: frozenset[str]) -> Classification:
    """Main module wins over test-only, test-only wins over regular."""
    if main_module is not None and module_path == main_module:
        return Classification.MAIN
    if module_path in test_only:
        return Classification.TEST_ONLY
    return Classification.REGULAR


def layout(graph: ModuleGraph, test_only: frozenset[str] = frozenset()) -> RenderedGraph:
    """Order and index the module graph for rendering.

    Nodes are indexed by sorted module path, never by insertion order.
    Test-only modules are always included as nodes even if the projection
    produced no edge touching them.
    """
    names = sorted(set(graph.nodes) | set(test_only))
    if "" in names:
        raise ValueError("module graph contains an empty module path")
    index = {name: i for i, name in enumerate(names)}

    nodes = [
        RenderedNode(
            index=i,
            module_path=name,
            classification=classify(name, graph.main_module, test_only),
        )
        for i, name in enumerate(names)
    ]

    edges: list[tuple[int, int]] = []
    for source, target in sorted(graph.edges):
        if source not in index or target not in index:
            raise ValueError(f"edge {source} -> {target} references an unknown module")
        edges.append((index[source], index[target]))

    return RenderedGraph(nodes=nodes, edges=edges)


def group_members(rendered: RenderedGraph, classification: Classification) -> list[int]:
    """Indices of nodes with ``classification``, ascending."""
    return [n.index for n in rendered.nodes if n.classification is classification]
