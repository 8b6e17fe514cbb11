"""Deterministic diagram rendering."""

from __future__ import annotations

from typing import Mapping

from gotestdeps.analysis.graph_models import ModuleGraph
from gotestdeps.models import Classification
from gotestdeps.render.layout import classify, group_members, layout
from gotestdeps.render.mermaid import render_mermaid


def render_graph(
    graph: ModuleGraph,
    test_only: frozenset[str],
    styles: Mapping[Classification, str | None],
) -> str:
    """Lay out and serialize a module graph."""
    return render_mermaid(layout(graph, test_only), styles)


__all__ = ["classify", "group_members", "layout", "render_graph", "render_mermaid"]
