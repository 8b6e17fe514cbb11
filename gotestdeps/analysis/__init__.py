"""Graph traversal, module projection and universe diff."""

from gotestdeps.analysis.graph_models import (
    ModuleGraph,
    ModuleUniverse,
    RenderedGraph,
    RenderedNode,
)
from gotestdeps.analysis.projection import ModuleGraphBuilder, module_path_of
from gotestdeps.analysis.traversal import reachable, traverse
from gotestdeps.analysis.universe import difference, find_test_only

__all__ = [
    "ModuleGraph",
    "ModuleGraphBuilder",
    "ModuleUniverse",
    "RenderedGraph",
    "RenderedNode",
    "difference",
    "find_test_only",
    "module_path_of",
    "reachable",
    "traverse",
]
