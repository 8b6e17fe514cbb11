"""Import-graph traversal that visits every reachable package exactly once."""

from __future__ import annotations

from collections import deque
from typing import Callable, Iterable

from gotestdeps.models import PackageNode

Visitor = Callable[[PackageNode], None]


def traverse(roots: Iterable[PackageNode | None], visit: Visitor) -> int:
    """Walk the import graph from ``roots``, calling ``visit`` once per package.

    Cycles and diamonds are handled by checking the visited set when a node
    is popped, so imports are queued without a membership test. ``None``
    entries stand for unresolved imports and are skipped.

    Returns the number of packages visited.
    """
    seen: set[int] = set()
    stack = deque(p for p in roots if p is not None)

    while stack:
        pkg = stack.pop()
        if id(pkg) in seen:
            continue
        seen.add(id(pkg))
        visit(pkg)
        for imp in pkg.imports:
            if imp is not None:
                stack.append(imp)

    return len(seen)


def reachable(roots: Iterable[PackageNode | None]) -> list[PackageNode]:
    """All packages reachable from ``roots``, in visit order."""
    found: list[PackageNode] = []
    traverse(roots, found.append)
    return found
