"""Universe diff: modules that only show up once test code is loaded."""

from __future__ import annotations

from gotestdeps.analysis.graph_models import ModuleUniverse


def difference(a: frozenset[str] | set[str], b: frozenset[str] | set[str]) -> frozenset[str]:
    """Members of ``a`` that are not in ``b``."""
    return frozenset(m for m in a if m not in b)


def find_test_only(with_tests: ModuleUniverse, without_tests: ModuleUniverse) -> frozenset[str]:
    """Modules reachable only through test-time imports."""
    if not with_tests.include_tests or without_tests.include_tests:
        raise ValueError("expected a test-inclusive and a test-exclusive universe")
    return difference(with_tests.modules, without_tests.modules)
