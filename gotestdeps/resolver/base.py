"""Abstract base resolver."""

from __future__ import annotations

import abc
from typing import Sequence

from gotestdeps.errors import ResolverError
from gotestdeps.models import PackageNode


class BaseResolver(abc.ABC):
    """Turns a package pattern into root package nodes of a full import graph."""

    @abc.abstractmethod
    def resolve(self, pattern: str, include_tests: bool) -> list[PackageNode]:
        """Resolve ``pattern``; raise ResolverError on any load error."""


class InMemoryResolver(BaseResolver):
    """Resolver over prepared graphs, one per include-tests setting."""

    def __init__(
        self,
        without_tests: Sequence[PackageNode],
        with_tests: Sequence[PackageNode],
        errors: Sequence[str] = (),
    ):
        self._roots = {False: list(without_tests), True: list(with_tests)}
        self._errors = list(errors)
        self.calls: list[tuple[str, bool]] = []

    def resolve(self, pattern: str, include_tests: bool) -> list[PackageNode]:
        self.calls.append((pattern, include_tests))
        if self._errors:
            raise ResolverError("package load failed", include_tests, self._errors)
        return list(self._roots[include_tests])
