"""Exception types raised by gotestdeps."""

from __future__ import annotations


class GoTestDepsError(Exception):
    """Base class for gotestdeps errors."""


class ResolverError(GoTestDepsError):
    """The package resolver could not produce a usable import graph."""

    def __init__(self, message: str, include_tests: bool, errors: list[str] | None = None):
        self.include_tests = include_tests
        self.errors = list(errors or [])
        super().__init__(message)

    def __str__(self) -> str:
        base = f"{self.args[0]} (tests={self.include_tests})"
        if self.errors:
            return base + "\n" + "\n".join(f"  {e}" for e in self.errors)
        return base
