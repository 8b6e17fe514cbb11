"""Package resolvers."""

from __future__ import annotations

from gotestdeps.resolver.base import BaseResolver, InMemoryResolver
from gotestdeps.resolver.golist import GoListResolver

__all__ = ["BaseResolver", "GoListResolver", "InMemoryResolver"]
