"""gotestdeps: Go module dependency graphs with test-only modules highlighted."""

__version__ = "0.1.0"
