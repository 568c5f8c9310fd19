"""General-purpose helpers: singletons, list operations, parallel mapping, string tools and runtime utilities."""

__version__ = "0.1.0"
__all__ = ["runtime", "singleton", "slices", "parallel", "stringtools"]