"""An in-memory football league register with queries, a result table and a command shell."""

__version__ = "0.1.0"
__all__ = ["cli", "league", "models", "table"]