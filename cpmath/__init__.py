"""Number-theory helpers and solvers for small counting problems, with a command line."""

__version__ = "0.1.0"

__all__ = ["numtheory", "topk", "opposite", "kpower", "maxdiff", "cli"]