__all__ = [
    "anchor",
    "checkpoints",
    "cli",
    "config",
    "data",
    "index",
    "progress",
    "service",
    "utils",
    "validator",
]
