"""Two-stack integer sorting with a restricted instruction set."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "sorting", "stacks"]