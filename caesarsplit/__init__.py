"""Caesar shift-by-two cipher, with file runners that work sequentially, across two processes or across two threads."""

__version__ = "0.1.0"

__all__ = ["cipher", "sequential", "processes", "threads"]