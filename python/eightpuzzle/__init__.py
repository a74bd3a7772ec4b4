"""8-puzzle search core: BFS, bidirectional BFS and A*."""

__version__ = "1.0.0"
