"""docfork - fork, compare and three-way merge versioned documents."""

__version__ = "0.1.0"
