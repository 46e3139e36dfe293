"""uextract - export objects from game asset archives as JSON or images."""

__version__ = "1.0.0"
