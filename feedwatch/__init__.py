"""feedwatch: reports whether an externally maintained feed document is still fresh."""

__version__ = "1.0.0"
