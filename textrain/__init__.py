"""textrain: Matrix-style character rain drawn from the text of a document."""

__version__ = "0.1.0"
