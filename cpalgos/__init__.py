"""Classic algorithms for strings, range queries, sorting and searching, and trees."""

__version__ = "0.1.0"