"""Classic algorithm drills: arrays, number systems, searching, sorting and interview problems."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "binary",
    "partition",
    "searching",
    "sorting",
    "strings",
    "leetcode",
    "vectors",
]