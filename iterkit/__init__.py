"""Position-based iterators with traversal categories, zip and output adaptors, and iterator checks."""

__version__ = "0.1.0"
__all__ = [
    "advance",
    "categories",
    "checks",
    "concepts",
    "cursor",
    "node",
    "output",
    "zip",
]