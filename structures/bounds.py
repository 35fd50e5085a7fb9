"""
Index validation shared by the fixed-size structures.

Out-of-range indices are always rejected. Negative indices never wrap
around the way Python sequence indexing does.
"""


class IndexOutOfRangeError(IndexError):
    """Raised when an index falls outside a structure's [0, size) universe."""

    pass


def check_index(index: int, size: int) -> None:
    """Raise IndexOutOfRangeError unless 0 <= index < size."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise IndexOutOfRangeError(f"Index must be an integer, got {index!r}")
    if not 0 <= index < size:
        raise IndexOutOfRangeError(f"Index {index} outside [0, {size})")


def check_range(left: int, right: int, size: int) -> None:
    """Validate an inclusive [left, right] range over [0, size)."""
    check_index(left, size)
    check_index(right, size)
    if left > right:
        raise IndexOutOfRangeError(f"Empty range: left {left} > right {right}")
