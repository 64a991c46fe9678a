"""General utility functions and helper classes."""

from typing import Sequence, TypeVar

T = TypeVar("T")


def chunk(items: Sequence[T], size: int) -> list[list[T]]:
    """Split items into consecutive chunks of at most `size` elements, preserving order."""
    if size < 1:
        raise ValueError(f"Chunk size must be a positive integer, got {size}")
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


def truncate_string_at_end(content: str | None, max_length: int) -> str | None:
    """Keep the first max_length characters of content.

    Returns None when content is None or empty so callers can omit the value entirely.
    """
    if not content:
        return None
    return content[:max_length]
