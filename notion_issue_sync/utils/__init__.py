"""Utility modules for shared functionality."""

from .constants import (
    DESCRIPTION_MAX_LENGTH,
    GITHUB_ISSUES_PAGE_SIZE,
    OPERATION_BATCH_SIZE,
)
from .helpers import chunk, truncate_string_at_end

__all__ = [
    "DESCRIPTION_MAX_LENGTH",
    "GITHUB_ISSUES_PAGE_SIZE",
    "OPERATION_BATCH_SIZE",
    "chunk",
    "truncate_string_at_end",
]
