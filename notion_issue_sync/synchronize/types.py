"""Type hints for the synchronize module."""

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class HasName(Protocol):
    """Protocol for objects that have a name attribute."""

    name: str


LabelType = str | dict[str, Any] | HasName

RowIdentifierMapping = Mapping[int, str]
"""Maps a GitHub issue number to the ID of the Notion row that mirrors it."""
