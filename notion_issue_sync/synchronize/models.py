"""Models describing GitHub issues and the Notion operations derived from them."""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from notion_issue_sync.utils.constants import DESCRIPTION_MAX_LENGTH


class IssueType(str, Enum):
    """Classification derived from issue labels, in precedence order."""

    BUG = "Bug"
    TECH_DEBT = "Tech Debt"


class IssuePriority(str, Enum):
    """Priority derived from issue labels, in precedence order."""

    LOW = "Low Priority"
    HIGH = "High Priority"


class RemoteIssue(BaseModel):
    """Compact, immutable representation of a GitHub issue."""

    model_config = ConfigDict(frozen=True)

    number: int
    title: str
    state: Literal["open", "closed"]
    url: str
    created_at: datetime
    type: IssueType | None = None
    priority: IssuePriority | None = None
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)


class CreateRowOperation(BaseModel):
    """Create a new Notion row for an issue that is not yet mirrored."""

    model_config = ConfigDict(frozen=True)

    issue: RemoteIssue


class UpdateRowOperation(BaseModel):
    """Overwrite the synchronized columns of the row that already mirrors an issue."""

    model_config = ConfigDict(frozen=True)

    issue: RemoteIssue
    row_id: str


SyncOperation = CreateRowOperation | UpdateRowOperation


class SyncPlan(BaseModel):
    """Disjoint create and update operations computed for one run."""

    model_config = ConfigDict(frozen=True)

    to_create: tuple[CreateRowOperation, ...] = ()
    to_update: tuple[UpdateRowOperation, ...] = ()
