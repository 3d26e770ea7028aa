"""Immutable review value passed between services."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

from apps.accounts.domain import User
from apps.pos.domain import Pos


@dataclass(frozen=True)
class Review:
    """
    A user's review of a POS.

    `pos` and `author` may be None only on drafts that have not been
    submitted yet. `approver_ids` holds the users that approved the review;
    `approval_count` is the number of approvals counted so far.
    """

    pos: Optional[Pos]
    author: Optional[User]
    content: str
    approval_count: int = 0
    approved: bool = False
    approver_ids: frozenset = frozenset()
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
