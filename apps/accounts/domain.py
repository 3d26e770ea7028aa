"""Immutable user value passed between services."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class User:
    email: str
    display_name: str = ''
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def get_display_name(self) -> str:
        return self.display_name or self.email.split('@')[0]
