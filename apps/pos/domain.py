"""Immutable point-of-sale value passed between services."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass(frozen=True)
class Pos:
    name: str
    street: str = ''
    house_number: str = ''
    postal_code: str = ''
    city: str = ''
    description: str = ''
    type: str = 'cafe'
    campus: str = 'altstadt'
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
