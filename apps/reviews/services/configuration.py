"""Approval quorum configuration."""

from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured


@dataclass(frozen=True)
class ApprovalConfiguration:
    """Minimum number of distinct approvals a review needs to be approved."""

    min_count: int

    def __post_init__(self):
        if self.min_count < 1:
            raise ImproperlyConfigured(
                f"Approval minimum count must be at least 1, got {self.min_count}."
            )

    @classmethod
    def from_settings(cls) -> 'ApprovalConfiguration':
        return cls(min_count=settings.REVIEW_APPROVAL_MIN_COUNT)
