"""
Reviews services - Business logic layer.

This package contains the business operations for the reviews app:
- Review submission (one review per user and POS)
- Filtering reviews of a POS by approval status
- Approval of reviews by other users up to the approval quorum
"""

from .configuration import ApprovalConfiguration
from .data_service import ReviewDataService
from .review_management import ReviewService, get_review_service

__all__ = [
    'ApprovalConfiguration',
    'ReviewDataService',
    'ReviewService',
    'get_review_service',
]
