"""Review management service - submission, filtering and approval of reviews."""

import logging
from dataclasses import replace
from typing import Callable, ContextManager, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.services.data_service import UserDataService
from apps.core.crud import CrudService
from apps.core.exceptions import NotFoundError, ValidationError
from apps.pos.services.data_service import PosDataService
from apps.reviews.domain import Review
from .configuration import ApprovalConfiguration
from .data_service import ReviewDataService

logger = logging.getLogger(__name__)


class ReviewService:
    """
    Business rules for reviews.

    - A user can submit only one review per POS.
    - A review is approved once it has at least `min_count` approvals.
    - Users cannot approve their own reviews, and can approve a review only once.

    Lookups of POS and users are delegated to their data services; their
    `NotFoundError`s propagate unchanged. Each operation runs in one unit of
    work created by `atomic`.
    """

    def __init__(
        self,
        *,
        review_data_service: ReviewDataService,
        user_data_service: UserDataService,
        pos_data_service: PosDataService,
        approval_configuration: ApprovalConfiguration,
        atomic: Callable[[], ContextManager] = transaction.atomic,
    ):
        self.review_data_service = review_data_service
        self.user_data_service = user_data_service
        self.pos_data_service = pos_data_service
        self.approval_configuration = approval_configuration
        self._atomic = atomic
        self._crud = CrudService(review_data_service, entity_name='Review', atomic=atomic)

    def clear(self) -> None:
        self._crud.clear()

    def get_all(self) -> list[Review]:
        return self._crud.get_all()

    def get_by_id(self, review_id: UUID) -> Review:
        return self._crud.get_by_id(review_id)

    def delete(self, review_id: UUID) -> None:
        self._crud.delete(review_id)

    def submit(self, review: Review) -> Review:
        """
        Submit a new review or re-save an existing one.

        This operation:
        1. Validates that POS and author are given
        2. Resolves POS and author
        3. Rejects a second review by the same author for the same POS
        4. Starts new reviews unapproved with no approvals, or recomputes the
           approval status of an existing review from its stored count
        5. Persists the review

        Args:
            review: Review draft with POS, author and content

        Returns:
            Persisted Review

        Raises:
            ValidationError: If POS or author is missing, or the author
                already reviewed this POS
            NotFoundError: If POS or author does not exist
        """
        if review.pos is None or review.pos.id is None:
            raise ValidationError("POS must not be null.")

        if review.author is None or review.author.id is None:
            raise ValidationError("Author must not be null.")

        logger.info(
            "Submitting review for POS '%s' by user '%s'...",
            review.pos.id, review.author.id
        )

        with self._atomic():
            pos = self.pos_data_service.get_by_id(review.pos.id)
            author = self.user_data_service.get_by_id(review.author.id)

            existing = self.review_data_service.filter(pos, author=author)
            if existing:
                logger.warning(
                    "User with ID '%s' attempted to submit multiple reviews for POS with ID '%s'",
                    author.id, pos.id
                )
                raise ValidationError("Users can only submit one review per POS.")

            if review.id is None:
                to_save = replace(
                    review,
                    pos=pos,
                    author=author,
                    approval_count=0,
                    approved=False,
                    approver_ids=frozenset(),
                )
            else:
                stored = self.review_data_service.find_by_id(review.id)
                if stored is None:
                    # No stored state to recompute from, use the draft itself
                    stored = review
                to_save = self._update_approval_status(stored)

            return self.review_data_service.upsert(to_save)

    def filter(self, pos_id: UUID, approved: bool) -> list[Review]:
        """
        Get the reviews of a POS with the given approval status.

        Raises:
            NotFoundError: If the POS does not exist
        """
        with self._atomic():
            pos = self.pos_data_service.get_by_id(pos_id)
            return self.review_data_service.filter(pos, approved=approved)

    def approve(self, review: Review, approver_id: UUID) -> Review:
        """
        Count one approval of a review by another user.

        Args:
            review: Stored review to approve
            approver_id: ID of the approving user

        Returns:
            Updated Review; `approved` is True once the approval quorum is met

        Raises:
            NotFoundError: If the approver or the review does not exist
            ValidationError: If the approver is the review's author or has
                already approved the review
        """
        logger.info(
            "Processing approval request for review with ID '%s' by user with ID '%s'...",
            review.id, approver_id
        )

        with self._atomic():
            approver = self.user_data_service.get_by_id(approver_id)

            existing = self._find_review(review.id)
            if existing is None:
                raise NotFoundError('Review', review.id)

            if existing.author.id == approver.id:
                logger.warning(
                    "User with ID '%s' attempted to approve their own review with ID '%s'",
                    approver.id, existing.id
                )
                raise ValidationError("Users cannot approve their own reviews.")

            if approver.id in existing.approver_ids:
                logger.warning(
                    "User with ID '%s' attempted to approve review with ID '%s' again",
                    approver.id, existing.id
                )
                raise ValidationError("Users can only approve a review once.")

            updated = replace(
                existing,
                approval_count=existing.approval_count + 1,
                approver_ids=existing.approver_ids | {approver.id},
            )
            updated = self._update_approval_status(updated)

            return self.review_data_service.upsert(updated)

    def _find_review(self, review_id) -> Optional[Review]:
        if review_id is None:
            return None
        return self.review_data_service.find_by_id(review_id)

    def _update_approval_status(self, review: Review) -> Review:
        logger.debug("Updating approval status of review with ID '%s'...", review.id)
        return replace(review, approved=self._is_approved(review))

    def _is_approved(self, review: Review) -> bool:
        return review.approval_count >= self.approval_configuration.min_count


def get_review_service() -> ReviewService:
    """Return the review service backed by the database and settings."""
    return ReviewService(
        review_data_service=ReviewDataService(),
        user_data_service=UserDataService(),
        pos_data_service=PosDataService(),
        approval_configuration=ApprovalConfiguration.from_settings(),
    )
