"""ORM-backed review store."""

from typing import Optional

from apps.accounts.domain import User
from apps.accounts.services.data_service import to_user
from apps.core.data import ModelDataService
from apps.pos.domain import Pos
from apps.pos.services.data_service import to_pos
from apps.reviews.domain import Review
from apps.reviews.models import Review as ReviewModel, ReviewApproval


class ReviewDataService(ModelDataService[Review]):
    model = ReviewModel
    entity_name = 'Review'

    def get_queryset(self):
        return ReviewModel.objects.select_related(
            'pos',
            'author',
        ).prefetch_related('approvals')

    def to_domain(self, instance):
        return Review(
            id=instance.id,
            pos=to_pos(instance.pos),
            author=to_user(instance.author),
            content=instance.content,
            approval_count=instance.approval_count,
            approved=instance.approved,
            approver_ids=frozenset(approval.user_id for approval in instance.approvals.all()),
            created_at=instance.created_at,
            updated_at=instance.updated_at,
        )

    def to_fields(self, entity):
        return {
            'pos_id': entity.pos.id,
            'author_id': entity.author.id,
            'content': entity.content,
            'approval_count': entity.approval_count,
            'approved': entity.approved,
        }

    def after_save(self, instance, entity):
        """Store approvals that are not recorded yet."""
        recorded = set(instance.approvals.values_list('user_id', flat=True))
        ReviewApproval.objects.bulk_create([
            ReviewApproval(review=instance, user_id=user_id)
            for user_id in entity.approver_ids
            if user_id not in recorded
        ])

    def filter(
        self,
        pos: Pos,
        *,
        author: Optional[User] = None,
        approved: Optional[bool] = None
    ) -> list[Review]:
        """
        Get the reviews of a POS, optionally narrowed down by author and/or
        approval status.
        """
        queryset = self.get_queryset().filter(pos_id=pos.id)

        if author is not None:
            queryset = queryset.filter(author_id=author.id)

        if approved is not None:
            queryset = queryset.filter(approved=approved)

        return [self.to_domain(instance) for instance in queryset]
