# ==========================================
# apps/reviews/models.py
# ==========================================

from django.db import models
import uuid


class Review(models.Model):
    """User review of a point of sale."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    pos = models.ForeignKey('pos.Pos', on_delete=models.CASCADE, related_name='reviews')
    author = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='reviews')
    content = models.TextField()
    approval_count = models.PositiveIntegerField(default=0)
    approved = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'reviews'
        constraints = [
            models.UniqueConstraint(fields=['pos', 'author'], name='unique_review_per_pos_author'),
        ]
        indexes = [
            models.Index(fields=['pos', 'approved'], name='reviews_pos_approved_idx'),
            models.Index(fields=['created_at'], name='reviews_created_at_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.author.get_display_name()} - {self.pos.name}"


class ReviewApproval(models.Model):
    """One user's approval of a review."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    review = models.ForeignKey(Review, on_delete=models.CASCADE, related_name='approvals')
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='review_approvals')
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'review_approvals'
        constraints = [
            models.UniqueConstraint(fields=['review', 'user'], name='unique_approval_per_review_user'),
        ]
        ordering = ['created_at']

    def __str__(self):
        return f"{self.user} approved {self.review_id}"
