import pytest
from uuid import uuid4
from django.urls import reverse
from rest_framework import status
from apps.reviews.models import Review, ReviewApproval


# =============================================================================
# Review Read Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewList:
    """Tests for GET /api/reviews/"""

    def test_list_reviews(self, api_client, review):
        """List all reviews (public endpoint)."""
        url = reverse('reviews:review-list')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert 'results' in response.data
        assert len(response.data['results']) == 1
        assert response.data['results'][0]['content'] == review.content

    def test_retrieve_review(self, api_client, review, review_pos, review_user):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['id'] == str(review.id)
        assert response.data['pos_id'] == str(review_pos.id)
        assert response.data['author']['id'] == str(review_user.id)
        assert response.data['approval_count'] == 0
        assert response.data['approved'] is False

    def test_retrieve_missing_review(self, api_client):
        url = reverse('reviews:review-detail', kwargs={'pk': uuid4()})
        response = api_client.get(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert 'error' in response.data

    @pytest.mark.parametrize('bad_id', ['a' * 36, '-' * 36, '12345678-1234-1234-1234-12345678901g'])
    def test_retrieve_malformed_id(self, api_client, bad_id):
        response = api_client.get(f'/api/reviews/{bad_id}/')

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.django_db
class TestReviewFilter:
    """Tests for GET /api/reviews/filter/"""

    def test_filter_approved(self, api_client, review, approved_review, review_pos):
        url = reverse('reviews:review-filter')
        response = api_client.get(url, {'pos_id': str(review_pos.id), 'approved': 'true'})

        assert response.status_code == status.HTTP_200_OK
        assert [r['id'] for r in response.data] == [str(approved_review.id)]

    def test_filter_not_approved(self, api_client, review, approved_review, review_pos):
        url = reverse('reviews:review-filter')
        response = api_client.get(url, {'pos_id': str(review_pos.id), 'approved': 'false'})

        assert response.status_code == status.HTTP_200_OK
        assert [r['id'] for r in response.data] == [str(review.id)]

    def test_filter_requires_parameters(self, api_client):
        url = reverse('reviews:review-filter')
        response = api_client.get(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'pos_id' in response.data
        assert 'approved' in response.data

    def test_filter_unknown_pos(self, api_client):
        url = reverse('reviews:review-filter')
        response = api_client.get(url, {'pos_id': str(uuid4()), 'approved': 'true'})

        assert response.status_code == status.HTTP_404_NOT_FOUND


# =============================================================================
# Review Submission Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewCreate:
    """Tests for POST /api/reviews/"""

    def test_create_review(self, review_auth_client, review_pos, review_user):
        url = reverse('reviews:review-list')
        data = {
            'pos_id': str(review_pos.id),
            'content': 'Excellent coffee!',
        }
        response = review_auth_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['approval_count'] == 0
        assert response.data['approved'] is False
        assert Review.objects.filter(author=review_user, pos=review_pos).exists()

    def test_create_duplicate_review(self, review_auth_client, review, review_pos):
        url = reverse('reviews:review-list')
        data = {'pos_id': str(review_pos.id), 'content': 'Another one'}
        response = review_auth_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'one review per POS' in response.data['error']

    def test_create_blank_content(self, review_auth_client, review_pos):
        url = reverse('reviews:review-list')
        data = {'pos_id': str(review_pos.id), 'content': '   '}
        response = review_auth_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'content' in response.data

    def test_create_unknown_pos(self, review_auth_client):
        url = reverse('reviews:review-list')
        data = {'pos_id': str(uuid4()), 'content': 'Where is this?'}
        response = review_auth_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_create_unauthenticated(self, api_client, review_pos):
        url = reverse('reviews:review-list')
        data = {'pos_id': str(review_pos.id), 'content': 'Anonymous'}
        response = api_client.post(url, data, format='json')

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Review Approval Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewApprove:
    """Tests for POST /api/reviews/{id}/approve/"""

    @pytest.fixture(autouse=True)
    def approval_quorum(self, settings):
        settings.REVIEW_APPROVAL_MIN_COUNT = 2

    def test_approve_review(self, review_other_client, review, review_other_user):
        url = reverse('reviews:review-approve', kwargs={'pk': review.id})
        response = review_other_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['approval_count'] == 1
        assert response.data['approved'] is False
        assert ReviewApproval.objects.filter(review=review, user=review_other_user).exists()

    def test_approve_until_quorum(self, review_other_client, review_third_client, review):
        url = reverse('reviews:review-approve', kwargs={'pk': review.id})
        review_other_client.post(url)
        response = review_third_client.post(url)

        assert response.status_code == status.HTTP_200_OK
        assert response.data['approval_count'] == 2
        assert response.data['approved'] is True

    def test_approve_own_review(self, review_auth_client, review):
        url = reverse('reviews:review-approve', kwargs={'pk': review.id})
        response = review_auth_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'own reviews' in response.data['error']

    def test_approve_twice(self, review_other_client, review):
        url = reverse('reviews:review-approve', kwargs={'pk': review.id})
        review_other_client.post(url)
        response = review_other_client.post(url)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        review.refresh_from_db()
        assert review.approval_count == 1

    def test_approve_missing_review(self, review_other_client):
        url = reverse('reviews:review-approve', kwargs={'pk': uuid4()})
        response = review_other_client.post(url)

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_approve_malformed_id(self, review_other_client, review):
        response = review_other_client.post(f'/api/reviews/{"a" * 36}/approve/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        review.refresh_from_db()
        assert review.approval_count == 0

    def test_approve_unauthenticated(self, api_client, review):
        url = reverse('reviews:review-approve', kwargs={'pk': review.id})
        response = api_client.post(url)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


# =============================================================================
# Review Delete Tests
# =============================================================================

@pytest.mark.django_db
class TestReviewDelete:
    """Tests for DELETE /api/reviews/{id}/"""

    def test_delete_own_review(self, review_auth_client, review):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = review_auth_client.delete(url)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert not Review.objects.filter(id=review.id).exists()

    def test_delete_other_users_review(self, review_other_client, review):
        url = reverse('reviews:review-detail', kwargs={'pk': review.id})
        response = review_other_client.delete(url)

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert Review.objects.filter(id=review.id).exists()

    def test_delete_malformed_id(self, review_auth_client, review):
        response = review_auth_client.delete(f'/api/reviews/{"-" * 36}/')

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert Review.objects.filter(id=review.id).exists()
