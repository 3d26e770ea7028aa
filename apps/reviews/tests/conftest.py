import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.pos.models import Pos, PosType, Campus
from apps.reviews.models import Review, ReviewApproval
from apps.reviews.services import (
    ApprovalConfiguration,
    ReviewDataService,
    ReviewService,
)
from apps.accounts.services import UserDataService
from apps.pos.services import PosDataService


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


def _authenticated_client(user):
    client = APIClient()
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def review_user(db):
    """Create and return the review author."""
    return User.objects.create_user(
        email='reviewer@example.com',
        password='TestPass123!',
        display_name='Coffee Reviewer',
    )


@pytest.fixture
def review_other_user(db):
    """Create and return a second user who can approve reviews."""
    return User.objects.create_user(
        email='review_other@example.com',
        password='TestPass123!',
        display_name='Review Other User',
    )


@pytest.fixture
def review_third_user(db):
    """Create and return a third user who can approve reviews."""
    return User.objects.create_user(
        email='review_third@example.com',
        password='TestPass123!',
        display_name='Review Third User',
    )


@pytest.fixture
def review_auth_client(review_user):
    """Return API client authenticated as the review author."""
    return _authenticated_client(review_user)


@pytest.fixture
def review_other_client(review_other_user):
    """Return API client authenticated as the second user."""
    return _authenticated_client(review_other_user)


@pytest.fixture
def review_third_client(review_third_user):
    """Return API client authenticated as the third user."""
    return _authenticated_client(review_third_user)


@pytest.fixture
def review_pos(db):
    """Create and return a POS to review."""
    return Pos.objects.create(
        name='Schmelzpunkt',
        description='Great waffles',
        type=PosType.CAFE,
        campus=Campus.ALTSTADT,
        street='Hauptstraße',
        house_number='90',
        postal_code='69117',
        city='Heidelberg',
    )


@pytest.fixture
def review_another_pos(db):
    """Create and return another POS."""
    return Pos.objects.create(
        name='Café Botanik',
        type=PosType.CAFETERIA,
        campus=Campus.INF,
        street='Im Neuenheimer Feld',
        house_number='304',
        postal_code='69120',
        city='Heidelberg',
    )


@pytest.fixture
def review(db, review_user, review_pos):
    """Create and return a stored review without approvals."""
    return Review.objects.create(
        pos=review_pos,
        author=review_user,
        content='Great waffles and good coffee!',
    )


@pytest.fixture
def approved_review(db, review_other_user, review_user, review_third_user, review_pos):
    """Create a review by the second user that already reached the quorum."""
    approved = Review.objects.create(
        pos=review_pos,
        author=review_other_user,
        content='Best espresso on campus.',
        approval_count=2,
        approved=True,
    )
    ReviewApproval.objects.create(review=approved, user=review_user)
    ReviewApproval.objects.create(review=approved, user=review_third_user)
    return approved


@pytest.fixture
def approval_configuration():
    return ApprovalConfiguration(min_count=2)


@pytest.fixture
def review_service(db, approval_configuration):
    """Review service backed by the test database with a quorum of two."""
    return ReviewService(
        review_data_service=ReviewDataService(),
        user_data_service=UserDataService(),
        pos_data_service=PosDataService(),
        approval_configuration=approval_configuration,
    )
