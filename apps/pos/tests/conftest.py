import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken
from apps.accounts.models import User
from apps.pos.models import Pos, PosType, Campus


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def pos_user(db):
    """Create and return a user managing points of sale."""
    return User.objects.create_user(
        email='pos_manager@example.com',
        password='TestPass123!',
        display_name='POS Manager',
    )


@pytest.fixture
def pos_auth_client(api_client, pos_user):
    """Return API client authenticated as POS user."""
    refresh = RefreshToken.for_user(pos_user)
    api_client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return api_client


@pytest.fixture
def pos(db):
    """Create and return a cafe in the Altstadt."""
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
def inf_pos(db):
    """Create and return a cafeteria in the Neuenheimer Feld."""
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
def pos_data():
    """Valid request body for a new POS."""
    return {
        'name': 'Keks Café',
        'description': 'Cookies and coffee',
        'type': 'bakery',
        'campus': 'bergheim',
        'street': 'Bergheimer Straße',
        'house_number': '58',
        'postal_code': '69115',
        'city': 'Heidelberg',
    }
