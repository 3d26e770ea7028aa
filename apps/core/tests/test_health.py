import pytest
from django.urls import reverse
from rest_framework.test import APIClient


@pytest.mark.django_db
def test_health_check():
    response = APIClient().get(reverse('health-check'))

    assert response.status_code == 200
    assert response.json() == {'status': 'ok', 'database': 'up'}


@pytest.mark.django_db
def test_unknown_url_returns_json():
    response = APIClient().get('/api/does-not-exist/')

    assert response.status_code == 404
