"""
Tests for JWT authentication endpoints.
"""

import pytest

pytestmark = pytest.mark.django_db


def login(client, password='s3cret-pass'):
    return client.post('/api/v1/auth/login/', {
        'username': 'foreman',
        'password': password,
    }, format='json')


def test_login_returns_tokens(anon_client, user):
    response = login(anon_client)

    assert response.status_code == 200
    assert response.data['access']
    assert response.data['refresh']
    assert response.data['user']['username'] == 'foreman'

    user.refresh_from_db()
    assert user.last_login is not None


def test_login_with_wrong_password(anon_client, user):
    response = login(anon_client, password='wrong')

    assert response.status_code == 400
    assert 'access' not in response.data


def test_me_with_bearer_token(anon_client, user):
    access = login(anon_client).data['access']
    anon_client.credentials(HTTP_AUTHORIZATION=f'Bearer {access}')

    response = anon_client.get('/api/v1/auth/me/')

    assert response.status_code == 200
    assert response.data['email'] == 'foreman@example.com'
    assert response.data['full_name'] == 'Anna'


def test_me_requires_authentication(anon_client):
    assert anon_client.get('/api/v1/auth/me/').status_code == 401


def test_refresh(anon_client, user):
    refresh = login(anon_client).data['refresh']

    response = anon_client.post('/api/v1/auth/refresh/', {'refresh': refresh}, format='json')

    assert response.status_code == 200
    assert response.data['access']


def test_refresh_with_garbage_token(anon_client):
    response = anon_client.post('/api/v1/auth/refresh/', {'refresh': 'garbage'}, format='json')

    assert response.status_code == 401
    assert response.data['code'] == 'token_not_valid'
