"""
Tests for the small jobs API.
"""

import pytest

from infrastructure.persistence.models import SmallJob

pytestmark = pytest.mark.django_db

URL = '/api/v1/small-jobs/'


def test_create_trims_title(api_client):
    response = api_client.post(URL, {'title': '  Repair gate hinge  ', 'order_number': 'SO-1041'}, format='json')

    assert response.status_code == 201
    assert response.data['title'] == 'Repair gate hinge'
    assert response.data['order_number'] == 'SO-1041'
    assert response.data['status'] == 'pending'


@pytest.mark.parametrize('title', ['', '   '])
def test_blank_title_rejected(api_client, title):
    response = api_client.post(URL, {'title': title}, format='json')

    assert response.status_code == 400
    assert 'title' in response.data
    assert not SmallJob.objects.exists()


@pytest.mark.parametrize('order_number', ['', '  ', None])
def test_empty_order_number_stored_as_null(api_client, order_number):
    response = api_client.post(URL, {'title': 'Cut base plates', 'order_number': order_number}, format='json')

    assert response.status_code == 201
    assert response.data['order_number'] is None
    assert SmallJob.objects.get().order_number is None


def test_set_status(api_client, make_small_job):
    job = make_small_job()

    response = api_client.post(f'{URL}{job.id}/set-status/', {'status': 'completed'}, format='json')

    assert response.status_code == 200
    assert response.data['status'] == 'completed'
    job.refresh_from_db()
    assert job.status == 'completed'
    assert job.version == 2


def test_set_status_rejects_unknown_value(api_client, make_small_job):
    job = make_small_job()
    response = api_client.post(f'{URL}{job.id}/set-status/', {'status': 'done'}, format='json')
    assert response.status_code == 400


def test_list_in_creation_order_and_filter(api_client, make_small_job):
    make_small_job('First', status='completed')
    make_small_job('Second')
    make_small_job('Third', status='completed')

    response = api_client.get(URL)
    assert [j['title'] for j in response.data['results']] == ['First', 'Second', 'Third']

    response = api_client.get(URL, {'status': 'completed'})
    assert [j['title'] for j in response.data['results']] == ['First', 'Third']


def test_delete(api_client, make_small_job):
    job = make_small_job()
    assert api_client.delete(f'{URL}{job.id}/').status_code == 204
    assert not SmallJob.objects.exists()
