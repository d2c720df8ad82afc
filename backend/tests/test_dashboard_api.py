"""
Tests for the dashboard summary endpoint.
"""

from datetime import date, time

import pytest

pytestmark = pytest.mark.django_db

URL = '/api/v1/dashboard/summary/'

# Monday
MONDAY = date(2025, 5, 26)


def test_requires_authentication(anon_client):
    assert anon_client.get(URL).status_code == 401


def test_summary(api_client, make_project, make_delivery, make_small_job):
    alpha = make_project('Alpha Bridge', documentation_done=True, materials_ordered=True)
    make_project('Beta Tower', material_ordering_activated=True)
    make_project('Closed Depot', status='completed')

    make_delivery(alpha, day=MONDAY, at=time(14, 15), location='Yard')
    make_delivery(alpha, day=MONDAY, at=time(9, 30), type='pickup')
    make_delivery(alpha, day=date(2025, 5, 31))
    make_delivery(alpha, day=date(2025, 6, 2))

    make_small_job('One')
    make_small_job('Two', status='in-progress')
    make_small_job('Three', status='in-progress')

    response = api_client.get(URL, {'start': '2025-05-26'})

    assert response.status_code == 200
    data = response.data
    assert data['date'] == MONDAY

    projects = data['active_projects']
    assert [p['name'] for p in projects] == ['Alpha Bridge', 'Beta Tower']
    assert projects[0]['progress'] == 33
    assert projects[0]['documentation_done'] is True
    assert projects[0]['materials_received'] is False
    assert 'client_approved' not in projects[0]
    assert projects[1]['material_ordering_activated'] is True

    logistics = data['logistics']
    assert [d['label'] for d in logistics] == ['Today', 'Monday, Jun 2']
    assert [e['time'] for e in logistics[0]['events']] == ['09:30', '14:15']
    assert logistics[0]['is_today'] is True

    assert data['small_jobs'] == {
        'by_status': {'pending': 1, 'in-progress': 2, 'completed': 0},
        'total': 3,
    }


def test_days_parameter(api_client, make_project, make_delivery):
    make_delivery(make_project(), day=date(2025, 5, 27))

    response = api_client.get(URL, {'start': '2025-05-26', 'days': 1})

    assert response.data['logistics'] == []


@pytest.mark.parametrize('params', [
    {'days': 0},
    {'days': 31},
    {'days': 'six'},
    {'start': '26.05.2025'},
])
def test_invalid_parameters(api_client, params):
    assert api_client.get(URL, params).status_code == 400
