"""
Tests for the projects API.

Tests cover:
- CRUD and automatic project numbers
- Derived, read-only progress
- Criteria endpoints and material ordering marker
- Cascading delete of deliveries, materials and BOQ lines
- Change history
"""

from datetime import date

import pytest
from django.utils import timezone

from infrastructure.persistence.models import BOQItem, Delivery, MissingMaterial, Project

pytestmark = pytest.mark.django_db

URL = '/api/v1/projects/'


def detail_url(project, suffix=''):
    return f'{URL}{project.id}/{suffix}'


def test_requires_authentication(anon_client):
    response = anon_client.get(URL)
    assert response.status_code == 401


def test_create_assigns_sequential_number(api_client, user):
    year = timezone.localdate().year

    first = api_client.post(URL, {'name': 'Metro Station Renovation'}, format='json')
    second = api_client.post(URL, {'name': 'Riverside Apartments'}, format='json')

    assert first.status_code == 201
    assert first.data['number'] == f'PRJ-{year}-001'
    assert second.data['number'] == f'PRJ-{year}-002'
    assert first.data['status'] == 'active'
    assert first.data['progress'] == 0
    assert first.data['created_by'] == str(user)


def test_number_is_not_reused_after_delete(api_client):
    year = timezone.localdate().year
    first = api_client.post(URL, {'name': 'A'}, format='json')
    api_client.delete(f"{URL}{first.data['id']}/")

    second = api_client.post(URL, {'name': 'B'}, format='json')
    assert second.data['number'] == f'PRJ-{year}-002'


def test_blank_name_rejected(api_client):
    response = api_client.post(URL, {'name': '   '}, format='json')
    assert response.status_code == 400
    assert 'name' in response.data


def test_progress_is_derived_and_not_writable(api_client):
    response = api_client.post(URL, {
        'name': 'Tech Park Phase II',
        'documentation_done': True,
        'materials_ordered': True,
        'design_approved': True,
        'progress': 99,
    }, format='json')

    assert response.status_code == 201
    assert response.data['progress'] == 50

    patched = api_client.patch(f"{URL}{response.data['id']}/", {'quality_checked': True}, format='json')
    assert patched.data['progress'] == 67


def test_list_filters_and_search(api_client, make_project):
    make_project('Harbor View Hotel')
    make_project('Green Valley Residential', status='on-hold')

    response = api_client.get(URL, {'status': 'on-hold'})
    assert [p['name'] for p in response.data['results']] == ['Green Valley Residential']

    response = api_client.get(URL, {'search': 'harbor'})
    assert [p['name'] for p in response.data['results']] == ['Harbor View Hotel']


def test_list_is_ordered_by_name(api_client, make_project):
    make_project('Zeta')
    make_project('Alpha')
    response = api_client.get(URL)
    assert [p['name'] for p in response.data['results']] == ['Alpha', 'Zeta']


def test_criteria_breakdown(api_client, project):
    project.set_criterion('client_approved', True)

    response = api_client.get(detail_url(project, 'criteria/'))

    assert response.status_code == 200
    assert response.data['progress'] == 17
    assert len(response.data['criteria']) == 6
    assert response.data['criteria'][-1] == {
        'key': 'client_approved',
        'label': 'Client Approved',
        'done': True,
    }


def test_set_criterion(api_client, project):
    response = api_client.post(
        detail_url(project, 'set-criterion/'),
        {'key': 'materials_received', 'value': True},
        format='json'
    )

    assert response.status_code == 200
    assert response.data['materials_received'] is True
    assert response.data['progress'] == 17
    project.refresh_from_db()
    assert project.progress == 17
    assert project.version == 2


def test_set_unknown_criterion_rejected(api_client, project):
    response = api_client.post(
        detail_url(project, 'set-criterion/'),
        {'key': 'progress', 'value': True},
        format='json'
    )
    assert response.status_code == 400


def test_set_criterion_model_rejects_unknown_key(project):
    from domain.shared.exceptions import ValidationException

    with pytest.raises(ValidationException):
        project.set_criterion('paid', True)


def test_toggle_material_ordering(api_client, project):
    url = detail_url(project, 'toggle-material-ordering/')

    assert api_client.post(url).data['material_ordering_activated'] is True
    assert api_client.post(url).data['material_ordering_activated'] is False


def test_delete_cascades(api_client, make_project, make_delivery, make_material):
    doomed = make_project('Sports Complex Extension')
    other = make_project('University Science Building')

    primary_event = make_delivery(project=doomed, day=date(2025, 5, 26))
    shared_event = make_delivery(project=other, day=date(2025, 5, 27), involved=[doomed])
    make_material(doomed)
    BOQItem.objects.create(project=doomed, section='Steel', description='Columns', unit='t', quantity=2)

    response = api_client.delete(detail_url(doomed))

    assert response.status_code == 204
    assert not Project.objects.filter(id=doomed.id).exists()
    assert not Delivery.objects.filter(id=primary_event.id).exists()
    assert Delivery.objects.filter(id=shared_event.id).exists()
    assert shared_event.projects_involved.count() == 0
    assert not MissingMaterial.objects.filter(project_id=doomed.id).exists()
    assert not BOQItem.objects.exists()


def test_history(api_client, project):
    api_client.patch(detail_url(project), {'status': 'completed'}, format='json')

    response = api_client.get(detail_url(project, 'history/'))

    assert response.status_code == 200
    assert [h['type'] for h in response.data] == ['~', '+']
    assert response.data[0]['status'] == 'completed'


def test_unknown_project_is_not_found(api_client):
    response = api_client.get('/api/v1/projects/00000000-0000-0000-0000-000000000000/')

    assert response.status_code == 404
    assert 'detail' in response.data
