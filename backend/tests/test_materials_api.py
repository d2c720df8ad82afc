"""
Tests for the materials API.

Tests cover:
- CRUD validation
- Bulk replace of a project's materials with skipped rows
- Status transitions, including rejected ones (409)
- Ordered/missing overview grouped by active project
"""

from decimal import Decimal

import pytest

from infrastructure.persistence.models import MissingMaterial

pytestmark = pytest.mark.django_db

URL = '/api/v1/materials/'


def project_materials_url(project):
    return f'/api/v1/projects/{project.id}/missing-materials/'


def test_create_starts_as_missing(api_client, project):
    response = api_client.post(URL, {
        'project': str(project.id),
        'material_name': 'HEA 200',
        'steel_grade': 'S355',
        'quantity': '12',
        'unit': 'pieces',
        'status': 'ordered',
    }, format='json')

    assert response.status_code == 201
    assert response.data['status'] == 'missing'
    assert response.data['project_name'] == project.name


@pytest.mark.parametrize('field, value', [
    ('quantity', '0'),
    ('quantity', '-2'),
    ('material_name', ''),
    ('steel_grade', ''),
    ('unit', 'kg'),
])
def test_create_rejects_invalid_rows(api_client, project, field, value):
    payload = {
        'project': str(project.id),
        'material_name': 'HEA 200',
        'steel_grade': 'S355',
        'quantity': '3',
        'unit': 'meters',
    }
    payload[field] = value

    response = api_client.post(URL, payload, format='json')

    assert response.status_code == 400
    assert field in response.data


def test_replace_project_materials(api_client, project, make_project, make_material):
    make_material(project, material_name='Old row')
    other = make_project('Metro Station Renovation')
    untouched = make_material(other)

    response = api_client.put(project_materials_url(project), {
        'materials': [
            {'material_name': 'IPE 300', 'steel_grade': 'S355', 'quantity': '6', 'unit': 'pieces'},
            {'material_name': 'Flat bar', 'steel_grade': 'S275', 'quantity': '36.5', 'unit': 'meters'},
            {'material_name': '', 'steel_grade': 'S355', 'quantity': '1'},
            {'material_name': 'CHS', 'steel_grade': '', 'quantity': '1'},
            {'material_name': 'CHS', 'steel_grade': 'S235', 'quantity': '0'},
        ],
    }, format='json')

    assert response.status_code == 200
    assert response.data['saved'] == 2
    assert response.data['skipped'] == 3

    names = list(project.missing_materials.order_by('created_at').values_list('material_name', flat=True))
    assert names == ['IPE 300', 'Flat bar']
    assert MissingMaterial.objects.filter(id=untouched.id).exists()

    listed = api_client.get(project_materials_url(project))
    assert [m['material_name'] for m in listed.data] == ['IPE 300', 'Flat bar']
    assert Decimal(listed.data[1]['quantity']) == Decimal('36.5')


def test_replace_with_empty_list_clears(api_client, project, make_material):
    make_material(project)

    response = api_client.put(project_materials_url(project), {'materials': []}, format='json')

    assert response.status_code == 200
    assert response.data == {'materials': [], 'saved': 0, 'skipped': 0}
    assert not project.missing_materials.exists()


@pytest.mark.parametrize('path', [
    ['quoted', 'ordered', 'missing'],
    ['ordered', 'missing', 'quoted', 'missing'],
])
def test_allowed_status_paths(api_client, project, make_material, path):
    material = make_material(project)

    for target in path:
        response = api_client.post(f'{URL}{material.id}/set-status/', {'status': target}, format='json')
        assert response.status_code == 200
        assert response.data['status'] == target

    material.refresh_from_db()
    assert material.ordered_at is None


def test_ordered_sets_timestamp(api_client, project, make_material):
    material = make_material(project)

    response = api_client.post(f'{URL}{material.id}/set-status/', {'status': 'ordered'}, format='json')

    assert response.data['ordered_at'] is not None


def test_illegal_transition_is_conflict(api_client, project, make_material):
    material = make_material(project, status='ordered')

    response = api_client.post(f'{URL}{material.id}/set-status/', {'status': 'quoted'}, format='json')

    assert response.status_code == 409
    assert response.data['error'] == 'INVALID_STATUS_TRANSITION'
    assert response.data['details']['allowed_transitions'] == ['missing']
    material.refresh_from_db()
    assert material.status == 'ordered'


def test_unknown_status_rejected(api_client, project, make_material):
    material = make_material(project)
    response = api_client.post(f'{URL}{material.id}/set-status/', {'status': 'lost'}, format='json')
    assert response.status_code == 400


def test_mark_missing(api_client, project, make_material):
    material = make_material(project, status='ordered')

    response = api_client.post(f'{URL}{material.id}/mark-missing/')

    assert response.status_code == 200
    assert response.data['status'] == 'missing'


def test_mark_missing_is_idempotent(api_client, project, make_material):
    material = make_material(project)
    response = api_client.post(f'{URL}{material.id}/mark-missing/')
    assert response.status_code == 200
    material.refresh_from_db()
    assert material.version == 1


def test_list_filters(api_client, project, make_project, make_material):
    other = make_project('Riverside Apartments')
    make_material(project, status='quoted')
    make_material(other)

    response = api_client.get(URL, {'project': str(project.id), 'status': 'quoted'})

    assert len(response.data['results']) == 1
    assert response.data['results'][0]['status'] == 'quoted'


def test_overview_groups_active_projects_by_name(api_client, make_project, make_material):
    zeta = make_project('Zeta Tower')
    alpha = make_project('Alpha Bridge')
    paused = make_project('Paused Depot', status='on-hold')
    bare = make_project('No Orders Yet')

    first = make_material(zeta, material_name='Z1', status='ordered')
    make_material(alpha, material_name='A1', status='ordered')
    second = make_material(zeta, material_name='Z2', status='ordered')
    make_material(zeta, material_name='Z3', status='missing')
    make_material(paused, status='ordered')
    make_material(bare, status='quoted')

    response = api_client.get(f'{URL}overview/')

    assert response.status_code == 200
    assert [g['project']['name'] for g in response.data] == ['Alpha Bridge', 'Zeta Tower']
    assert [m['id'] for m in response.data[1]['materials']] == [str(first.id), str(second.id)]


def test_overview_for_missing_status(api_client, project, make_material):
    make_material(project, status='missing')

    response = api_client.get(f'{URL}overview/', {'status': 'missing'})

    assert len(response.data) == 1
    assert response.data[0]['project']['id'] == str(project.id)


def test_overview_rejects_unknown_status(api_client):
    assert api_client.get(f'{URL}overview/', {'status': 'nope'}).status_code == 400
