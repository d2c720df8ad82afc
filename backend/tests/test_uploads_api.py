"""
Tests for project uploads and the BOQ import task.

Tests cover:
- Multipart upload fills file metadata
- BOQ uploads are parsed after commit (eager Celery in tests)
- Failed imports keep the error in metadata
- Re-processing rules
"""

import io
from decimal import Decimal

import openpyxl
import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from django.db import DatabaseError
from django.test import override_settings

from application.tasks.boq_tasks import import_boq_from_excel
from infrastructure.persistence.models import BOQItem, Upload

pytestmark = pytest.mark.django_db

URL = '/api/v1/uploads/'

XLSX = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


def build_xlsx(rows):
    wb = openpyxl.Workbook()
    ws = wb.active
    for row in rows:
        ws.append(row)
    buffer = io.BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


BOQ_ROWS = [
    ['Section', 'Description', 'Unit', 'Quantity', 'Rate'],
    ['Steelwork', None, None, None, None],
    [None, 'Columns HEA 200', 'kg', 1200, 2.4],
    [None, 'Beams IPE 300', 'kg', '850,5', 2.1],
    [None, None, None, None, None],
    ['Anchors', None, None, None, None],
    [None, 'M20 anchor bolts', 'pcs', 24, None],
    [None, 'Broken row', 'pcs', 'many', 1],
]


def boq_file(name='boq.xlsx', rows=BOQ_ROWS):
    return SimpleUploadedFile(name, build_xlsx(rows), content_type=XLSX)


def upload(api_client, project, file, upload_type='boq'):
    return api_client.post(URL, {
        'project': str(project.id),
        'upload_type': upload_type,
        'file': file,
    }, format='multipart')


def test_upload_fills_metadata(api_client, project):
    file = SimpleUploadedFile('drawing.pdf', b'%PDF-1.4 test', content_type='application/pdf')

    response = upload(api_client, project, file, upload_type='drawing')

    assert response.status_code == 201
    assert response.data['file_name'] == 'drawing.pdf'
    assert response.data['file_size'] == len(b'%PDF-1.4 test')
    assert response.data['file_type'] == 'application/pdf'
    assert response.data['status'] == 'pending'
    assert response.data['file_url'].endswith('drawing.pdf')

    stored = Upload.objects.get()
    assert stored.file_path == f'uploads/{project.id}/drawing.pdf'


def test_boq_requires_excel(api_client, project):
    file = SimpleUploadedFile('boq.csv', b'a;b', content_type='text/csv')

    response = upload(api_client, project, file)

    assert response.status_code == 400
    assert 'file' in response.data


@override_settings(UPLOAD_MAX_SIZE=10)
def test_file_size_limit(api_client, project):
    file = SimpleUploadedFile('notes.txt', b'x' * 11, content_type='text/plain')

    response = upload(api_client, project, file, upload_type='document')

    assert response.status_code == 400
    assert 'file' in response.data


def test_boq_upload_is_imported_after_commit(api_client, project, django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True) as callbacks:
        response = upload(api_client, project, boq_file())

    assert response.status_code == 201
    assert len(callbacks) >= 1

    stored = Upload.objects.get()
    assert stored.status == 'processed'
    assert stored.metadata['imported_items'] == 3
    assert stored.metadata['summary'] == {
        'total_rows': 4,
        'valid_rows': 3,
        'error_rows': 1,
        'errors_count': 1,
    }
    assert stored.metadata['errors'][0]['column'] == 'quantity'

    items = list(BOQItem.objects.filter(project=project).order_by('section', 'position'))
    assert [(i.section, i.position, i.description) for i in items] == [
        ('Anchors', 1, 'M20 anchor bolts'),
        ('Steelwork', 1, 'Columns HEA 200'),
        ('Steelwork', 2, 'Beams IPE 300'),
    ]
    assert items[0].amount is None
    assert items[2].quantity == Decimal('850.5')
    assert items[1].amount == Decimal('2880.00')


def test_non_boq_upload_is_not_processed(api_client, project, django_capture_on_commit_callbacks):
    file = SimpleUploadedFile('photo.png', b'\x89PNG', content_type='image/png')

    with django_capture_on_commit_callbacks(execute=True):
        upload(api_client, project, file, upload_type='other')

    assert Upload.objects.get().status == 'pending'
    assert not BOQItem.objects.exists()


def test_missing_columns_fail_import(api_client, project):
    rows = [['Section', 'Unit'], ['Steelwork', 'kg']]
    response = upload(api_client, project, boq_file(rows=rows))

    result = import_boq_from_excel(response.data['id'])

    stored = Upload.objects.get()
    assert stored.status == 'failed'
    assert 'description' in stored.metadata['error']
    assert result['error'] == stored.metadata['error']


def test_not_a_workbook_fails_import(api_client, project):
    response = upload(api_client, project, SimpleUploadedFile('boq.xlsx', b'not a zip', content_type=XLSX))

    import_boq_from_excel(response.data['id'])

    stored = Upload.objects.get()
    assert stored.status == 'failed'
    assert stored.metadata['imported_items'] == 0


def test_workbook_without_valid_rows_fails(api_client, project):
    rows = [['Description', 'Quantity'], ['Columns', 'n/a']]
    response = upload(api_client, project, boq_file(rows=rows))

    import_boq_from_excel(response.data['id'])

    stored = Upload.objects.get()
    assert stored.status == 'failed'
    assert stored.metadata['summary']['valid_rows'] == 0
    assert len(stored.metadata['errors']) == 1


def test_reimport_replaces_items(api_client, project, django_capture_on_commit_callbacks):
    response = upload(api_client, project, boq_file())
    import_boq_from_excel(response.data['id'])
    assert BOQItem.objects.count() == 3

    with django_capture_on_commit_callbacks(execute=True):
        process = api_client.post(f"{URL}{response.data['id']}/process/")

    assert process.status_code == 202
    assert process.data['status'] == 'pending'
    assert BOQItem.objects.count() == 3
    assert Upload.objects.get().status == 'processed'


def test_process_rejects_non_boq(api_client, project):
    file = SimpleUploadedFile('datasheet.pdf', b'%PDF', content_type='application/pdf')
    response = upload(api_client, project, file, upload_type='document')

    process = api_client.post(f"{URL}{response.data['id']}/process/")

    assert process.status_code == 409
    assert process.data['error'] == 'INVALID_OPERATION'


def test_process_rejects_running_import(api_client, project):
    response = upload(api_client, project, boq_file())
    Upload.objects.filter(id=response.data['id']).update(status='processing')

    process = api_client.post(f"{URL}{response.data['id']}/process/")

    assert process.status_code == 409
    assert process.data['details'] == {'current_state': 'processing'}


def test_change_upload_type(api_client, project):
    file = SimpleUploadedFile('datasheet.pdf', b'%PDF', content_type='application/pdf')
    response = upload(api_client, project, file, upload_type='other')

    patched = api_client.patch(f"{URL}{response.data['id']}/", {'upload_type': 'document'}, format='json')

    assert patched.status_code == 200
    assert Upload.objects.get().upload_type == 'document'


def test_delete_removes_stored_file(api_client, project, django_capture_on_commit_callbacks):
    file = SimpleUploadedFile('datasheet.pdf', b'%PDF', content_type='application/pdf')
    response = upload(api_client, project, file, upload_type='document')
    stored = Upload.objects.get()
    storage, name = stored.file.storage, stored.file.name
    assert storage.exists(name)

    with django_capture_on_commit_callbacks(execute=True):
        deleted = api_client.delete(f"{URL}{response.data['id']}/")

    assert deleted.status_code == 204
    assert not storage.exists(name)


@pytest.mark.parametrize('value', ['NaN', 'Infinity', '-inf', '1e30'])
def test_non_finite_quantity_is_a_row_error(api_client, project, value):
    rows = [['Description', 'Quantity'], ['Columns', value], ['Beams', 2]]
    response = upload(api_client, project, boq_file(rows=rows))

    import_boq_from_excel(response.data['id'])

    stored = Upload.objects.get()
    assert stored.status == 'processed'
    assert stored.metadata['imported_items'] == 1
    assert stored.metadata['errors'][0]['column'] == 'quantity'


def test_quantity_and_rate_are_rounded_before_amount(api_client, project):
    rows = [['Description', 'Quantity', 'Rate'], ['Columns', '3.0004', '2.345']]
    response = upload(api_client, project, boq_file(rows=rows))

    import_boq_from_excel(response.data['id'])

    item = BOQItem.objects.get()
    assert item.quantity == Decimal('3.000')
    assert item.rate == Decimal('2.35')
    assert item.amount == Decimal('7.05')
    assert item.amount == (item.quantity * item.rate).quantize(Decimal('0.01'))


def test_save_error_fails_upload_and_allows_reprocessing(api_client, project, monkeypatch):
    response = upload(api_client, project, boq_file())

    def broken_import(*args, **kwargs):
        raise DatabaseError('numeric field overflow')

    monkeypatch.setattr('application.services.boq.import_boq_rows', broken_import)
    result = import_boq_from_excel(response.data['id'])

    stored = Upload.objects.get()
    assert stored.status == 'failed'
    assert stored.metadata['error'] == 'numeric field overflow'
    assert result['error'] == 'numeric field overflow'

    process = api_client.post(f"{URL}{response.data['id']}/process/")
    assert process.status_code == 202


def test_project_delete_removes_stored_files(api_client, project, django_capture_on_commit_callbacks):
    file = SimpleUploadedFile('drawing.pdf', b'%PDF', content_type='application/pdf')
    upload(api_client, project, file, upload_type='drawing')
    stored = Upload.objects.get()
    storage, name = stored.file.storage, stored.file.name
    assert storage.exists(name)

    with django_capture_on_commit_callbacks(execute=True):
        deleted = api_client.delete(f'/api/v1/projects/{project.id}/')

    assert deleted.status_code == 204
    assert not Upload.objects.exists()
    assert not storage.exists(name)
