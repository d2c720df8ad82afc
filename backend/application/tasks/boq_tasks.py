"""
BOQ Tasks.

Celery tasks for bill-of-quantities imports.
"""

from celery import shared_task
import logging

logger = logging.getLogger(__name__)


@shared_task
def import_boq_from_excel(upload_id: str, replace: bool = True):
    """
    Parse an uploaded BOQ workbook into BOQ items of the upload's project.

    Upload status goes pending -> processing -> processed/failed; counts and
    row errors are stored in ``Upload.metadata``. Any error while reading the
    file or saving items ends in ``failed`` so the upload can be processed again.
    """
    from infrastructure.persistence.models import Upload, UploadStatusChoices, UploadTypeChoices
    from application.services.boq import import_boq_rows
    from application.services.boq_excel import parse_boq_workbook

    try:
        upload = Upload.objects.select_related('project').get(id=upload_id)
    except Upload.DoesNotExist:
        logger.warning(f"BOQ import skipped: upload {upload_id} not found")
        return {'error': 'Upload not found'}

    if upload.upload_type != UploadTypeChoices.BOQ:
        logger.warning(f"BOQ import skipped: upload {upload_id} is '{upload.upload_type}'")
        return {'error': 'Upload is not a BOQ'}

    upload.mark(UploadStatusChoices.PROCESSING)

    try:
        with upload.file.open('rb') as fh:
            result = parse_boq_workbook(fh)

        errors = [e.to_dict() for e in result.errors]
        if not result.rows:
            upload.mark(
                UploadStatusChoices.FAILED,
                error='В файле нет корректных строк.',
                imported_items=0,
                summary=result.summary,
                errors=errors,
            )
            return {'upload_id': upload_id, 'items_created': 0, 'errors': errors}

        created = import_boq_rows(upload.project, result.rows, replace=replace, user=upload.created_by)

    except Exception as e:
        logger.error(f"Error importing BOQ upload {upload_id}: {e}")
        upload.mark(UploadStatusChoices.FAILED, error=str(e), imported_items=0)
        return {'upload_id': upload_id, 'error': str(e)}

    upload.mark(
        UploadStatusChoices.PROCESSED,
        imported_items=created,
        summary=result.summary,
        errors=errors,
        error=None,
    )
    logger.info(f"Imported {created} BOQ items from upload {upload.file_name}")

    return {
        'upload_id': upload_id,
        'items_created': created,
        'errors': errors,
    }
