"""
Upload Views.

Project file uploads; BOQ spreadsheets are parsed in the background.
"""

import logging

from django.db import transaction
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response

from application.tasks.boq_tasks import import_boq_from_excel
from domain.shared.exceptions import InvalidOperationException
from infrastructure.persistence.models import Upload, UploadStatusChoices, UploadTypeChoices
from ..serializers.uploads import UploadSerializer, UploadUpdateSerializer
from .base import BaseModelViewSet

logger = logging.getLogger(__name__)


def queue_boq_import(upload):
    """Start BOQ parsing once the upload row is committed."""
    upload_id = str(upload.id)
    transaction.on_commit(lambda: import_boq_from_excel.delay(upload_id))
    logger.info(f"Queued BOQ import for upload {upload_id}")


class UploadViewSet(BaseModelViewSet):
    """
    ViewSet for project files.

    Endpoints:
    - GET /uploads/ - list (filters: project, upload_type, status)
    - POST /uploads/ - multipart upload (file, project, upload_type)
    - GET /uploads/{id}/ - details
    - PATCH /uploads/{id}/ - change upload_type
    - DELETE /uploads/{id}/ - delete upload and stored file
    - POST /uploads/{id}/process/ - (re)run BOQ import
    """

    queryset = Upload.objects.select_related('project')
    parser_classes = [MultiPartParser, FormParser, JSONParser]
    serializer_classes = {
        'update': UploadUpdateSerializer,
        'partial_update': UploadUpdateSerializer,
        'default': UploadSerializer,
    }
    filterset_fields = ['project', 'upload_type', 'status']
    search_fields = ['file_name']
    ordering_fields = ['created_at', 'file_name', 'file_size']
    ordering = ['-created_at']

    def perform_create(self, serializer):
        super().perform_create(serializer)
        upload = serializer.instance
        logger.info(f"Uploaded {upload.file_name} ({upload.file_size} bytes) to project {upload.project_id}")
        if upload.upload_type == UploadTypeChoices.BOQ:
            queue_boq_import(upload)

    @action(detail=True, methods=['post'])
    def process(self, request, pk=None):
        """Re-queue parsing of a BOQ upload."""
        upload = self.get_object()
        if upload.upload_type != UploadTypeChoices.BOQ:
            raise InvalidOperationException(
                'Обрабатывать можно только загрузки типа BOQ.',
                current_state=upload.upload_type
            )
        if upload.status == UploadStatusChoices.PROCESSING:
            raise InvalidOperationException(
                'Файл уже обрабатывается.',
                current_state=upload.status
            )

        upload.mark(UploadStatusChoices.PENDING)
        queue_boq_import(upload)
        return Response(UploadSerializer(upload, context={'request': request}).data, status=status.HTTP_202_ACCEPTED)
