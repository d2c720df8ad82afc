"""
Upload Serializers.
"""

from django.conf import settings
from rest_framework import serializers

from infrastructure.persistence.models import Upload, UploadTypeChoices
from .base import BaseModelSerializer


BOQ_EXTENSIONS = ('.xlsx', '.xlsm')


class UploadSerializer(BaseModelSerializer):
    """Uploaded file; file metadata is filled in from the file itself."""

    upload_type_display = serializers.CharField(
        source='get_upload_type_display',
        read_only=True
    )
    status_display = serializers.CharField(
        source='get_status_display',
        read_only=True
    )
    file_url = serializers.SerializerMethodField()

    class Meta:
        model = Upload
        fields = [
            'id', 'project', 'file', 'file_url',
            'file_name', 'file_path', 'file_size', 'file_type',
            'upload_type', 'upload_type_display',
            'status', 'status_display', 'metadata',
            'created_at', 'updated_at',
        ]
        read_only_fields = [
            'id', 'file_name', 'file_path', 'file_size', 'file_type',
            'status', 'metadata', 'created_at', 'updated_at',
        ]
        extra_kwargs = {
            'file': {'write_only': True},
        }

    def get_file_url(self, obj):
        if not obj.file:
            return None
        request = self.context.get('request')
        url = obj.file.url
        return request.build_absolute_uri(url) if request else url

    def validate_file(self, value):
        max_size = getattr(settings, 'UPLOAD_MAX_SIZE', 20 * 1024 * 1024)
        if value.size > max_size:
            raise serializers.ValidationError(
                f'Файл слишком большой (максимум {max_size // (1024 * 1024)} МБ).'
            )
        return value

    def validate(self, attrs):
        upload_type = attrs.get('upload_type', UploadTypeChoices.OTHER)
        file = attrs.get('file')
        if upload_type == UploadTypeChoices.BOQ and file is not None:
            if not file.name.lower().endswith(BOQ_EXTENSIONS):
                raise serializers.ValidationError({
                    'file': 'Для ВОР поддерживаются только файлы Excel (.xlsx).'
                })
        return attrs


class UploadUpdateSerializer(BaseModelSerializer):
    """Only classification can change after upload."""

    class Meta:
        model = Upload
        fields = ['id', 'upload_type']
        read_only_fields = ['id']
