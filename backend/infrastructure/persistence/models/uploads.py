"""
Upload ORM Models.

Files attached to projects (BOQ spreadsheets, drawings, documents).
"""

import mimetypes
import os

from django.db import models

from .base import BaseModel
from .project import Project


class UploadTypeChoices(models.TextChoices):
    BOQ = 'boq', 'Ведомость объёмов работ'
    DRAWING = 'drawing', 'Чертёж'
    DOCUMENT = 'document', 'Документ'
    OTHER = 'other', 'Прочее'


class UploadStatusChoices(models.TextChoices):
    PENDING = 'pending', 'Ожидает обработки'
    PROCESSING = 'processing', 'Обрабатывается'
    PROCESSED = 'processed', 'Обработан'
    FAILED = 'failed', 'Ошибка'


def upload_to(instance, filename):
    return f'uploads/{instance.project_id}/{filename}'


class Upload(BaseModel):
    """
    Uploaded project file.

    file_name/file_path/file_size/file_type are filled in from ``file``
    on first save.
    """

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='uploads',
        verbose_name="Проект"
    )
    file = models.FileField(
        upload_to=upload_to,
        max_length=500,
        verbose_name="Файл"
    )
    file_name = models.CharField(
        max_length=255,
        blank=True,
        verbose_name="Имя файла"
    )
    file_path = models.CharField(
        max_length=500,
        blank=True,
        verbose_name="Путь"
    )
    file_size = models.BigIntegerField(
        default=0,
        verbose_name="Размер, байт"
    )
    file_type = models.CharField(
        max_length=100,
        blank=True,
        verbose_name="MIME тип"
    )
    upload_type = models.CharField(
        max_length=20,
        choices=UploadTypeChoices.choices,
        default=UploadTypeChoices.OTHER,
        db_index=True,
        verbose_name="Тип загрузки"
    )
    status = models.CharField(
        max_length=20,
        choices=UploadStatusChoices.choices,
        default=UploadStatusChoices.PENDING,
        verbose_name="Статус"
    )
    metadata = models.JSONField(
        default=dict,
        blank=True,
        verbose_name="Метаданные"
    )

    class Meta:
        db_table = 'uploads'
        verbose_name = 'Загруженный файл'
        verbose_name_plural = 'Загруженные файлы'
        ordering = ['-created_at']

    def __str__(self):
        return self.file_name or str(self.id)

    def save(self, *args, **kwargs):
        adding = self._state.adding
        if adding and self.file and not self.file_name:
            self.file_name = os.path.basename(self.file.name)
            self.file_size = self.file.size or 0
            content_type = getattr(self.file.file, 'content_type', None)
            self.file_type = content_type or mimetypes.guess_type(self.file_name)[0] or ''

        super().save(*args, **kwargs)

        # Storage decides the final name, so the path is known only after save
        if adding and self.file and self.file_path != self.file.name:
            self.file_path = self.file.name
            type(self).objects.filter(pk=self.pk).update(file_path=self.file_path)

    def mark(self, status, **metadata):
        """Set processing status and merge extra metadata."""
        self.status = status
        if metadata:
            self.metadata = {**(self.metadata or {}), **metadata}
        self.save(update_fields=['status', 'metadata', 'updated_at'])
