"""
Small Jobs ORM Models.

Lightweight ad-hoc tasks, independent of project criteria.
"""

from django.db import models

from .base import BaseModel


class SmallJobStatusChoices(models.TextChoices):
    PENDING = 'pending', 'Ожидает'
    IN_PROGRESS = 'in-progress', 'В работе'
    COMPLETED = 'completed', 'Выполнено'


class SmallJob(BaseModel):
    """Small job, optionally referencing a customer order number."""

    title = models.CharField(
        max_length=255,
        verbose_name="Название"
    )
    order_number = models.CharField(
        max_length=50,
        null=True,
        blank=True,
        verbose_name="Номер заказа"
    )
    status = models.CharField(
        max_length=20,
        choices=SmallJobStatusChoices.choices,
        default=SmallJobStatusChoices.PENDING,
        db_index=True,
        verbose_name="Статус"
    )

    class Meta:
        db_table = 'small_jobs'
        verbose_name = 'Мелкая работа'
        verbose_name_plural = 'Мелкие работы'
        ordering = ['created_at']

    def __str__(self):
        return self.title
