"""
Bill of Quantities ORM Models.
"""

from decimal import Decimal, ROUND_HALF_UP

from django.db import models

from .base import BaseModel
from .project import Project


class BOQItem(BaseModel):
    """
    BOQ line of a project.

    ``amount`` is quantity * rate rounded to cents, empty while the rate is
    unknown.
    """

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='boq_items',
        verbose_name="Проект"
    )
    section = models.CharField(
        max_length=255,
        verbose_name="Раздел"
    )
    position = models.PositiveIntegerField(
        default=0,
        verbose_name="Позиция"
    )
    description = models.TextField(
        verbose_name="Описание работ"
    )
    unit = models.CharField(
        max_length=20,
        verbose_name="Ед. изм."
    )
    quantity = models.DecimalField(
        max_digits=14,
        decimal_places=3,
        verbose_name="Количество"
    )
    rate = models.DecimalField(
        max_digits=14,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name="Расценка"
    )
    amount = models.DecimalField(
        max_digits=18,
        decimal_places=2,
        null=True,
        blank=True,
        verbose_name="Сумма"
    )

    class Meta:
        db_table = 'boq_items'
        verbose_name = 'Позиция ВОР'
        verbose_name_plural = 'Позиции ВОР'
        ordering = ['section', 'position', 'created_at']

    def __str__(self):
        return f"{self.section}: {self.description[:50]}"

    @staticmethod
    def calculate_amount(quantity, rate):
        if quantity is None or rate is None:
            return None
        return (Decimal(quantity) * Decimal(rate)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)

    def save(self, *args, **kwargs):
        self.amount = self.calculate_amount(self.quantity, self.rate)
        update_fields = kwargs.get('update_fields')
        if update_fields is not None:
            kwargs['update_fields'] = set(update_fields) | {'amount'}
        super().save(*args, **kwargs)
