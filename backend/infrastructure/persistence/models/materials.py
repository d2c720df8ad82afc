"""
Materials ORM Models.

Per-project records of required materials that are not in the workshop yet.
"""

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone
from decimal import Decimal

from domain.shared.exceptions import StatusTransitionException
from domain.shared.value_objects import MaterialStatus

from .base import BaseModel
from .project import Project


class MaterialUnitChoices(models.TextChoices):
    PIECES = 'pieces', 'шт'
    METERS = 'meters', 'м'


class MaterialStatusChoices(models.TextChoices):
    """
    Статусы материала.

    - MISSING: материал нужен, но не заказан (начальный статус)
    - QUOTED: запрошено коммерческое предложение
    - ORDERED: заказан у поставщика
    """

    MISSING = 'missing', 'Отсутствует'
    QUOTED = 'quoted', 'Запрошено КП'
    ORDERED = 'ordered', 'Заказано'


class MissingMaterial(BaseModel):
    """A material a project still needs."""

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name='missing_materials',
        verbose_name="Проект"
    )
    material_name = models.CharField(
        max_length=255,
        verbose_name="Материал"
    )
    steel_grade = models.CharField(
        max_length=50,
        verbose_name="Марка стали",
        help_text="Например S355, S275"
    )
    quantity = models.DecimalField(
        max_digits=12,
        decimal_places=3,
        validators=[MinValueValidator(Decimal('0.001'))],
        verbose_name="Количество"
    )
    unit = models.CharField(
        max_length=10,
        choices=MaterialUnitChoices.choices,
        default=MaterialUnitChoices.PIECES,
        verbose_name="Ед. изм."
    )

    status = models.CharField(
        max_length=20,
        choices=MaterialStatusChoices.choices,
        default=MaterialStatusChoices.MISSING,
        db_index=True,
        verbose_name="Статус"
    )
    ordered_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name="Дата заказа"
    )

    class Meta:
        db_table = 'missing_materials'
        verbose_name = 'Недостающий материал'
        verbose_name_plural = 'Недостающие материалы'
        ordering = ['created_at']
        indexes = [
            models.Index(fields=['project', 'status'], name='materials_project_status_idx'),
        ]

    def __str__(self):
        return f"{self.material_name} {self.steel_grade} ({self.quantity} {self.unit})"

    def transition_to(self, target, user=None):
        """
        Move material to another status.

        Raises StatusTransitionException for transitions not allowed by
        MaterialStatus; setting the current status again is a no-op.
        """
        current = MaterialStatus(self.status)
        target = MaterialStatus(target)
        if current == target:
            return False

        if not current.can_transition_to(target):
            raise StatusTransitionException(
                entity_type='MissingMaterial',
                current_status=current.value,
                target_status=target.value,
                allowed_transitions=[s.value for s in current.allowed_transitions],
            )

        self.status = target.value
        if target == MaterialStatus.ORDERED:
            self.ordered_at = timezone.now()
        elif target == MaterialStatus.MISSING:
            self.ordered_at = None

        update_fields = ['status', 'ordered_at', 'updated_at']
        if user is not None:
            self.updated_by = user
            update_fields.append('updated_by')
        self.save(update_fields=update_fields)
        return True
