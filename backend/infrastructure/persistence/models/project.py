"""
Project ORM Models.

Models for project tracking: completion criteria and derived progress.
"""

from django.db import models, transaction
from django.utils import timezone

from domain.project import calculate_progress, criteria_breakdown
from domain.shared.exceptions import ValidationException
from domain.shared.value_objects import ProjectCriterion

from .base import BaseModelWithHistory


class ProjectStatusChoices(models.TextChoices):
    """Project status choices."""

    ACTIVE = 'active', 'Активен'
    COMPLETED = 'completed', 'Завершён'
    ON_HOLD = 'on-hold', 'Приостановлен'


class ProjectSequence(models.Model):
    """Per-year sequence for Project.number values."""

    key = models.CharField(
        max_length=50,
        primary_key=True,
        verbose_name="Ключ"
    )
    last_value = models.PositiveIntegerField(
        default=0,
        verbose_name="Последнее значение"
    )

    class Meta:
        db_table = 'project_sequences'
        verbose_name = 'Счётчик номеров проектов'
        verbose_name_plural = 'Счётчики номеров проектов'


class Project(BaseModelWithHistory):
    """
    Project - a tracked unit of fabrication work.

    Progress is derived from six boolean completion criteria and is
    recalculated on every save.
    """

    # Identification
    number = models.CharField(
        max_length=20,
        unique=True,
        blank=True,
        verbose_name="Номер проекта",
        help_text="PRJ-<год>-<порядковый номер>, присваивается автоматически"
    )
    name = models.CharField(
        max_length=500,
        verbose_name="Наименование"
    )
    description = models.TextField(
        blank=True,
        verbose_name="Описание"
    )

    status = models.CharField(
        max_length=20,
        choices=ProjectStatusChoices.choices,
        default=ProjectStatusChoices.ACTIVE,
        db_index=True,
        verbose_name="Статус"
    )

    # Completion criteria
    documentation_done = models.BooleanField(
        default=False,
        verbose_name="Документация готова"
    )
    materials_ordered = models.BooleanField(
        default=False,
        verbose_name="Материалы заказаны"
    )
    materials_received = models.BooleanField(
        default=False,
        verbose_name="Материалы получены"
    )
    design_approved = models.BooleanField(
        default=False,
        verbose_name="Проект согласован"
    )
    quality_checked = models.BooleanField(
        default=False,
        verbose_name="Контроль качества пройден"
    )
    client_approved = models.BooleanField(
        default=False,
        verbose_name="Принято клиентом"
    )

    # Red pulsing marker in the sidebar: someone is ordering materials right now
    material_ordering_activated = models.BooleanField(
        default=False,
        verbose_name="Идёт заказ материалов"
    )

    progress = models.PositiveSmallIntegerField(
        default=0,
        verbose_name="Процент выполнения"
    )

    class Meta:
        db_table = 'projects'
        verbose_name = 'Проект'
        verbose_name_plural = 'Проекты'
        ordering = ['name']
        indexes = [
            models.Index(fields=['status', 'name'], name='projects_status_name_idx'),
        ]

    def __str__(self):
        return f"{self.number} {self.name}".strip()

    @property
    def is_active(self):
        return self.status == ProjectStatusChoices.ACTIVE

    @property
    def criteria(self):
        """Criteria flags keyed by criterion name."""
        return {key: getattr(self, key) for key in ProjectCriterion.keys()}

    def get_criteria_breakdown(self):
        return criteria_breakdown(self.criteria)

    def set_criterion(self, key, value, user=None):
        """Set a single completion criterion and save with recalculated progress."""
        if key not in ProjectCriterion.keys():
            raise ValidationException(
                f"Unknown project criterion '{key}'",
                field='key',
                value=key
            )
        setattr(self, key, bool(value))
        update_fields = [key, 'updated_at']
        if user is not None:
            self.updated_by = user
            update_fields.append('updated_by')
        self.save(update_fields=update_fields)

    def toggle_material_ordering(self, user=None):
        self.material_ordering_activated = not self.material_ordering_activated
        update_fields = ['material_ordering_activated', 'updated_at']
        if user is not None:
            self.updated_by = user
            update_fields.append('updated_by')
        self.save(update_fields=update_fields)

    @classmethod
    def _allocate_number(cls):
        """Next PRJ-<year>-NNN number, never reusing an issued one."""
        year = timezone.localdate().year
        prefix = f'PRJ-{year}-'

        with transaction.atomic():
            seq, _ = ProjectSequence.objects.select_for_update().get_or_create(
                key=f'project_{year}'
            )

            # На случай ручных правок: не выдавать уже существующие номера.
            existing = cls.objects.filter(number__startswith=prefix).values_list('number', flat=True)
            max_existing = max(
                (int(n[len(prefix):]) for n in existing if n[len(prefix):].isdigit()),
                default=0
            )
            if max_existing > seq.last_value:
                seq.last_value = max_existing

            seq.last_value += 1
            seq.save(update_fields=['last_value'])

        return f'{prefix}{seq.last_value:03d}'

    def save(self, *args, **kwargs):
        if not self.number:
            self.number = self._allocate_number()

        self.progress = calculate_progress(self.criteria).percent

        update_fields = kwargs.get('update_fields')
        if update_fields is not None:
            kwargs['update_fields'] = set(update_fields) | {'progress'}

        super().save(*args, **kwargs)
