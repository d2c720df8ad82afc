"""
Logistics ORM Models.

Delivery and pickup events tied to a primary project and, optionally,
to several additional projects served by the same trip.
"""

from django.db import models

from .base import BaseModel
from .project import Project


class DeliveryTypeChoices(models.TextChoices):
    """Logistics event type."""

    DELIVERY = 'delivery', 'Доставка'
    PICKUP = 'pickup', 'Вывоз'


class Delivery(BaseModel):
    """
    Delivery/Pickup event.

    ``project_name`` is a snapshot of the primary project's name so that the
    timeline stays readable for events entered without a project.
    Deleting the primary project deletes the event; deleting an involved
    project only removes it from ``projects_involved``.
    """

    type = models.CharField(
        max_length=20,
        choices=DeliveryTypeChoices.choices,
        default=DeliveryTypeChoices.DELIVERY,
        db_index=True,
        verbose_name="Тип"
    )
    date = models.DateField(
        db_index=True,
        verbose_name="Дата"
    )
    time = models.TimeField(
        verbose_name="Время"
    )

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name='deliveries',
        verbose_name="Проект"
    )
    project_name = models.CharField(
        max_length=500,
        blank=True,
        verbose_name="Наименование проекта"
    )
    projects_involved = models.ManyToManyField(
        Project,
        blank=True,
        related_name='involved_deliveries',
        verbose_name="Дополнительные проекты"
    )

    location = models.CharField(
        max_length=500,
        blank=True,
        verbose_name="Адрес"
    )

    class Meta:
        db_table = 'deliveries'
        verbose_name = 'Доставка/вывоз'
        verbose_name_plural = 'Доставки/вывозы'
        ordering = ['date', 'time', 'created_at']
        indexes = [
            models.Index(fields=['date', 'time'], name='deliveries_date_time_idx'),
        ]

    def __str__(self):
        return f"{self.get_type_display()} {self.date} {self.project_name}"

    @property
    def involved_projects_ordered(self):
        # reads the prefetch_related('projects_involved') cache
        return sorted(self.projects_involved.all(), key=lambda p: p.name)

    @property
    def projects_involved_names(self):
        return [p.name for p in self.involved_projects_ordered]

    @property
    def additional_projects_count(self):
        return len(self.projects_involved.all())

    def set_involved_projects(self, projects):
        """Replace involved projects; the primary project is never listed twice."""
        projects = [p for p in projects if p.pk != self.project_id]
        self.projects_involved.set(projects)

    def save(self, *args, **kwargs):
        if self.project_id:
            self.project_name = self.project.name
        super().save(*args, **kwargs)
