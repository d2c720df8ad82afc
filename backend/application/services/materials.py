"""
Materials services.

Bulk replace of a project's materials table and the per-project overviews
(missing / ordered materials pages).
"""

import logging

from django.db import transaction
from django.utils import timezone

from domain.materials.grouping import group_by_project, split_rows
from domain.shared.value_objects import MaterialStatus
from infrastructure.persistence.models import (
    MissingMaterial,
    Project,
    ProjectStatusChoices,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def replace_project_materials(project, rows, user=None):
    """
    Replace all materials of ``project`` with the submitted rows.

    Incomplete rows (blank name or grade, quantity <= 0) are skipped.
    Returns ``(created_materials, skipped_count)``.
    """
    kept, skipped = split_rows(rows)

    deleted, _ = MissingMaterial.objects.filter(project=project).delete()

    created = []
    for row in kept:
        status = MaterialStatus(row.get('status') or MaterialStatus.MISSING.value)
        material = MissingMaterial(
            project=project,
            material_name=str(row['material_name']).strip(),
            steel_grade=str(row['steel_grade']).strip(),
            quantity=row['quantity'],
            unit=row.get('unit') or 'pieces',
            status=status.value,
            created_by=user,
            updated_by=user,
        )
        if status == MaterialStatus.ORDERED:
            material.ordered_at = timezone.now()
        material.save()
        created.append(material)

    logger.info(
        f"Replaced materials of project {project.number}: "
        f"{deleted} removed, {len(created)} saved, {skipped} skipped"
    )
    return created, skipped


def materials_overview(status=MaterialStatus.ORDERED.value):
    """
    Active projects (by name) that have materials in ``status``, each with
    those materials in creation order.
    """
    projects = list(
        Project.objects.filter(status=ProjectStatusChoices.ACTIVE).order_by('name')
    )
    materials = MissingMaterial.objects.filter(
        project__in=projects,
        status=status,
    ).order_by('created_at')
    return group_by_project(projects, materials, status=status)
