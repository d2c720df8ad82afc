"""
Materials Domain - Filtering and Grouping.

In-memory helpers for the missing/ordered materials overviews and for
cleaning up rows submitted from the materials table.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Callable, Iterable, List, Mapping, Optional, TypeVar

P = TypeVar('P')
M = TypeVar('M')


@dataclass
class ProjectMaterials:
    """A project together with its materials of one status."""

    project: Any
    materials: List[Any] = field(default_factory=list)


def filter_by_status(materials: Iterable[M], status: Optional[str]) -> List[M]:
    """Keep materials with the given status (all when status is None)."""
    if status is None:
        return list(materials)
    return [m for m in materials if getattr(m, 'status', None) == status]


def group_by_project(
    projects: Iterable[P],
    materials: Iterable[M],
    project_key: Callable[[M], Any] = lambda m: m.project_id,
    status: Optional[str] = None,
) -> List[ProjectMaterials]:
    """
    Group materials under their projects.

    Project order is preserved; projects without matching materials are
    left out. Materials keep their input order inside each group.
    """
    by_project: dict = {}
    for material in filter_by_status(materials, status):
        by_project.setdefault(project_key(material), []).append(material)

    result = []
    for project in projects:
        project_materials = by_project.get(project.id)
        if project_materials:
            result.append(ProjectMaterials(project=project, materials=project_materials))
    return result


def _to_decimal(value: Any) -> Optional[Decimal]:
    if value is None or value == '':
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def is_complete_row(row: Mapping[str, Any]) -> bool:
    """
    A submitted material row is kept only when name and steel grade are
    filled in and quantity is positive.
    """
    name = str(row.get('material_name') or '').strip()
    grade = str(row.get('steel_grade') or '').strip()
    quantity = _to_decimal(row.get('quantity'))
    return bool(name) and bool(grade) and quantity is not None and quantity > 0


def split_rows(rows: Iterable[Mapping[str, Any]]) -> tuple[list, int]:
    """Return ``(complete_rows, skipped_count)``."""
    kept = []
    skipped = 0
    for row in rows:
        if is_complete_row(row):
            kept.append(row)
        else:
            skipped += 1
    return kept, skipped
