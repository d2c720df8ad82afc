"""
BOQ services: per-section totals and import of parsed rows.
"""

import logging
from decimal import Decimal

from django.db import transaction

from infrastructure.persistence.models import BOQItem

logger = logging.getLogger(__name__)


def boq_summary(project):
    """Totals per section (by section name) and the grand total."""
    sections = {}
    items_count = 0
    unpriced = 0
    grand_total = Decimal('0')

    for item in BOQItem.objects.filter(project=project).order_by('section', 'position', 'created_at'):
        entry = sections.setdefault(item.section, {
            'section': item.section,
            'items_count': 0,
            'total': Decimal('0'),
        })
        entry['items_count'] += 1
        items_count += 1
        if item.amount is None:
            unpriced += 1
            continue
        entry['total'] += item.amount
        grand_total += item.amount

    return {
        'project': project.id,
        'sections': list(sections.values()),
        'items_count': items_count,
        'unpriced_count': unpriced,
        'grand_total': grand_total,
    }


@transaction.atomic
def import_boq_rows(project, rows, replace=True, user=None):
    """Create BOQ items from parsed rows; existing items are dropped when ``replace``."""
    if replace:
        BOQItem.objects.filter(project=project).delete()

    created = 0
    for row in rows:
        BOQItem.objects.create(
            project=project,
            section=row['section'],
            position=row['position'],
            description=row['description'],
            unit=row['unit'],
            quantity=row['quantity'],
            rate=row['rate'],
            created_by=user,
            updated_by=user,
        )
        created += 1

    logger.info(f"Imported {created} BOQ items into project {project.number}")
    return created
