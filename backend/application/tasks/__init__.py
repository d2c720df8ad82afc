"""
Celery tasks.
"""

from .boq_tasks import import_boq_from_excel

__all__ = ['import_boq_from_excel']
