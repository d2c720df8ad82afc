"""
BOQ Views.
"""

from infrastructure.persistence.models import BOQItem
from ..serializers.boq import BOQItemSerializer
from .base import BaseModelViewSet


class BOQItemViewSet(BaseModelViewSet):
    """
    ViewSet for BOQ lines.

    Per-project totals and Excel export live on the project:
    /projects/{id}/boq-summary/ and /projects/{id}/boq-export/.
    """

    queryset = BOQItem.objects.select_related('project')
    serializer_class = BOQItemSerializer
    filterset_fields = ['project', 'section']
    search_fields = ['description', 'section']
    ordering_fields = ['section', 'position', 'amount', 'created_at']
    ordering = ['section', 'position', 'created_at']
