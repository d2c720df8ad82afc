"""
Dashboard Views.

Workshop dashboard: active projects carousel, logistics for the coming
working days and small jobs at a glance.
"""

from django.db.models import Count
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from application.services.logistics import working_days_timeline
from infrastructure.persistence.models import (
    Project,
    ProjectStatusChoices,
    SmallJob,
    SmallJobStatusChoices,
)
from ..serializers.logistics import DayBucketSerializer
from .base import query_date, query_int


HEADLINE_CRITERIA = ('documentation_done', 'materials_ordered', 'materials_received')


class DashboardViewSet(viewsets.ViewSet):
    """
    ViewSet for the dashboard.

    Endpoints:
    - GET /dashboard/summary/ - complete dashboard data
    """

    permission_classes = [IsAuthenticated]

    def _active_projects(self):
        projects = Project.objects.filter(status=ProjectStatusChoices.ACTIVE).order_by('name')
        return [
            {
                'id': str(p.id),
                'number': p.number,
                'name': p.name,
                'progress': p.progress,
                'material_ordering_activated': p.material_ordering_activated,
                **{key: getattr(p, key) for key in HEADLINE_CRITERIA},
            }
            for p in projects
        ]

    def _small_jobs(self):
        counts = dict(
            SmallJob.objects.values('status')
            .annotate(count=Count('id'))
            .values_list('status', 'count')
        )
        by_status = {value: counts.get(value, 0) for value in SmallJobStatusChoices.values}
        return {
            'by_status': by_status,
            'total': sum(by_status.values()),
        }

    @action(detail=False, methods=['get'])
    def summary(self, request):
        """Complete dashboard payload."""
        today = query_date(request, 'start')
        days = query_int(request, 'days', 6, max_value=30)

        logistics = working_days_timeline(today, days)

        return Response({
            'date': today,
            'active_projects': self._active_projects(),
            'logistics': DayBucketSerializer(logistics, many=True, context={'request': request}).data,
            'small_jobs': self._small_jobs(),
        })
