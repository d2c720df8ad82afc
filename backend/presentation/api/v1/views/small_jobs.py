"""
Small Jobs Views.
"""

from rest_framework.decorators import action
from rest_framework.response import Response

from infrastructure.persistence.models import SmallJob
from ..serializers.small_jobs import SmallJobSerializer, SmallJobStatusSerializer
from .base import BaseModelViewSet


class SmallJobViewSet(BaseModelViewSet):
    """
    ViewSet for small jobs.

    Endpoints:
    - GET /small-jobs/ - list in creation order (filter: status)
    - POST /small-jobs/ - create
    - GET/PUT/PATCH/DELETE /small-jobs/{id}/
    - POST /small-jobs/{id}/set-status/ - change status
    """

    queryset = SmallJob.objects.all()
    serializer_class = SmallJobSerializer
    filterset_fields = ['status']
    search_fields = ['title', 'order_number']
    ordering_fields = ['created_at', 'title', 'status']
    ordering = ['created_at']

    @action(detail=True, methods=['post'], url_path='set-status')
    def set_status(self, request, pk=None):
        job = self.get_object()
        serializer = SmallJobStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        job.status = serializer.validated_data['status']
        job.updated_by = request.user
        job.save(update_fields=['status', 'updated_by', 'updated_at'])
        return Response(self.get_serializer(job).data)
