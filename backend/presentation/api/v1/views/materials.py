"""
Materials Views.

API views for missing, quoted and ordered materials.
"""

from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from application.services.materials import materials_overview
from domain.shared.value_objects import MaterialStatus
from infrastructure.persistence.models import MaterialStatusChoices, MissingMaterial
from ..serializers.materials import (
    MaterialStatusSerializer,
    MissingMaterialSerializer,
    ProjectMaterialsSerializer,
)
from .base import BaseModelViewSet


class MissingMaterialViewSet(BaseModelViewSet):
    """
    ViewSet for project materials.

    Endpoints:
    - GET /materials/ - list (filters: project, status, unit)
    - POST /materials/ - add material (status starts as missing)
    - GET/PUT/PATCH/DELETE /materials/{id}/
    - POST /materials/{id}/set-status/ - change status (missing/quoted/ordered)
    - POST /materials/{id}/mark-missing/ - move back to missing
    - GET /materials/overview/?status=ordered - active projects with their materials
    """

    queryset = MissingMaterial.objects.select_related('project')
    serializer_class = MissingMaterialSerializer
    filterset_fields = ['project', 'status', 'unit']
    search_fields = ['material_name', 'steel_grade', 'project__name']
    ordering_fields = ['created_at', 'material_name', 'status']
    ordering = ['created_at']

    def _change_status(self, request, target):
        material = self.get_object()
        material.transition_to(target, user=request.user)
        return Response(self.get_serializer(material).data)

    @action(detail=True, methods=['post'], url_path='set-status')
    def set_status(self, request, pk=None):
        serializer = MaterialStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._change_status(request, serializer.validated_data['status'])

    @action(detail=True, methods=['post'], url_path='mark-missing')
    def mark_missing(self, request, pk=None):
        return self._change_status(request, MaterialStatus.MISSING)

    @action(detail=False, methods=['get'])
    def overview(self, request):
        """Active projects that have materials in the requested status."""
        status_value = request.query_params.get('status', MaterialStatusChoices.ORDERED)
        if status_value not in MaterialStatusChoices.values:
            raise ValidationError({'status': f"Неизвестный статус: '{status_value}'."})

        groups = materials_overview(status_value)
        return Response(ProjectMaterialsSerializer(groups, many=True, context={'request': request}).data)
