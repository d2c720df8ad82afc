"""
Project Views.

API views for projects, their completion criteria and per-project
materials/BOQ endpoints.
"""

import logging

from django.http import HttpResponse
from django.utils.text import slugify

from rest_framework.decorators import action
from rest_framework.response import Response

from application.services.boq import boq_summary as build_boq_summary
from application.services.boq_excel import build_boq_workbook
from application.services.materials import replace_project_materials
from infrastructure.persistence.models import Project
from ..serializers.boq import BOQSummarySerializer
from ..serializers.materials import MaterialReplaceSerializer, MissingMaterialSerializer
from ..serializers.project import (
    ProjectCriteriaSerializer,
    ProjectDetailSerializer,
    ProjectListSerializer,
    SetCriterionSerializer,
)
from .base import BaseModelViewSet, HistoryViewMixin

logger = logging.getLogger(__name__)

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'


class ProjectViewSet(HistoryViewMixin, BaseModelViewSet):
    """
    ViewSet for projects.

    Endpoints:
    - GET /projects/ - list projects
    - POST /projects/ - create project (number is assigned automatically)
    - GET /projects/{id}/ - get project details
    - PUT/PATCH /projects/{id}/ - update project
    - DELETE /projects/{id}/ - delete project with its deliveries, materials, BOQ and uploads
    - GET /projects/{id}/criteria/ - criteria breakdown and progress
    - POST /projects/{id}/set-criterion/ - set one criterion
    - POST /projects/{id}/toggle-material-ordering/ - flip material ordering marker
    - GET /projects/{id}/history/ - change history
    - GET/PUT /projects/{id}/missing-materials/ - list / replace project materials
    - GET /projects/{id}/boq-summary/ - BOQ totals per section
    - GET /projects/{id}/boq-export/ - BOQ as Excel
    """

    queryset = Project.objects.select_related('created_by', 'updated_by')

    serializer_classes = {
        'list': ProjectListSerializer,
        'criteria': ProjectCriteriaSerializer,
        'default': ProjectDetailSerializer,
    }

    search_fields = ['name', 'description', 'number']
    filterset_fields = ['status', 'material_ordering_activated']
    ordering_fields = ['name', 'number', 'progress', 'created_at', 'updated_at']
    ordering = ['name']

    def perform_destroy(self, instance):
        logger.info(f"Deleting project {instance.number} ({instance.name})")
        instance.delete()

    @action(detail=True, methods=['get'])
    def criteria(self, request, pk=None):
        """Criteria in display order with the derived progress."""
        project = self.get_object()
        return Response(ProjectCriteriaSerializer(project).data)

    @action(detail=True, methods=['post'], url_path='set-criterion')
    def set_criterion(self, request, pk=None):
        """Set a single completion criterion."""
        project = self.get_object()
        serializer = SetCriterionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project.set_criterion(
            serializer.validated_data['key'],
            serializer.validated_data['value'],
            user=request.user
        )
        return Response(ProjectDetailSerializer(project, context={'request': request}).data)

    @action(detail=True, methods=['post'], url_path='toggle-material-ordering')
    def toggle_material_ordering(self, request, pk=None):
        project = self.get_object()
        project.toggle_material_ordering(user=request.user)
        return Response(ProjectDetailSerializer(project, context={'request': request}).data)

    @action(detail=True, methods=['get', 'put'], url_path='missing-materials')
    def missing_materials(self, request, pk=None):
        """
        GET: materials of the project in creation order.
        PUT: replace them with ``{"materials": [...]}``; incomplete rows are skipped.
        """
        project = self.get_object()

        if request.method == 'GET':
            materials = project.missing_materials.order_by('created_at')
            return Response(MissingMaterialSerializer(materials, many=True).data)

        serializer = MaterialReplaceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        created, skipped = replace_project_materials(
            project,
            serializer.validated_data['materials'],
            user=request.user
        )
        return Response({
            'materials': MissingMaterialSerializer(created, many=True).data,
            'saved': len(created),
            'skipped': skipped,
        })

    @action(detail=True, methods=['get'], url_path='boq-summary')
    def boq_summary(self, request, pk=None):
        project = self.get_object()
        return Response(BOQSummarySerializer(build_boq_summary(project)).data)

    @action(detail=True, methods=['get'], url_path='boq-export')
    def boq_export(self, request, pk=None):
        """Download project BOQ as .xlsx."""
        project = self.get_object()
        items = project.boq_items.order_by('section', 'position', 'created_at')
        content = build_boq_workbook(f'{project.number} {project.name}', items)

        filename = f"BOQ_{project.number}_{slugify(project.name) or 'project'}.xlsx"
        response = HttpResponse(content, content_type=XLSX_CONTENT_TYPE)
        response['Content-Disposition'] = f'attachment; filename="{filename}"'
        return response
