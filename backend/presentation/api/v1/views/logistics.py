"""
Logistics Views.

API views for delivery/pickup events and the logistics timelines.
"""

import django_filters
from django.db.models import Q
from rest_framework import status
from rest_framework.decorators import action
from rest_framework.response import Response

from application.services.logistics import upcoming_timeline, working_days_timeline
from infrastructure.persistence.models import Delivery, DeliveryTypeChoices
from ..serializers.logistics import DayBucketSerializer, DeliverySerializer, schedule_message
from .base import BaseModelViewSet, query_date, query_int


MAX_TIMELINE_DAYS = 60


class DeliveryFilterSet(django_filters.FilterSet):
    """Filters for logistics events."""

    type = django_filters.ChoiceFilter(choices=DeliveryTypeChoices.choices)
    project = django_filters.UUIDFilter(method='filter_project')
    date_from = django_filters.DateFilter(field_name='date', lookup_expr='gte')
    date_to = django_filters.DateFilter(field_name='date', lookup_expr='lte')

    class Meta:
        model = Delivery
        fields = ['type', 'project', 'date_from', 'date_to']

    def filter_project(self, queryset, name, value):
        """Project as primary or as one of the involved projects."""
        return queryset.filter(
            Q(project_id=value) | Q(projects_involved__id=value)
        ).distinct()


class DeliveryViewSet(BaseModelViewSet):
    """
    ViewSet for deliveries and pickups.

    Endpoints:
    - GET /deliveries/ - list events (filters: type, project, date_from, date_to)
    - POST /deliveries/ - schedule event
    - GET /deliveries/{id}/ - event details
    - PUT/PATCH /deliveries/{id}/ - update event
    - DELETE /deliveries/{id}/ - delete event
    - GET /deliveries/upcoming/?days=14 - next calendar days with events
    - GET /deliveries/working-days/?days=6 - next working days with events
    """

    queryset = Delivery.objects.select_related('project').prefetch_related('projects_involved')
    serializer_class = DeliverySerializer
    filterset_class = DeliveryFilterSet
    search_fields = ['project_name', 'location', 'project__number']
    ordering_fields = ['date', 'time', 'created_at']
    ordering = ['date', 'time', 'created_at']

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        data = dict(self.get_serializer(serializer.instance).data)
        data['message'] = schedule_message(serializer.instance, created=True)
        headers = self.get_success_headers(data)
        return Response(data, status=status.HTTP_201_CREATED, headers=headers)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        instance._prefetched_objects_cache = {}
        data = dict(self.get_serializer(serializer.instance).data)
        data['message'] = schedule_message(serializer.instance, created=False)
        return Response(data)

    def _timeline(self, request, builder, default_days):
        days = query_int(request, 'days', default_days, max_value=MAX_TIMELINE_DAYS)
        today = query_date(request, 'start')
        queryset = self.filter_queryset(self.get_queryset())
        buckets = builder(today, days, queryset=queryset)
        return Response(DayBucketSerializer(buckets, many=True, context={'request': request}).data)

    @action(detail=False, methods=['get'])
    def upcoming(self, request):
        """Next N calendar days (default 14), days without events omitted."""
        return self._timeline(request, upcoming_timeline, 14)

    @action(detail=False, methods=['get'], url_path='working-days')
    def working_days(self, request):
        """Next N working days (default 6), days without events omitted."""
        return self._timeline(request, working_days_timeline, 6)
