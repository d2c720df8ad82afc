"""
Project Serializers.

Serializers for projects and their completion criteria.
"""

from rest_framework import serializers

from domain.shared.value_objects import ProjectCriterion
from infrastructure.persistence.models import Project
from .base import AuditFieldsMixin, BaseModelSerializer, strip_required


CRITERIA_FIELDS = ProjectCriterion.keys()


class ProjectListSerializer(BaseModelSerializer):
    """List serializer for projects (sidebar, dashboard carousel)."""

    status_display = serializers.CharField(
        source='get_status_display',
        read_only=True
    )

    class Meta:
        model = Project
        fields = [
            'id', 'number', 'name', 'status', 'status_display',
            *CRITERIA_FIELDS,
            'material_ordering_activated',
            'progress',
            'created_at', 'updated_at',
        ]
        read_only_fields = fields


class ProjectDetailSerializer(AuditFieldsMixin, BaseModelSerializer):
    """Detail serializer for projects."""

    status_display = serializers.CharField(
        source='get_status_display',
        read_only=True
    )
    criteria = serializers.SerializerMethodField()

    class Meta:
        model = Project
        fields = [
            'id', 'number', 'name', 'description',
            'status', 'status_display',
            *CRITERIA_FIELDS,
            'material_ordering_activated',
            'progress', 'criteria',
            'version',
            'created_at', 'updated_at', 'created_by', 'updated_by',
        ]
        read_only_fields = ['id', 'number', 'progress', 'version', 'created_at', 'updated_at']

    def get_criteria(self, obj):
        return obj.get_criteria_breakdown()

    def validate_name(self, value):
        return strip_required(value)


class ProjectCriteriaSerializer(serializers.Serializer):
    """Criteria breakdown of a single project."""

    id = serializers.UUIDField(read_only=True)
    progress = serializers.IntegerField(read_only=True)
    criteria = serializers.ListField(
        source='get_criteria_breakdown',
        child=serializers.DictField(),
        read_only=True
    )


class SetCriterionSerializer(serializers.Serializer):
    """Payload for toggling one completion criterion."""

    key = serializers.ChoiceField(choices=CRITERIA_FIELDS)
    value = serializers.BooleanField()
