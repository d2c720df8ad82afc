"""
Materials Serializers.
"""

from decimal import Decimal

from rest_framework import serializers

from infrastructure.persistence.models import (
    MaterialStatusChoices,
    MaterialUnitChoices,
    MissingMaterial,
)
from .base import BaseModelSerializer, strip_required
from .project import ProjectListSerializer


class MissingMaterialSerializer(BaseModelSerializer):
    """Missing/quoted/ordered material of a project."""

    project_name = serializers.CharField(source='project.name', read_only=True)
    status_display = serializers.CharField(
        source='get_status_display',
        read_only=True
    )
    unit_display = serializers.CharField(
        source='get_unit_display',
        read_only=True
    )
    quantity = serializers.DecimalField(
        max_digits=12,
        decimal_places=3,
        min_value=Decimal('0.001')
    )

    class Meta:
        model = MissingMaterial
        fields = [
            'id', 'project', 'project_name',
            'material_name', 'steel_grade',
            'quantity', 'unit', 'unit_display',
            'status', 'status_display', 'ordered_at',
            'created_at', 'updated_at',
        ]
        # status changes go through set-status to enforce transitions
        read_only_fields = ['id', 'status', 'ordered_at', 'created_at', 'updated_at']

    def validate_material_name(self, value):
        return strip_required(value)

    def validate_steel_grade(self, value):
        return strip_required(value)


class MaterialRowSerializer(serializers.Serializer):
    """
    Row of the materials table submitted for a bulk replace.

    Fields are lenient: incomplete rows are filtered out and counted
    instead of being rejected.
    """

    material_name = serializers.CharField(allow_blank=True, required=False, default='')
    steel_grade = serializers.CharField(allow_blank=True, required=False, default='')
    quantity = serializers.DecimalField(
        max_digits=12,
        decimal_places=3,
        required=False,
        allow_null=True,
        default=None
    )
    unit = serializers.ChoiceField(
        choices=MaterialUnitChoices.choices,
        default=MaterialUnitChoices.PIECES
    )
    status = serializers.ChoiceField(
        choices=MaterialStatusChoices.choices,
        default=MaterialStatusChoices.MISSING
    )


class MaterialReplaceSerializer(serializers.Serializer):
    materials = MaterialRowSerializer(many=True)


class MaterialStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=MaterialStatusChoices.choices)


class ProjectMaterialsSerializer(serializers.Serializer):
    """Project with its materials of one status (overview page)."""

    project = ProjectListSerializer()
    materials = MissingMaterialSerializer(many=True)
