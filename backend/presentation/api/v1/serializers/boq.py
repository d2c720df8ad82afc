"""
BOQ Serializers.
"""

from rest_framework import serializers

from infrastructure.persistence.models import BOQItem
from .base import BaseModelSerializer, strip_required


class BOQItemSerializer(BaseModelSerializer):
    """BOQ line; ``amount`` is calculated on save."""

    class Meta:
        model = BOQItem
        fields = [
            'id', 'project',
            'section', 'position', 'description',
            'unit', 'quantity', 'rate', 'amount',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'amount', 'created_at', 'updated_at']

    def validate_section(self, value):
        return strip_required(value)

    def validate_description(self, value):
        return strip_required(value)


class BOQSectionTotalSerializer(serializers.Serializer):
    section = serializers.CharField()
    items_count = serializers.IntegerField()
    total = serializers.DecimalField(max_digits=18, decimal_places=2)


class BOQSummarySerializer(serializers.Serializer):
    project = serializers.UUIDField()
    sections = BOQSectionTotalSerializer(many=True)
    items_count = serializers.IntegerField()
    unpriced_count = serializers.IntegerField()
    grand_total = serializers.DecimalField(max_digits=18, decimal_places=2)
