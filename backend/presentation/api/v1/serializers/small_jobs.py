"""
Small Jobs Serializers.
"""

from rest_framework import serializers

from infrastructure.persistence.models import SmallJob, SmallJobStatusChoices
from .base import BaseModelSerializer, strip_required


class SmallJobSerializer(BaseModelSerializer):
    status_display = serializers.CharField(
        source='get_status_display',
        read_only=True
    )
    order_number = serializers.CharField(
        max_length=50,
        allow_blank=True,
        allow_null=True,
        required=False
    )

    class Meta:
        model = SmallJob
        fields = [
            'id', 'title', 'order_number',
            'status', 'status_display',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']

    def validate_title(self, value):
        return strip_required(value, 'Название не может быть пустым.')

    def validate_order_number(self, value):
        value = (value or '').strip()
        return value or None


class SmallJobStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=SmallJobStatusChoices.choices)
