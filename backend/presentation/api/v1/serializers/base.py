"""
Base Serializers.

Common serializer mixins and base classes.
"""

from rest_framework import serializers


class AuditFieldsMixin(serializers.Serializer):
    """Mixin for audit fields (created_at, updated_at, etc.)"""

    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)
    created_by = serializers.StringRelatedField(read_only=True)
    updated_by = serializers.StringRelatedField(read_only=True)


class BaseModelSerializer(serializers.ModelSerializer):
    """
    Base serializer with common configuration.
    """

    class Meta:
        abstract = True
        read_only_fields = ['id', 'created_at', 'updated_at']


def strip_required(value, message='Это поле не может быть пустым.'):
    """Trim a text value and reject blank ones."""
    value = (value or '').strip()
    if not value:
        raise serializers.ValidationError(message)
    return value
