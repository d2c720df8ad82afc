"""
Logistics Serializers.

Serializers for delivery/pickup events and the day-bucketed timelines.
"""

from rest_framework import serializers

from infrastructure.persistence.models import Delivery, Project
from .base import BaseModelSerializer


TIME_INPUT_FORMATS = ['%H:%M', '%H:%M:%S', '%I:%M %p', '%I:%M%p']


class ProjectRefSerializer(serializers.ModelSerializer):
    """Project reference embedded in logistics events."""

    class Meta:
        model = Project
        fields = ['id', 'number', 'name']
        read_only_fields = fields


class DeliverySerializer(BaseModelSerializer):
    """
    Delivery/Pickup event.

    ``time`` accepts 24h ("14:15") and 12h ("02:15 PM") input and is
    always returned as HH:MM.
    """

    type_display = serializers.CharField(
        source='get_type_display',
        read_only=True
    )
    time = serializers.TimeField(
        format='%H:%M',
        input_formats=TIME_INPUT_FORMATS
    )
    project = serializers.PrimaryKeyRelatedField(
        queryset=Project.objects.all(),
        allow_null=True,
        required=False
    )
    project_number = serializers.CharField(
        source='project.number',
        read_only=True,
        default=None
    )
    projects_involved = serializers.PrimaryKeyRelatedField(
        queryset=Project.objects.all(),
        many=True,
        required=False
    )
    projects_involved_details = ProjectRefSerializer(
        source='involved_projects_ordered',
        many=True,
        read_only=True
    )
    projects_involved_names = serializers.ListField(
        child=serializers.CharField(),
        read_only=True
    )

    class Meta:
        model = Delivery
        fields = [
            'id', 'type', 'type_display',
            'date', 'time',
            'project', 'project_number', 'project_name',
            'projects_involved', 'projects_involved_details', 'projects_involved_names',
            'location',
            'created_at', 'updated_at',
        ]
        read_only_fields = ['id', 'created_at', 'updated_at']
        extra_kwargs = {
            'project_name': {'required': False},
        }

    def validate(self, attrs):
        project = attrs.get('project', getattr(self.instance, 'project', None))
        project_name = (attrs.get('project_name') or getattr(self.instance, 'project_name', '') or '').strip()
        if project is None and not project_name:
            raise serializers.ValidationError({
                'project': 'Укажите проект или наименование проекта.'
            })
        if 'project_name' in attrs:
            attrs['project_name'] = project_name
        return attrs

    def create(self, validated_data):
        involved = validated_data.pop('projects_involved', [])
        delivery = Delivery.objects.create(**validated_data)
        delivery.set_involved_projects(involved)
        return delivery

    def update(self, instance, validated_data):
        involved = validated_data.pop('projects_involved', None)
        for attr, value in validated_data.items():
            setattr(instance, attr, value)
        instance.save()
        if involved is None:
            # Primary project may have changed
            involved = list(instance.projects_involved.all())
        instance.set_involved_projects(involved)
        return instance


def schedule_message(delivery, created):
    """Confirmation text shown after saving an event."""
    additional = delivery.additional_projects_count
    suffix = f" and {additional} additional project(s)" if additional > 0 else ''
    if created:
        return f"New delivery for {delivery.project_name}{suffix} has been scheduled."
    return f"Delivery for {delivery.project_name}{suffix} has been updated."


class DayBucketSerializer(serializers.Serializer):
    """One day of the logistics timeline."""

    date = serializers.DateField(source='day')
    label = serializers.CharField()
    is_today = serializers.BooleanField()
    events = DeliverySerializer(many=True)
