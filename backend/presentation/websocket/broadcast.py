"""
Dashboard broadcasting.

Pushes change notifications to every client connected to ``ws/dashboard/``.
"""

import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.utils import timezone

logger = logging.getLogger(__name__)

DASHBOARD_GROUP = 'dashboard'


def broadcast_dashboard_event(event_type: str, action: str, instance_id, **extra):
    """
    Send an event to the dashboard group.

    ``event_type`` doubles as the consumer handler name
    (``project_update`` -> ``DashboardConsumer.project_update``).
    """
    channel_layer = get_channel_layer()
    if channel_layer is None:
        return

    message = {
        'type': event_type,
        'action': action,
        'id': str(instance_id),
        'timestamp': timezone.now().isoformat(),
        **extra,
    }
    async_to_sync(channel_layer.group_send)(DASHBOARD_GROUP, message)
    logger.debug(f"Broadcast {event_type}/{action} for {instance_id}")
