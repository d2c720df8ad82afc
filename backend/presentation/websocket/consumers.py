"""
WebSocket Consumers.

Real-time dashboard updates.
"""

from channels.generic.websocket import AsyncJsonWebsocketConsumer
from channels.db import database_sync_to_async
import logging

from .broadcast import DASHBOARD_GROUP

logger = logging.getLogger(__name__)


class BaseConsumer(AsyncJsonWebsocketConsumer):
    """Base consumer with common functionality."""

    async def connect(self):
        """Connect to WebSocket."""
        self.user = self.scope.get('user')

        if not self.user or not self.user.is_authenticated:
            await self.close(code=4001)
            return

        await self.accept()

    async def disconnect(self, close_code):
        """Disconnect from WebSocket."""
        pass

    async def send_error(self, message: str):
        """Send error message."""
        await self.send_json({
            'type': 'error',
            'message': message
        })


class DashboardConsumer(BaseConsumer):
    """
    WebSocket consumer for dashboard updates.

    Pushes a notification whenever projects, logistics events,
    missing materials or small jobs change, so clients can refetch.
    """

    async def connect(self):
        """Connect and join dashboard room."""
        await super().connect()

        if not self.user or not self.user.is_authenticated:
            return

        self.room_name = DASHBOARD_GROUP
        await self.channel_layer.group_add(
            self.room_name,
            self.channel_name
        )

        dashboard_data = await self._get_dashboard_data()
        await self.send_json({
            'type': 'initial_data',
            'data': dashboard_data
        })
        logger.info(f"User {self.user} connected to dashboard")

    async def disconnect(self, close_code):
        """Leave dashboard room."""
        if hasattr(self, 'room_name'):
            await self.channel_layer.group_discard(
                self.room_name,
                self.channel_name
            )

    async def receive_json(self, content):
        """Handle incoming messages."""
        message_type = content.get('type')

        if message_type == 'refresh':
            dashboard_data = await self._get_dashboard_data()
            await self.send_json({
                'type': 'refresh_data',
                'data': dashboard_data
            })

        elif message_type == 'ping':
            await self.send_json({'type': 'pong'})

        else:
            await self.send_error(f"Unknown message type: {message_type}")

    # Event handlers (called by channel layer)

    async def _forward(self, event):
        await self.send_json(dict(event))

    async def project_update(self, event):
        """Project created, changed or deleted."""
        await self._forward(event)

    async def logistics_update(self, event):
        """Delivery/pickup event changed."""
        await self._forward(event)

    async def materials_update(self, event):
        """Missing material changed."""
        await self._forward(event)

    async def small_job_update(self, event):
        """Small job changed."""
        await self._forward(event)

    @database_sync_to_async
    def _get_dashboard_data(self):
        """Counters shown in the dashboard header."""
        from django.db.models import Count, Q
        from infrastructure.persistence.models import (
            MissingMaterial,
            Project,
            SmallJob,
        )

        project_stats = Project.objects.aggregate(
            total=Count('id'),
            active=Count('id', filter=Q(status='active')),
            on_hold=Count('id', filter=Q(status='on-hold')),
            completed=Count('id', filter=Q(status='completed')),
            ordering_materials=Count('id', filter=Q(material_ordering_activated=True)),
        )
        material_stats = MissingMaterial.objects.aggregate(
            missing=Count('id', filter=Q(status='missing')),
            quoted=Count('id', filter=Q(status='quoted')),
            ordered=Count('id', filter=Q(status='ordered')),
        )
        open_small_jobs = SmallJob.objects.exclude(status='completed').count()

        return {
            'projects': project_stats,
            'materials': material_stats,
            'open_small_jobs': open_small_jobs,
        }
