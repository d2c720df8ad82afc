"""
Model signal receivers feeding the dashboard WebSocket group.
"""

from functools import partial

from django.db import transaction
from django.db.models.signals import m2m_changed, post_delete, post_save
from django.dispatch import receiver

from infrastructure.persistence.models import (
    Delivery,
    MissingMaterial,
    Project,
    SmallJob,
)

from .broadcast import broadcast_dashboard_event


EVENT_TYPES = {
    Project: 'project_update',
    Delivery: 'logistics_update',
    MissingMaterial: 'materials_update',
    SmallJob: 'small_job_update',
}


def _extra_payload(instance):
    if isinstance(instance, Project):
        return {'progress': instance.progress, 'status': instance.status}
    if isinstance(instance, (Delivery, MissingMaterial)):
        return {'project_id': str(instance.project_id) if instance.project_id else None}
    if isinstance(instance, SmallJob):
        return {'status': instance.status}
    return {}


def _schedule(instance, action):
    event_type = EVENT_TYPES[type(instance)]
    transaction.on_commit(partial(
        broadcast_dashboard_event,
        event_type,
        action,
        instance.pk,
        **_extra_payload(instance)
    ))


@receiver(post_save, sender=Project)
@receiver(post_save, sender=Delivery)
@receiver(post_save, sender=MissingMaterial)
@receiver(post_save, sender=SmallJob)
def on_saved(sender, instance, created, raw=False, **kwargs):
    if raw:
        return
    _schedule(instance, 'created' if created else 'updated')


@receiver(post_delete, sender=Project)
@receiver(post_delete, sender=Delivery)
@receiver(post_delete, sender=MissingMaterial)
@receiver(post_delete, sender=SmallJob)
def on_deleted(sender, instance, **kwargs):
    _schedule(instance, 'deleted')


@receiver(m2m_changed, sender=Delivery.projects_involved.through)
def on_involved_projects_changed(sender, instance, action, reverse, **kwargs):
    if action not in ('post_add', 'post_remove', 'post_clear') or reverse:
        return
    _schedule(instance, 'updated')
