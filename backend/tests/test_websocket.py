"""
Tests for the dashboard WebSocket consumer and change broadcasts.
"""

import pytest
from asgiref.sync import async_to_sync
from channels.db import database_sync_to_async
from channels.layers import get_channel_layer
from channels.testing import WebsocketCommunicator
from django.contrib.auth.models import AnonymousUser

from infrastructure.persistence.models import Project, SmallJob
from presentation.websocket import signals
from presentation.websocket.broadcast import DASHBOARD_GROUP
from presentation.websocket.consumers import DashboardConsumer


def communicator_for(user):
    communicator = WebsocketCommunicator(DashboardConsumer.as_asgi(), '/ws/dashboard/')
    communicator.scope['user'] = user
    return communicator


@pytest.mark.django_db(transaction=True)
def test_anonymous_connection_is_rejected():
    async def scenario():
        communicator = communicator_for(AnonymousUser())
        return await communicator.connect()

    connected, code = async_to_sync(scenario)()

    assert connected is False
    assert code == 4001


@pytest.mark.django_db(transaction=True)
def test_initial_data_and_ping(user, make_project, make_small_job):
    make_project('Alpha Bridge', material_ordering_activated=True)
    make_project('Closed Depot', status='completed')
    make_small_job()

    async def scenario():
        communicator = communicator_for(user)
        connected, _ = await communicator.connect()
        assert connected
        initial = await communicator.receive_json_from()

        await communicator.send_json_to({'type': 'ping'})
        pong = await communicator.receive_json_from()

        await communicator.send_json_to({'type': 'unknown'})
        error = await communicator.receive_json_from()

        await communicator.send_json_to({'type': 'refresh'})
        refreshed = await communicator.receive_json_from()

        await communicator.disconnect()
        return initial, pong, error, refreshed

    initial, pong, error, refreshed = async_to_sync(scenario)()

    assert initial['type'] == 'initial_data'
    assert initial['data']['projects'] == {
        'total': 2,
        'active': 1,
        'on_hold': 0,
        'completed': 1,
        'ordering_materials': 1,
    }
    assert initial['data']['open_small_jobs'] == 1
    assert pong == {'type': 'pong'}
    assert error['type'] == 'error'
    assert refreshed['type'] == 'refresh_data'


@pytest.mark.django_db(transaction=True)
def test_group_events_are_forwarded(user):
    async def scenario():
        communicator = communicator_for(user)
        await communicator.connect()
        await communicator.receive_json_from()

        await get_channel_layer().group_send(DASHBOARD_GROUP, {
            'type': 'logistics_update',
            'action': 'deleted',
            'id': 'abc',
        })
        message = await communicator.receive_json_from()
        await communicator.disconnect()
        return message

    message = async_to_sync(scenario)()

    assert message == {'type': 'logistics_update', 'action': 'deleted', 'id': 'abc'}


@pytest.mark.django_db(transaction=True)
def test_saved_model_is_broadcast(user):
    async def scenario():
        communicator = communicator_for(user)
        await communicator.connect()
        await communicator.receive_json_from()

        job = await database_sync_to_async(SmallJob.objects.create)(title='Weld trailer bracket')
        message = await communicator.receive_json_from()
        await communicator.disconnect()
        return job, message

    job, message = async_to_sync(scenario)()

    assert message['type'] == 'small_job_update'
    assert message['action'] == 'created'
    assert message['id'] == str(job.id)
    assert message['status'] == 'pending'


@pytest.mark.django_db
def test_broadcast_waits_for_commit(monkeypatch, django_capture_on_commit_callbacks):
    sent = []
    monkeypatch.setattr(signals, 'broadcast_dashboard_event', lambda *args, **kwargs: sent.append((args, kwargs)))

    with django_capture_on_commit_callbacks() as callbacks:
        project = Project.objects.create(name='Alpha Bridge', documentation_done=True)
        assert sent == []

    for callback in callbacks:
        callback()

    assert sent == [(('project_update', 'created', project.pk), {'progress': 17, 'status': 'active'})]


@pytest.mark.django_db
def test_delete_is_broadcast(monkeypatch, django_capture_on_commit_callbacks, project, make_material):
    material = make_material(project)
    material_id = material.pk
    sent = []
    monkeypatch.setattr(signals, 'broadcast_dashboard_event', lambda *args, **kwargs: sent.append((args, kwargs)))

    with django_capture_on_commit_callbacks(execute=True):
        material.delete()

    assert sent == [(('materials_update', 'deleted', material_id), {'project_id': str(project.id)})]
