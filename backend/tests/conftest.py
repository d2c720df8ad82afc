"""
Pytest configuration and shared fixtures.

Provides an authenticated API client and small factories for projects,
deliveries, materials and small jobs.
"""

from datetime import date, time

import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from infrastructure.persistence.models import (
    Delivery,
    MissingMaterial,
    Project,
    SmallJob,
)

# Monday
MONDAY = date(2025, 5, 26)


# ==============================================================================
# Users & clients
# ==============================================================================


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(
        username='foreman',
        password='s3cret-pass',
        email='foreman@example.com',
        first_name='Anna',
    )


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client


# ==============================================================================
# Factories
# ==============================================================================


@pytest.fixture
def make_project(db):
    def _make(name='City Center Office Building', **kwargs):
        return Project.objects.create(name=name, **kwargs)
    return _make


@pytest.fixture
def project(make_project):
    return make_project()


@pytest.fixture
def make_delivery(db):
    def _make(project=None, day=MONDAY, at=time(9, 30), involved=(), **kwargs):
        delivery = Delivery.objects.create(
            project=project,
            date=day,
            time=at,
            **kwargs
        )
        if involved:
            delivery.set_involved_projects(involved)
        return delivery
    return _make


@pytest.fixture
def make_material(db):
    def _make(project, material_name='HEA 200', steel_grade='S355', quantity=5, **kwargs):
        return MissingMaterial.objects.create(
            project=project,
            material_name=material_name,
            steel_grade=steel_grade,
            quantity=quantity,
            **kwargs
        )
    return _make


@pytest.fixture
def make_small_job(db):
    def _make(title='Repair gate hinge', **kwargs):
        return SmallJob.objects.create(title=title, **kwargs)
    return _make
