"""
API v1 URL Configuration.

All API endpoints for version 1.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views.users import AuthViewSet
from .views.project import ProjectViewSet
from .views.logistics import DeliveryViewSet
from .views.materials import MissingMaterialViewSet
from .views.small_jobs import SmallJobViewSet
from .views.boq import BOQItemViewSet
from .views.uploads import UploadViewSet
from .views.dashboard import DashboardViewSet

# Create router
router = DefaultRouter()

# Auth
router.register(r'auth', AuthViewSet, basename='auth')

# Projects
router.register(r'projects', ProjectViewSet, basename='projects')

# Logistics
router.register(r'deliveries', DeliveryViewSet, basename='deliveries')

# Materials
router.register(r'materials', MissingMaterialViewSet, basename='materials')

# Small jobs
router.register(r'small-jobs', SmallJobViewSet, basename='small-jobs')

# Bill of quantities & files
router.register(r'boq-items', BOQItemViewSet, basename='boq-items')
router.register(r'uploads', UploadViewSet, basename='uploads')

# Dashboard
router.register(r'dashboard', DashboardViewSet, basename='dashboard')

app_name = 'api_v1'

urlpatterns = [
    path('', include(router.urls)),
]
