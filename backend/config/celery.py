"""
Celery configuration for FabDash project.
"""

import os

from celery import Celery

# Set the default Django settings module
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('fabdash')

# Using a string here means the worker doesn't have to serialize
# the configuration object to child processes.
app.config_from_object('django.conf:settings', namespace='CELERY')

# Task modules live outside of Django apps (application.tasks).
app.autodiscover_tasks(['application'])

app.conf.task_routes = {
    'application.tasks.boq_tasks.*': {'queue': 'imports'},
}
