"""
Tests for settings selection.
"""

from django.conf import settings


def test_test_settings_do_not_pull_dev_apps():
    assert 'debug_toolbar' not in settings.INSTALLED_APPS
    assert 'django_extensions' not in settings.INSTALLED_APPS
    assert settings.CHANNEL_LAYERS['default']['BACKEND'] == 'channels.layers.InMemoryChannelLayer'


def test_base_apps_list_is_not_shared_with_dev():
    from config.settings import base, dev

    assert 'debug_toolbar' in dev.INSTALLED_APPS
    assert 'debug_toolbar' not in base.INSTALLED_APPS
