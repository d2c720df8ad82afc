"""
Settings module initialization.
Automatically selects settings based on DJANGO_ENV environment variable.

Only applies when DJANGO_SETTINGS_MODULE is ``config.settings`` itself;
``config.settings.test`` / ``config.settings.prod`` are loaded as they are.
"""

import os

if os.environ.get('DJANGO_SETTINGS_MODULE', 'config.settings') == 'config.settings':
    env = os.environ.get('DJANGO_ENV', 'dev')

    if env == 'prod':
        from .prod import *
    elif env == 'test':
        from .test import *
    else:
        from .dev import *
