"""
Application services.

Use cases shared by API views, Celery tasks and management commands.
"""
