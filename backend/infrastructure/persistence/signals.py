"""
Storage cleanup for deleted uploads.
"""

import logging

from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Upload

logger = logging.getLogger(__name__)


def _delete_stored_file(storage, name):
    storage.delete(name)
    logger.info(f"Deleted stored file {name}")


@receiver(post_delete, sender=Upload)
def delete_upload_file(sender, instance, **kwargs):
    """Remove the file once the delete is committed (direct or via project cascade)."""
    if not instance.file:
        return
    storage, name = instance.file.storage, instance.file.name
    transaction.on_commit(lambda: _delete_stored_file(storage, name))
