import logging

from django.db import IntegrityError
from django.db.models.deletion import ProtectedError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from domain.shared.exceptions import (
    DomainException,
    InvalidOperationException,
    StatusTransitionException,
    ValidationException,
)

logger = logging.getLogger(__name__)

DOMAIN_STATUS_CODES = (
    (StatusTransitionException, status.HTTP_409_CONFLICT),
    (InvalidOperationException, status.HTTP_409_CONFLICT),
    (ValidationException, status.HTTP_400_BAD_REQUEST),
)


def _domain_status(exc):
    for exc_class, status_code in DOMAIN_STATUS_CODES:
        if isinstance(exc, exc_class):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def custom_exception_handler(exc, context):
    """
    Map domain and database errors to JSON responses, everything else
    goes through the default DRF handler.
    """
    if isinstance(exc, DomainException):
        view = context.get('view')
        logger.info(f"{exc.code} in {view.__class__.__name__ if view else '-'}: {exc.message}")
        return Response(
            {
                'detail': exc.message,
                'error': exc.code,
                'details': exc.details,
            },
            status=_domain_status(exc),
        )

    if isinstance(exc, ProtectedError):
        protected = [str(o) for o in list(exc.protected_objects)[:5]]

        return Response(
            {
                'detail': 'Нельзя удалить объект: на него есть ссылки в других документах.',
                'error': 'protected_error',
                'protected_objects_sample': protected,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, IntegrityError):
        logger.warning(f"Integrity error: {exc}")
        return Response(
            {
                'detail': 'Нарушение целостности данных (возможны связанные записи).',
                'error': 'integrity_error',
            },
            status=status.HTTP_409_CONFLICT,
        )

    return exception_handler(exc, context)
