# tasks/exceptions.py
import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class TaskServiceError(APIException):
    """Base class for errors the task service reports to clients."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'Internal server error'
    default_code = 'error'


class ValidationError(TaskServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid request'
    default_code = 'invalid'


class NotFoundError(TaskServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Task not found'
    default_code = 'not_found'


class PersistenceError(TaskServiceError):
    # Message is generic; the underlying database error is only logged.
    default_detail = 'Failed to access task store'
    default_code = 'persistence_error'


class SourceReadError(PersistenceError):
    default_detail = 'Failed to import tasks'
    default_code = 'source_read_error'


def _first_message(detail):
    """Flatten DRF error detail (str, list or dict) into a single message."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field == 'non_field_errors':
                return message
            return f'{field}: {message}'
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def task_exception_handler(exc, context):
    """
    Render every error as a JSON object with a single ``error`` field.

    DRF handles its own exceptions (and Django's Http404 / PermissionDenied);
    anything it does not recognise is logged and converted to a 500 so that no
    request ends with an unhandled exception.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception('Unhandled error in %s', type(view).__name__ if view else 'unknown view')
        return Response({'error': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, DRFValidationError):
        message = _first_message(exc.detail) or 'Invalid request'
    else:
        message = _first_message(response.data.get('detail', response.data)
                                 if isinstance(response.data, dict) else response.data)
    response.data = {'error': message}
    return response
