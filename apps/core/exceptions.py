"""
API error types and the DRF exception handler

Every error leaves the API as:
    {"statusCode": 409, "message": "...", "error": "Conflict"}

Validation errors carry a list of "field: reason" strings in "message".
"""

import logging
from http import HTTPStatus

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Conflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Resource already exists.'
    default_code = 'conflict'


class BadRequest(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request.'
    default_code = 'bad_request'


def error_body(status_code, message):
    return {
        'statusCode': status_code,
        'message': message,
        'error': HTTPStatus(status_code).phrase,
    }


def _flatten_detail(detail, prefix=None):
    """
    Turn a DRF ErrorDetail tree into a flat list of messages

    {'email': ['Enter a valid email address.']}
        -> ['email: Enter a valid email address.']
    """
    messages = []
    if isinstance(detail, dict):
        for field, value in detail.items():
            name = field if field != 'non_field_errors' else None
            if prefix and name:
                name = f'{prefix}.{name}'
            messages.extend(_flatten_detail(value, name or prefix))
    elif isinstance(detail, (list, tuple)):
        for value in detail:
            messages.extend(_flatten_detail(value, prefix))
    else:
        messages.append(f'{prefix}: {detail}' if prefix else str(detail))
    return messages


def api_exception_handler(exc, context):
    """
    DRF EXCEPTION_HANDLER

    Lets DRF build the response (status code, WWW-Authenticate header)
    and rewrites the body into the uniform error shape.
    Unhandled exceptions return None and reach handler500 (JSON 500).
    """
    # DRF converts these two itself; keep the same mapping for our body
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        message = _flatten_detail(exc.detail)
    elif isinstance(exc.detail, (dict, list)):
        message = '; '.join(_flatten_detail(exc.detail))
    else:
        message = str(exc.detail)

    response.data = error_body(response.status_code, message)

    if response.status_code >= 500:
        logger.error(f"API error {response.status_code}: {message}")

    return response
