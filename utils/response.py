"""
Unified response envelope: {"code", "message", "data"}
"""
from rest_framework.response import Response
from rest_framework import status


def success_response(data=None, message='success', code=200):
    """Successful response"""
    return Response({
        'code': code,
        'message': message,
        'data': data
    }, status=status.HTTP_200_OK)


def error_response(message='error', code=400, data=None):
    """Business error response"""
    return Response({
        'code': code,
        'message': message,
        'data': data
    }, status=status.HTTP_200_OK)  # business errors are HTTP 200, told apart by code


def first_error_message(detail):
    """Pull the first human readable message out of a DRF error detail."""
    if isinstance(detail, dict):
        if not detail:
            return ''
        return first_error_message(next(iter(detail.values())))
    if isinstance(detail, (list, tuple)):
        return first_error_message(detail[0]) if detail else ''
    return str(detail)


def custom_exception_handler(exc, context):
    """Render DRF exceptions in the unified envelope"""
    from rest_framework.views import exception_handler

    response = exception_handler(exc, context)

    if response is not None:
        detail = getattr(exc, 'detail', None)
        response.data = {
            'code': response.status_code,
            'message': first_error_message(detail) if detail is not None else str(exc),
            'data': detail if isinstance(detail, dict) else None
        }

    return response
