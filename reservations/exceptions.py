"""
Reservation errors, rendered by utils.response.custom_exception_handler
"""
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError


class InvalidStatusTransition(ValidationError):
    """Requested status is not reachable from the current one"""

    def __init__(self, current, requested):
        super().__init__({'status': f'Status {current} tidak dapat diubah menjadi {requested}'})
        self.current = current
        self.requested = requested


class QueueNumberUnavailable(APIException):
    """No free queue ticket could be found for the day"""
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Nomor antrian tidak tersedia, silakan coba lagi'
    default_code = 'queue_number_unavailable'
