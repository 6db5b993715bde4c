"""
Reservation views
"""
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from utils.response import success_response
from utils.permissions import IsClinicAdmin
from .booking import update_reservation_status
from .filters import ReservationFilter, parse_date_param
from .models import Reservation, STATUS_CONFIRMED, STATUS_CANCELLED, STATUS_COMPLETED, TIME_SLOTS
from .queue import get_queue_status
from .serializers import ReservationSerializer, ReservationStatusSerializer, QueueEntrySerializer


class ReservationViewSet(viewsets.ModelViewSet):
    """Reservations: public booking and queue board, admin management"""
    queryset = Reservation.objects.select_related('doctor', 'service').order_by('-created_at')
    serializer_class = ReservationSerializer
    public_actions = ('create', 'queue', 'time_slots')

    def get_permissions(self):
        if self.action in self.public_actions:
            return [AllowAny()]
        return [IsClinicAdmin()]

    def list(self, request, *args, **kwargs):
        """Reservation list, filtered by doctor_id / status / date"""
        queryset = ReservationFilter.from_query_params(request.query_params).apply(self.get_queryset())

        # manual pagination
        try:
            page = int(request.query_params.get('page', 1))
        except (TypeError, ValueError):
            page = 1
        try:
            page_size = int(request.query_params.get('page_size', 20))
        except (TypeError, ValueError):
            page_size = 20
        if page <= 0:
            page = 1
        if page_size <= 0:
            page_size = 20

        total = queryset.count()
        start = (page - 1) * page_size
        serializer = self.get_serializer(queryset[start:start + page_size], many=True)
        return success_response({
            'count': total,
            'page': page,
            'page_size': page_size,
            'results': serializer.data
        })

    def retrieve(self, request, *args, **kwargs):
        return success_response(self.get_serializer(self.get_object()).data)

    def create(self, request, *args, **kwargs):
        """Book a reservation, the queue ticket is assigned here"""
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        reservation = serializer.save()
        return success_response(self.get_serializer(reservation).data, 'Reservasi berhasil')

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop('partial', False)
        serializer = self.get_serializer(self.get_object(), data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        reservation = serializer.save()
        return success_response(self.get_serializer(reservation).data, 'Reservasi diperbarui')

    def destroy(self, request, *args, **kwargs):
        reservation = self.get_object()
        reservation_id = reservation.id
        reservation.delete()
        return success_response({'id': reservation_id}, 'Reservasi dihapus')

    def _change_status(self, pk, status, message):
        reservation = update_reservation_status(pk, status)
        return success_response(self.get_serializer(reservation).data, message)

    @action(detail=True, methods=['post'], url_path='confirm')
    def confirm(self, request, pk=None):
        """Waiting -> confirmed"""
        return self._change_status(pk, STATUS_CONFIRMED, 'Reservasi dikonfirmasi')

    @action(detail=True, methods=['post'], url_path='cancel')
    def cancel(self, request, pk=None):
        """Waiting / confirmed -> cancelled"""
        return self._change_status(pk, STATUS_CANCELLED, 'Reservasi dibatalkan')

    @action(detail=True, methods=['post'], url_path='complete')
    def complete(self, request, pk=None):
        """Confirmed -> completed"""
        return self._change_status(pk, STATUS_COMPLETED, 'Reservasi selesai')

    @action(detail=True, methods=['post'], url_path='status')
    def set_status(self, request, pk=None):
        """Any legal lifecycle step, {"status": "..."}"""
        serializer = ReservationStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return self._change_status(pk, serializer.validated_data['status'], 'Status reservasi diperbarui')

    @action(detail=False, methods=['get'], url_path='queue')
    def queue(self, request):
        """Live queue board, ?date=YYYY-MM-DD (defaults to today)"""
        day = request.query_params.get('date')
        target_date = parse_date_param(day) if day else None
        board = get_queue_status(target_date)
        return success_response(QueueEntrySerializer(board, many=True).data)

    @action(detail=False, methods=['get'], url_path='time-slots')
    def time_slots(self, request):
        """Bookable time slots"""
        return success_response(TIME_SLOTS)
