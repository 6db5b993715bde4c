"""
Dashboard views
"""
from django.utils import timezone
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from utils.response import success_response
from utils.permissions import IsClinicAdmin
from reservations.filters import parse_date_param
from .stats import get_dashboard_stats, get_queue_summary


class DashboardStatisticsView(APIView):
    """Admin dashboard counters"""
    permission_classes = [IsClinicAdmin]

    def get(self, request):
        return success_response(get_dashboard_stats(timezone.localdate()))


class QueueSummaryView(APIView):
    """Summary cards of the public queue page"""
    permission_classes = [AllowAny]

    def get(self, request):
        day = request.query_params.get('date')
        target_date = parse_date_param(day) if day else timezone.localdate()
        summary = get_queue_summary(target_date)
        summary['date'] = target_date.strftime('%Y-%m-%d')
        return success_response(summary)
