"""
Dashboard URLs
"""
from django.urls import path
from .views import DashboardStatisticsView, QueueSummaryView

urlpatterns = [
    path('stats/', DashboardStatisticsView.as_view(), name='dashboard-stats'),
    path('queue-summary/', QueueSummaryView.as_view(), name='queue-summary'),
]

"""
Endpoints:
1. GET /dashboard/stats/ (admin)

   {
       "code": 200,
       "message": "success",
       "data": {
           "today_reservations": 12,   # reservations for today
           "week_reservations": 64,    # appointment date within the last 7 days
           "active_doctors": 4,
           "new_patients": 30          # distinct emails booked in the last 7 days
       }
   }

2. GET /dashboard/queue-summary/?date=YYYY-MM-DD (public)

   {
       "code": 200,
       "message": "success",
       "data": {
           "date": "2026-10-19",
           "total": 47,
           "served": 30,               # completed
           "waiting": 17,              # waiting + confirmed
           "average_wait": 15.0        # minutes
       }
   }
"""
