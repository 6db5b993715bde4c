"""
URL configuration for klinik_sehat project.
"""
from django.contrib import admin
from django.urls import path, include
from django.conf import settings
from django.conf.urls.static import static
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView

urlpatterns = [
    path('admin/', admin.site.urls),

    # API docs
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),

    # API
    path('api/auth/', include('user.urls')),                  # staff login
    path('api/doctors/', include('doctors.urls')),            # doctors
    path('api/services/', include('services.urls')),          # clinic services
    path('api/reservations/', include('reservations.urls')),  # reservations + queue board
    path('api/dashboard/', include('dashboard.urls')),        # dashboard statistics
]

if settings.DEBUG:
    urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
