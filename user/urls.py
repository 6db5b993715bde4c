from django.urls import path
from .views import LoginView, RefreshTokenView, UpdateRetrieveUser

urlpatterns = [
    path('login/', LoginView.as_view(), name='login'),              # POST email + password
    path('refresh/', RefreshTokenView.as_view(), name='refresh'),   # POST refresh token
    path('me/', UpdateRetrieveUser.as_view(), name='me'),           # GET/PATCH current account
]
