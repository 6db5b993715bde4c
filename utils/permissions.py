"""
Permission classes
"""
from rest_framework import permissions


class IsClinicAdmin(permissions.BasePermission):
    """Clinic administrators only"""

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and getattr(user, 'role', None) == 'admin')


class IsClinicAdminOrReadOnly(IsClinicAdmin):
    """Anyone may read, only administrators may write"""

    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return True
        return super().has_permission(request, view)
