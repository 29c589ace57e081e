from rest_framework import permissions


class IsAdmissionsStaff(permissions.BasePermission):
    """
    Permission check for admissions office staff.
    Allows authenticated users with is_staff or is_superuser.
    """

    def has_permission(self, request, view):
        user = request.user
        if not user or not user.is_authenticated:
            return False

        return bool(getattr(user, 'is_staff', False) or getattr(user, 'is_superuser', False))
