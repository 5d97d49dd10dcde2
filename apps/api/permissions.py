from rest_framework import permissions


def is_staff(user) -> bool:
    return bool(user and user.is_authenticated and user.is_staff)


class IsAdminOrReadOnly(permissions.BasePermission):
    """Any signed-in user can browse the catalog; only staff change it."""
    def has_permission(self, request, view):
        if request.method in permissions.SAFE_METHODS:
            return bool(request.user and request.user.is_authenticated)
        return is_staff(request.user)


class IsStaffUser(permissions.BasePermission):
    """Limit rules and violation logs are managed by staff."""
    def has_permission(self, request, view):
        return is_staff(request.user)


class IsOwnerOrAdmin(permissions.BasePermission):
    """
    Orders are visible to the user who placed them and to staff. An order
    whose user has been deleted belongs to nobody.
    """
    message = "You can only access your own orders."

    def has_object_permission(self, request, view, obj):
        if is_staff(request.user):
            return True
        owner_id = getattr(obj, 'user_id', None)
        return owner_id is not None and owner_id == request.user.pk
