from rest_framework import permissions

# module -> actions that can be toggled per user
PERMISSION_MODULES = {
    'products': ['create', 'edit', 'delete'],
    'sales': ['create', 'refund'],
    'expenses': ['create', 'edit', 'delete'],
}

# Default permission matrix handed out when a user is invited with a role.
ROLE_ACCESS = {
    'admin': {module: {a: True for a in actions} for module, actions in PERMISSION_MODULES.items()},
    'manager': {
        'products': {'create': True, 'edit': True, 'delete': False},
        'sales': {'create': True, 'refund': True},
        'expenses': {'create': True, 'edit': True, 'delete': False},
    },
    'sales': {
        'products': {'create': False, 'edit': False, 'delete': False},
        'sales': {'create': True, 'refund': False},
        'expenses': {'create': False, 'edit': False, 'delete': False},
    },
    'warehouse': {
        'products': {'create': True, 'edit': True, 'delete': False},
        'sales': {'create': False, 'refund': False},
        'expenses': {'create': False, 'edit': False, 'delete': False},
    },
}


def get_profile(user):
    if not user or not user.is_authenticated:
        return None
    return getattr(user, 'profile', None)


def has_permission(profile, module, action):
    if profile is None:
        return False
    if profile.is_admin:
        return True
    return bool((profile.permissions or {}).get(module, {}).get(action, False))


class ModulePermission(permissions.BasePermission):
    """
    Checks the user's permission matrix for the view's `permission_module`.
    `permission_actions` maps viewset actions to matrix actions; viewset
    actions that are not mapped are allowed for any authenticated user.
    """
    message = "You do not have permission to perform this action."

    def has_permission(self, request, view):
        module = getattr(view, 'permission_module', None)
        mapping = getattr(view, 'permission_actions', {})
        matrix_action = mapping.get(getattr(view, 'action', None))
        if module is None or matrix_action is None:
            return True
        return has_permission(get_profile(request.user), module, matrix_action)


class IsCompanyAdmin(permissions.BasePermission):
    """Allow only admin or developer profiles."""
    def has_permission(self, request, view):
        profile = get_profile(request.user)
        return bool(profile and profile.is_admin)


class IsDeveloper(permissions.BasePermission):
    def has_permission(self, request, view):
        profile = get_profile(request.user)
        return bool(profile and profile.role == 'developer')
