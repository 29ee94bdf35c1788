"""User roles and the permissions each role carries in its access token."""

from enum import Enum


class UserRole(str, Enum):
    SUPER_ADMIN = "SuperAdmin"
    ADMIN = "Admin"
    USER = "User"


class Permission(str, Enum):
    BOOKS_WRITE = "books:write"
    CATEGORIES_WRITE = "categories:write"
    PURCHASES_MANAGE = "purchases:manage"
    PURCHASES_CREATE = "purchases:create"
    LIBRARY_WRITE = "library:write"
    REVIEWS_WRITE = "reviews:write"
    ADMIN_READ = "admin:read"


# Seeded user type ids, matching the registration payload's integer userType.
USER_TYPE_IDS: dict[int, UserRole] = {
    1: UserRole.SUPER_ADMIN,
    2: UserRole.ADMIN,
    3: UserRole.USER,
}

_STAFF_PERMISSIONS = (
    Permission.BOOKS_WRITE,
    Permission.CATEGORIES_WRITE,
    Permission.PURCHASES_MANAGE,
    Permission.ADMIN_READ,
)

_ROLE_PERMISSIONS: dict[UserRole, tuple[Permission, ...]] = {
    UserRole.SUPER_ADMIN: _STAFF_PERMISSIONS,
    UserRole.ADMIN: _STAFF_PERMISSIONS,
    UserRole.USER: (
        Permission.PURCHASES_CREATE,
        Permission.LIBRARY_WRITE,
        Permission.REVIEWS_WRITE,
    ),
}


def permissions_for(user_type: str) -> list[str]:
    """Permission tags granted to a user type; unknown types get none."""
    try:
        role = UserRole(user_type)
    except ValueError:
        return []
    return [permission.value for permission in _ROLE_PERMISSIONS[role]]
