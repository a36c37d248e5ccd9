"""
Access Checks.

Permissions this package declares, and the interface used to check them.
"""
from abc import ABC, abstractmethod

from ..domain.models import User

# Lets a user see the current state on forms where it cannot be changed
VIEW_STATE_PERMISSION = "view workflow state without transitions"

PERMISSIONS = [VIEW_STATE_PERMISSION]


class AccessChecker(ABC):
    @abstractmethod
    def user_access(self, permission: str, user: User) -> bool:
        pass


class PermissionAccessChecker(AccessChecker):
    """
    Checks the permission set carried by the User itself.
    """
    def user_access(self, permission: str, user: User) -> bool:
        return user.has_permission(permission)
