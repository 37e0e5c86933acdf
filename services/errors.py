"""Classified failures raised by the menu services.

Each error carries a ``code`` tag that the HTTP layer forwards to clients.
"""

from typing import Optional


FAIL_READ = "FAIL_READ"
FAIL_CREATE = "FAIL_CREATE"
FAIL_UPDATE = "FAIL_UPDATE"
FAIL_DELETE = "FAIL_DELETE"


class MenuError(Exception):
    """Base class for menu service failures."""
    code = "MENU_ERROR"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class NotFoundError(MenuError):
    code = "RECORD_NOT_FOUND"

    def __init__(self, message: str = "Menu item not found"):
        super().__init__(message)


class HasChildrenError(MenuError):
    """Delete refused because the menu still has a child."""
    code = "HAS_CHILDREN"

    def __init__(self, menu_id: str, child_id: str):
        super().__init__(f"Menu has child menu [{child_id}] and cannot be deleted")
        self.menu_id = menu_id
        self.child_id = child_id


class AssociationClearError(MenuError):
    code = "ASSOCIATION_CLEAR_FAILED"

    def __init__(self, message: str = "Failed to clear role associations of menu"):
        super().__init__(message)


class StoreError(MenuError):
    """Generic read/write failure; the low-level error is kept as ``__cause__``."""

    def __init__(self, code: str, message: str):
        super().__init__(message, code=code)
