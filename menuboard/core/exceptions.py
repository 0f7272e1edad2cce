"""
Domain errors raised by the crud/service layers.

Handlers registered in ``menuboard.main`` turn them into ``{"error": ...}``
JSON responses; the admin console catches them and redirects with
``?error=``.
"""


class MenuboardError(Exception):
    status_code = 500
    message = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationFailed(MenuboardError):
    status_code = 400
    message = "Invalid request"


class DuplicateName(MenuboardError):
    status_code = 400
    message = "Name already exists"


class NotFound(MenuboardError):
    status_code = 404
    message = "Not found"


class AuthError(MenuboardError):
    status_code = 401
    message = "Not authenticated"

    def __init__(self, message: str = None, status_code: int = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code
