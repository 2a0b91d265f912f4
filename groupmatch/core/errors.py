"""
Error taxonomy shared by the store adapters and the services.

Every public operation fails with one of these; main.py turns them into
HTTP responses.
"""


class GroupMatchError(Exception):
    status_code = 500
    kind = "error"

    def __init__(self, detail: str = ""):
        super().__init__(detail)
        self.detail = detail or self.__class__.__name__


class NotFound(GroupMatchError):
    status_code = 404
    kind = "not_found"


class Forbidden(GroupMatchError):
    status_code = 403
    kind = "forbidden"


class ValidationError(GroupMatchError):
    status_code = 422
    kind = "validation_error"


class StorageError(GroupMatchError):
    """Transient backend failure; the caller may retry the action."""
    status_code = 503
    kind = "storage_error"


class Unauthenticated(GroupMatchError):
    status_code = 401
    kind = "unauthenticated"
