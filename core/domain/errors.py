"""
Domain errors raised by the profile store.
Every message is human readable and safe to show to the user as-is.
"""


class StoreError(Exception):
    """Base class for failures surfaced by the profile store"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class AuthError(StoreError):
    """Credential or session failure reported by the auth provider"""


class ProfileError(StoreError):
    """Profile row could not be created or loaded"""


class WriteError(StoreError):
    """Insert/update/delete rejected by the data store"""


class NotFoundError(WriteError):
    """Scoped update/delete matched no row (wrong owner or stale id)"""


class NotAuthenticatedError(StoreError):
    """Mutating call made without an active identity"""

    def __init__(self, message: str = "User not authenticated"):
        super().__init__(message)
