"""Exceptions raised by the users service."""


class UsersServiceError(Exception):
    """Base class for all errors raised by the service and its stores."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidDataError(UsersServiceError):
    """A user failed validation (missing name, duplicate phone).

    The message is meant for the client and is returned as-is.
    """


class StoreError(UsersServiceError):
    """Failure reported by a user store."""


class UserNotFoundError(StoreError):
    """The store holds no user with the requested id."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"No user with id {user_id}")
        self.user_id = user_id


class DuplicatePhoneError(StoreError):
    """The store rejected a write because the phone is already taken."""

    def __init__(self, phone: str | None) -> None:
        super().__init__(f"Phone {phone!r} is already assigned to another user")
        self.phone = phone
