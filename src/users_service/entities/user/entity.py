"""User domain entity."""

from pydantic import Field

from src.users_service.entities._base import Entity


class User(Entity):
    """User entity representing a person in the system.

    Name is optional here so that a request without one reaches the user
    service, which reports it as invalid data rather than a schema error.
    """

    name: str | None = Field(default=None, description="User's name")
    phone: str | None = Field(default=None, description="User's phone number")
