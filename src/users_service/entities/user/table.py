"""User database table model."""

from sqlalchemy import Index, text
from sqlmodel import Field

from src.users_service.entities._base import EntityTable

NON_BLANK_PHONE = text("phone <> ''")


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    Phones are unique among users holding a non-empty one; NULL and empty
    phones may repeat.
    """

    __tablename__ = "users"
    __table_args__ = (
        Index(
            "ix_users_phone",
            "phone",
            unique=True,
            sqlite_where=NON_BLANK_PHONE,
            postgresql_where=NON_BLANK_PHONE,
        ),
    )

    name: str = Field(nullable=False)
    phone: str | None = Field(default=None)
