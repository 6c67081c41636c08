"""User stores.

``UserStore`` is the persistence capability the user service depends on.
``UserRepository`` implements it on a SQLModel session and
``InMemoryUserRepository`` keeps users in a dict for tests.
Stores perform no validation; they only report what the storage rejects.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from loguru import logger
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, col, select

from src.users_service.core.exceptions import DuplicatePhoneError, UserNotFoundError

from .entity import User
from .table import UserTable


class UserStore(ABC):
    """Abstract interface for user persistence backends."""

    @abstractmethod
    def save(self, user: User) -> User:
        """Insert a user without id, or replace the stored user with the same id.

        Returns:
            The stored user, with its id assigned

        Raises:
            UserNotFoundError: If ``user.id`` is set but not stored
            DuplicatePhoneError: If another user already holds the phone
        """

    @abstractmethod
    def get(self, user_id: int) -> User | None:
        """Return the user with ``user_id`` or None."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every stored user in storage order."""

    @abstractmethod
    def find_by_name_prefix(self, prefix: str) -> list[User]:
        """Return users whose name starts with ``prefix``, ignoring case."""

    @abstractmethod
    def find_by_phone(self, phone: str) -> User | None:
        """Return the user holding exactly ``phone`` or None."""

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove the user with ``user_id``.

        Raises:
            UserNotFoundError: If no such user is stored
        """


class UserRepository(UserStore):
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, user: User) -> User:
        row = None
        if user.id is not None:
            row = self._session.get(UserTable, user.id)
            if row is None:
                raise UserNotFoundError(user.id)

        # Only the savepoint is rolled back when the write is rejected
        try:
            with self._session.begin_nested():
                if row is None:
                    row = UserTable(name=user.name, phone=user.phone)
                    self._session.add(row)
                else:
                    row.name = user.name
                    row.phone = user.phone
                self._session.flush()
        except IntegrityError as exc:
            logger.bind(phone=user.phone).warning("Unique phone constraint rejected write")
            raise DuplicatePhoneError(user.phone) from exc

        self._session.refresh(row)
        return User.model_validate(row, from_attributes=True)

    def get(self, user_id: int) -> User | None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def list_all(self) -> list[User]:
        statement = select(UserTable).order_by(col(UserTable.id))
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def find_by_name_prefix(self, prefix: str) -> list[User]:
        # lower() is applied to both sides in SQL
        statement = (
            select(UserTable)
            .where(col(UserTable.name).istartswith(prefix, autoescape=True))
            .order_by(col(UserTable.id))
        )
        rows = self._session.exec(statement).all()
        return [User.model_validate(row, from_attributes=True) for row in rows]

    def find_by_phone(self, phone: str) -> User | None:
        statement = select(UserTable).where(UserTable.phone == phone)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row, from_attributes=True)

    def delete(self, user_id: int) -> None:
        row = self._session.get(UserTable, user_id)
        if row is None:
            raise UserNotFoundError(user_id)
        self._session.delete(row)
        self._session.flush()


class InMemoryUserRepository(UserStore):
    """Dict-backed user store; ids count up from 1 and are never reused."""

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._next_id = 1

    def save(self, user: User) -> User:
        if user.id is not None and user.id not in self._users:
            raise UserNotFoundError(user.id)

        if user.phone:
            holder = self.find_by_phone(user.phone)
            if holder is not None and holder.id != user.id:
                raise DuplicatePhoneError(user.phone)

        user_id = user.id
        if user_id is None:
            user_id = self._next_id
            self._next_id += 1

        stored = user.model_copy(update={"id": user_id})
        self._users[user_id] = stored
        return stored.model_copy()

    def get(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        return user.model_copy() if user is not None else None

    def list_all(self) -> list[User]:
        return [user.model_copy() for user in self._users.values()]

    def find_by_name_prefix(self, prefix: str) -> list[User]:
        lowered = prefix.lower()
        return [
            user.model_copy()
            for user in self._users.values()
            if user.name is not None and user.name.lower().startswith(lowered)
        ]

    def find_by_phone(self, phone: str) -> User | None:
        for user in self._users.values():
            if user.phone == phone:
                return user.model_copy()
        return None

    def delete(self, user_id: int) -> None:
        if user_id not in self._users:
            raise UserNotFoundError(user_id)
        del self._users[user_id]
