from loguru import logger

from src.users_service.core.exceptions import DuplicatePhoneError, InvalidDataError
from src.users_service.entities.user import User, UserStore

NAME_MANDATORY = "User name is mandatory"
PHONE_TAKEN = "User with such phone already exists"
ID_MANDATORY = "User id is mandatory"


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def normalize_phone(phone: str | None) -> str | None:
    """Trim surrounding whitespace; an absent phone stays absent."""
    if phone is None:
        return None
    return phone.strip()


class UserService:
    """Validates users and mediates every read and write against a user store.

    The store does no validation of its own. Phone uniqueness is checked here
    before writing and again by the store's unique index, whose rejection is
    reported as the same invalid-data error.
    """

    def __init__(self, store: UserStore) -> None:
        self._store = store

    def create(self, user: User) -> User:
        """Store a new user, ignoring any id the caller supplied.

        Raises:
            InvalidDataError: If the name is blank or the phone is taken
        """
        candidate = user.model_copy(update={"id": None, "phone": normalize_phone(user.phone)})
        self.validate_user(candidate)

        created = self._save(candidate)
        logger.bind(user_id=created.id).info("User created")
        return created

    def update(self, user: User) -> User:
        """Replace the stored user with the same id.

        Callers check that the user exists first; the store raises
        ``UserNotFoundError`` for an unknown id.

        Raises:
            InvalidDataError: If the id is missing, the name is blank or the
                phone belongs to another user
        """
        if user.id is None:
            raise InvalidDataError(ID_MANDATORY)

        candidate = user.model_copy(update={"phone": normalize_phone(user.phone)})
        self.validate_user(candidate)

        updated = self._save(candidate)
        logger.bind(user_id=updated.id).info("User updated")
        return updated

    def remove(self, user_id: int) -> None:
        self._store.delete(user_id)
        logger.bind(user_id=user_id).info("User removed")

    def find_all(self) -> list[User]:
        return self._store.list_all()

    def find_by_id(self, user_id: int) -> User | None:
        return self._store.get(user_id)

    def find_by_name(self, prefix: str) -> list[User]:
        return self._store.find_by_name_prefix(prefix)

    def find_by_phone(self, phone: str | None) -> User | None:
        normalized = normalize_phone(phone)
        if not normalized:
            return None
        return self._store.find_by_phone(normalized)

    def validate_user(self, user: User) -> None:
        """Check the name is present and no other user holds the phone."""
        if is_blank(user.name):
            logger.bind(user_id=user.id).info("Rejected user without name")
            raise InvalidDataError(NAME_MANDATORY)

        holder = self.find_by_phone(user.phone)
        if holder is not None and (user.id is None or holder.id != user.id):
            logger.bind(user_id=user.id, holder_id=holder.id).info(
                "Rejected user with duplicate phone"
            )
            raise InvalidDataError(PHONE_TAKEN)

    def _save(self, user: User) -> User:
        try:
            return self._store.save(user)
        except DuplicatePhoneError as exc:
            # Another writer took the phone between the check and the write
            raise InvalidDataError(PHONE_TAKEN) from exc
