"""User API router with CRUD operations."""

from fastapi import APIRouter, Depends, Response
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlmodel import Session

from src.users_service.api.http.deps import get_db_session, get_user_service
from src.users_service.core.exceptions import UsersServiceError
from src.users_service.core.services import UserService
from src.users_service.entities.user import User

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {404: {"description": "No user with this id"}}


@router.get("", response_model=list[User])
def list_users(service: UserService = Depends(get_user_service)) -> list[User]:
    """List all users."""
    return service.find_all()


@router.get("/name/{prefix}", response_model=list[User])
def find_users_by_name(
    prefix: str,
    service: UserService = Depends(get_user_service),
) -> list[User]:
    """List users whose name starts with the prefix, ignoring case."""
    return service.find_by_name(prefix)


@router.get("/{user_id}", response_model=User, responses=_NOT_FOUND)
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
):
    """Get a user by ID."""
    user = service.find_by_id(user_id)
    if user is None:
        return Response(status_code=404)
    return user


@router.post("", response_model=User, responses={400: {"description": "Invalid user data"}})
def create_user(
    user: User,
    session: Session = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
) -> User:
    """Create a new user. Any id in the body is ignored."""
    try:
        created_user = service.create(user)
        session.commit()
    except UsersServiceError:
        session.rollback()
        raise
    return created_user


@router.put(
    "",
    response_model=User,
    responses={400: {"description": "Missing id or invalid user data"}, **_NOT_FOUND},
)
def update_user(
    user: User,
    session: Session = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
):
    """Replace an existing user, identified by the id in the body."""
    if user.id is None:
        return JSONResponse(status_code=400, content=jsonable_encoder(user))

    if service.find_by_id(user.id) is None:
        return JSONResponse(status_code=404, content=jsonable_encoder(user))

    try:
        updated_user = service.update(user)
        session.commit()
    except UsersServiceError:
        session.rollback()
        raise
    return updated_user


@router.delete("/{user_id}", response_model=User, responses=_NOT_FOUND)
def delete_user(
    user_id: int,
    session: Session = Depends(get_db_session),
    service: UserService = Depends(get_user_service),
):
    """Delete a user and return its last representation."""
    user = service.find_by_id(user_id)
    if user is None:
        return Response(status_code=404)

    try:
        service.remove(user_id)
        session.commit()
    except UsersServiceError:
        session.rollback()
        raise
    return user
