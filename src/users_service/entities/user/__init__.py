"""User entity module.

This module contains all User-related classes organized by responsibility:
- User: Domain entity
- UserTable: Database persistence model
- UserStore: Persistence interface used by the user service
- UserRepository / InMemoryUserRepository: Store implementations
"""

from .entity import User
from .repository import InMemoryUserRepository, UserRepository, UserStore
from .table import UserTable

__all__ = [
    "User",
    "UserTable",
    "UserStore",
    "UserRepository",
    "InMemoryUserRepository",
]
