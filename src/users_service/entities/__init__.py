"""Entities organized by business concept.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .user import InMemoryUserRepository, User, UserRepository, UserStore, UserTable

__all__ = [
    "User",
    "UserTable",
    "UserStore",
    "UserRepository",
    "InMemoryUserRepository",
]
