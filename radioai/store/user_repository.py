"""
User repository - operations for user accounts.
"""

from datetime import datetime

from .models import User
from .tables import MemoryTables


class UserRepository:
    """Repository for user operations."""

    def __init__(self, tables: MemoryTables):
        self._tables = tables

    def get(self, user_id: int) -> User | None:
        return self._tables.users.get(user_id)

    def get_by_username(self, username: str) -> User | None:
        for user in self._tables.users:
            if user.username == username:
                return user
        return None

    def add(self, username: str, password: str) -> User:
        table = self._tables.users
        user = User(
            id=table.next_id(),
            username=username,
            password=password,
            created_at=datetime.now(),
        )
        return table.put(user.id, user)
