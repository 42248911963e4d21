"""
models/user.py
--------------
Domain model for a row of the `users` table.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    Represents a single user record.

    Attributes:
        name: User name.
        age: Age in years.
        id: Database primary key (None for new records).
    """
    name: str
    age: int
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"ID: {self.id}, Name: {self.name}, Age: {self.age}"
