from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Domain model representing a registered user."""
    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime
    password_hash: str | None = None
