"""In-memory implementation of UserRepository for testing."""

import threading
import uuid
from datetime import datetime, timezone
from domain.model.errors import ConflictError
from domain.model.user import User


class FakeUserRepository:
    def __init__(self):
        self.store: dict[str, User] = {}
        # Guards store; check-and-insert under it stands in for the unique email index
        self._lock = threading.Lock()

    # ── write operations ─────────────────────────────────────

    def create(self, name: str, email: str, password_hash: str) -> User:
        with self._lock:
            if any(u.email == email for u in self.store.values()):
                raise ConflictError("User already exists")

            user_id = uuid.uuid4().hex
            now = datetime.now(timezone.utc)
            user = User(
                id=user_id,
                name=name,
                email=email,
                created_at=now,
                updated_at=now,
                password_hash=password_hash,
            )
            self.store[user_id] = user
            return user

    def delete(self, user_id: str) -> bool:
        with self._lock:
            return self.store.pop(user_id, None) is not None

    def ensure_indexes(self) -> bool:
        return True

    # ── read operations ──────────────────────────────────────

    def get_by_email(self, email: str) -> User | None:
        with self._lock:
            for user in self.store.values():
                if user.email == email:
                    return user
        return None

    def get_by_id(self, user_id: str) -> User | None:
        with self._lock:
            return self.store.get(user_id)
