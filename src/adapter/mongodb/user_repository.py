"""MongoDB implementation of UserRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import ConflictError, DependencyError
from domain.model.user import User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            return True
        except PyMongoError as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            name=doc['name'],
            email=doc['email'],
            created_at=doc['created_at'],
            updated_at=doc['updated_at'],
            password_hash=doc.get('password_hash'),
        )

    def create(self, name: str, email: str, password_hash: str) -> User:
        """Insert a user document; the unique email index rejects duplicates."""
        user_id = uuid.uuid4().hex
        now = datetime.now(timezone.utc)
        user_doc = {
            '_id': user_id,
            'name': name,
            'email': email,
            'password_hash': password_hash,
            'created_at': now,
            'updated_at': now,
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            raise ConflictError("User already exists")
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            raise DependencyError("Failed to create user") from e

        logger.info("User created", extra={"userId": user_id, "email": email})
        return self._to_domain(user_doc)

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'email': email})
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise DependencyError("Failed to read user") from e
        return self._to_domain(doc) if doc else None

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'_id': user_id})
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            raise DependencyError("Failed to read user") from e
        return self._to_domain(doc) if doc else None
