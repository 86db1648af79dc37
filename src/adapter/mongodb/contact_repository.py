"""MongoDB implementation of ContactRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger
from pymongo.database import Database
from pymongo.errors import PyMongoError
from adapter.mongodb import CONTACTS_COLLECTION_NAME
from domain.model.contact import Contact
from domain.model.errors import DependencyError

logger = getLogger(__name__)


class MongoContactRepository:
    def __init__(self, db: Database):
        self.collection = db[CONTACTS_COLLECTION_NAME]

    def create(self, name: str, email: str, message: str, phone: str) -> Contact:
        contact_id = uuid.uuid4().hex
        doc = {
            '_id': contact_id,
            'name': name,
            'email': email,
            'message': message,
            'phone': phone,
            'created_at': datetime.now(timezone.utc),
        }
        try:
            self.collection.insert_one(doc)
        except PyMongoError as e:
            logger.error("Failed to save contact", extra={"email": email, "error": str(e)})
            raise DependencyError("Failed to save contact") from e

        return Contact(
            id=contact_id,
            name=name,
            email=email,
            message=message,
            phone=phone,
            created_at=doc['created_at'],
        )

    def delete(self, contact_id: str) -> bool:
        try:
            result = self.collection.delete_one({'_id': contact_id})
        except PyMongoError as e:
            logger.error("Failed to delete contact", extra={"contactId": contact_id, "error": str(e)})
            raise DependencyError("Failed to delete contact") from e
        return result.deleted_count > 0
