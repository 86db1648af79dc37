"""MongoDB index management utilities.

Shared index creation with conflict resolution, used by each MongoXxxRepository.
"""

from logging import getLogger

from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def create_index_safe(collection, keys: list, name: str, **kwargs) -> bool:
    """Create index, replacing an existing index that clashes by name or key spec.

    A clash happens when an index with the same name has different keys
    (or different options such as ``unique``), or when the same keys are
    indexed under another name.
    """
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise
        return _resolve_conflict(collection, keys, name, **kwargs)


def _resolve_conflict(collection, keys: list, name: str, **kwargs) -> bool:
    """Drop the clashing index and recreate it with the requested spec."""
    keys_dict = dict(keys)

    for idx_name, idx_info in collection.index_information().items():
        if idx_name == '_id_':
            continue

        same_name = idx_name == name
        same_keys = dict(idx_info.get('key', [])) == keys_dict
        if not (same_name or same_keys):
            continue

        logger.warning("Dropping conflicting index", extra={"index": idx_name, "collection": collection.name})
        collection.drop_index(idx_name)
        collection.create_index(keys, name=name, **kwargs)
        logger.info("Recreated index", extra={"index": name, "collection": collection.name})
        return True

    logger.error("Failed to resolve index conflict", extra={"index": name})
    return False


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections. Called at app startup.

    Contacts are write-only and need none.
    """
    from adapter.mongodb.user_repository import MongoUserRepository

    return MongoUserRepository(db).ensure_indexes()
