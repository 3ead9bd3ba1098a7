# database.py
import logging
from typing import Callable, Dict, List

from pymongo import ASCENDING, MongoClient
from pymongo.errors import DuplicateKeyError, OperationFailure

from config import MONGODB_DB, MONGODB_URI

logger = logging.getLogger(__name__)

client = MongoClient(MONGODB_URI)
db = client[MONGODB_DB]

# Collections
BOOKINGS = "bookings"
REVIEWS = "reviews"


class MongoRowStore:
    """
    Row-oriented access to a MongoDB database: every collection is a table of
    plain dict rows kept in insertion order. Lookups are full scans.
    """

    def __init__(self, database):
        self.db = database
        self._unique_keys = set()

    def append_row(self, table: str, fields: Dict) -> None:
        self.db[table].insert_one(dict(fields))

    def append_unique(self, table: str, key: str, fields: Dict) -> bool:
        """Insert the row unless another row already holds the same ``key``."""
        self._ensure_unique(table, key)
        try:
            self.db[table].insert_one(dict(fields))
        except DuplicateKeyError:
            return False
        return True

    def scan_all(self, table: str) -> List[Dict]:
        rows = self.db[table].find({}).sort("_id", ASCENDING)
        return [{k: v for k, v in row.items() if k != "_id"} for row in rows]

    def update_fields(self, table: str, match: Callable[[Dict], bool], updates: Dict) -> bool:
        """Set ``updates`` on the first row accepted by ``match``."""
        for row in self.db[table].find({}).sort("_id", ASCENDING):
            if not match(row):
                continue
            if updates:
                self.db[table].update_one({"_id": row["_id"]}, {"$set": dict(updates)})
            return True
        return False

    def clear(self, table: str) -> None:
        self.db[table].delete_many({})

    def _ensure_unique(self, table: str, key: str) -> None:
        if (table, key) in self._unique_keys:
            return
        try:
            self.db[table].create_index([(key, ASCENDING)], unique=True)
        except OperationFailure as e:
            # existing duplicate rows; fall back to the scan-then-append check
            logger.warning(f"Could not create unique index on {table}.{key}: {e}")
        self._unique_keys.add((table, key))


store = MongoRowStore(db)


def get_store() -> MongoRowStore:
    return store
