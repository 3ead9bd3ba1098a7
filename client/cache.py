# client/cache.py
import json
import logging
import os
from typing import Any, Dict, List, Optional

from utils.dates import try_normalize_date

logger = logging.getLogger(__name__)


class BookingCache:
    """
    Local snapshot of the server's booking list.

    ``entries`` maps a ``YYYY-MM-DD`` key to the occupant's name. The snapshot
    is a cache, never a source of truth: ``replace`` rebuilds it wholesale from
    a full fetch and persists the list so the next start can paint at once.
    ``apply_optimistic`` records the user's own booking in memory only.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.bookings: List[Dict[str, Any]] = []
        self.entries: Dict[str, str] = {}

    def load(self) -> bool:
        """Fill the snapshot from the cache file; False when there is nothing usable."""
        if not self.path or not os.path.exists(self.path):
            return False
        try:
            with open(self.path, "r") as f:
                bookings = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable booking cache {self.path}: {e}")
            return False
        if not isinstance(bookings, list):
            logger.warning(f"Ignoring booking cache {self.path}: expected a list")
            return False
        self._rebuild(bookings)
        logger.debug(f"Loaded {len(bookings)} cached bookings from {self.path}")
        return True

    def replace(self, bookings: List[Dict[str, Any]]) -> None:
        self._rebuild(bookings)
        if not self.path:
            return
        try:
            with open(self.path, "w") as f:
                json.dump(self.bookings, f)
        except OSError as e:
            logger.warning(f"Could not write booking cache {self.path}: {e}")

    def apply_optimistic(self, booked_date: str, name: Optional[str] = None) -> None:
        key = try_normalize_date(booked_date)
        if key:
            self.entries[key] = name or "You"

    def snapshot(self) -> Dict[str, str]:
        return dict(self.entries)

    def __contains__(self, booked_date) -> bool:
        return try_normalize_date(booked_date) in self.entries

    def _rebuild(self, bookings: List[Dict[str, Any]]) -> None:
        self.bookings = list(bookings)
        self.entries = {}
        for b in self.bookings:
            key = try_normalize_date(b.get("booked_date") or b.get("date"))
            if key:
                self.entries[key] = b.get("full_name") or b.get("name") or "Unknown"
