# client/sync.py
"""
Sync client.

Keeps the local booking snapshot in step with the server: paints from the
persisted cache first, then revalidates with a full fetch, and applies the
user's own bookings optimistically instead of waiting for the next fetch.
"""
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Callable, Dict, List, Optional

import httpx

from client.api import ApiError, BookingApi
from client.cache import BookingCache
from client.calendar_view import CalendarMonth, build_month
from models.booking import is_review_eligible, normalize_mobile
from utils.dates import today_in_zone, try_normalize_date

logger = logging.getLogger(__name__)

BOOKED = "booked"
REJECTED = "rejected"
UNCONFIRMED = "unconfirmed"
UNREACHABLE = "unreachable"

REFRESH_HINT = "Booking request sent! Note: If you don't see the date marked as booked, please refresh."


@dataclass
class SubmitResult:
    outcome: str
    message: str

    @property
    def ok(self) -> bool:
        return self.outcome == BOOKED


class SyncClient:
    def __init__(self, api: BookingApi, cache: BookingCache,
                 on_change: Optional[Callable[[Dict[str, str]], None]] = None):
        self.api = api
        self.cache = cache
        # called with the snapshot each time it is (re)painted
        self.on_change = on_change

    def open(self) -> bool:
        """Paint from the cache if there is one, then revalidate. Returns whether the fetch succeeded."""
        if self.cache.load():
            logger.debug("Painting from cached bookings before refresh")
            self._changed()
        return self.refresh()

    def refresh(self) -> bool:
        try:
            bookings = self.api.get_bookings()
        except (httpx.HTTPError, ValueError, ApiError) as e:
            logger.error(f"Error fetching bookings: {e}")
            return False
        self.cache.replace(bookings)
        self._changed()
        return True

    def _changed(self):
        if self.on_change is not None:
            self.on_change(self.cache.snapshot())

    def month(self, year: int, month: int, today: Optional[date] = None) -> CalendarMonth:
        return build_month(year, month, self.cache.snapshot(), today or today_in_zone())

    # --- guest actions ---

    def submit_booking(self, full_name: str, mobile: str, location: str, booked_date: str) -> SubmitResult:
        """
        Send a ``book`` action once; it is never retried here.

        A response that arrives but cannot be read counts as a probable
        success: the date is marked locally and the user is asked to refresh.
        """
        payload = {
            "booked_date": booked_date,
            "full_name": full_name,
            "mo_number": mobile,
            "location": location,
        }
        try:
            response = self.api.post("book", payload)
        except httpx.TransportError as e:
            logger.error(f"Booking request for {booked_date} did not complete: {e}")
            return SubmitResult(UNREACHABLE, REFRESH_HINT)

        try:
            result = response.json()
            success = result["success"]
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Unreadable booking response (HTTP {response.status_code}): {e}")
            self.cache.apply_optimistic(booked_date, full_name)
            self._changed()
            return SubmitResult(UNCONFIRMED, REFRESH_HINT)

        if not success:
            return SubmitResult(REJECTED, result.get("message") or "Unknown error")

        self.cache.apply_optimistic(booked_date, full_name)
        self._changed()
        return SubmitResult(BOOKED, "Booking Successful!")

    def find_my_bookings(self, name: str, mobile: str) -> List[Dict[str, Any]]:
        """Guest status lookup: same mobile, name containing what was typed."""
        mobile = normalize_mobile(mobile)
        name = (name or "").strip().lower()
        return [
            b for b in self.api.get_bookings()
            if normalize_mobile(b.get("mo_number") or b.get("mobile")) == mobile
            and name in str(b.get("full_name") or b.get("name") or "").lower()
        ]

    def verify_reviewer(self, mobile: str) -> Optional[Dict[str, Any]]:
        """The booking that entitles this mobile number to review, if any."""
        mobile = normalize_mobile(mobile)
        for b in self.api.get_bookings():
            if normalize_mobile(b.get("mo_number")) != mobile:
                continue
            if is_review_eligible(b.get("status"), b.get("payment_status")):
                return b
        return None

    def submit_review(self, mobile: str, review: str, rating: int = 5) -> Dict[str, Any]:
        return self.api.write("add_review", {"mobile": mobile, "review": review, "rating": rating})

    def reviews(self) -> List[Dict[str, Any]]:
        return self.api.get_reviews()

    # --- admin actions ---

    def admin_bookings(self) -> List[Dict[str, Any]]:
        """Every booking, latest date first"""
        bookings = self.api.get_bookings()
        return sorted(bookings, key=lambda b: try_normalize_date(b.get("booked_date")) or "", reverse=True)

    def update_booking(self, booked_date: str, admin_user: str, admin_password: str, **changes) -> Dict[str, Any]:
        headers = {"X-Admin-User": admin_user, "X-Admin-Password": admin_password}
        payload = dict(changes, booked_date=booked_date)
        return self.api.write("update_booking", payload, headers=headers)
