# services/booking_service.py
"""Booking service - one booking per calendar date, admin field updates"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from database import BOOKINGS
from models.booking import BookingCreate, BookingOut, BookingStatus, BookingUpdate, PaymentStatus
from utils.dates import isoformat_or_none, normalize_date, try_normalize_date
from utils.errors import BookingNotFound, DateAlreadyBooked, MalformedRequest

logger = logging.getLogger(__name__)


def booking_date_key(value) -> str:
    """Normalized date of an incoming request, or MalformedRequest."""
    try:
        return normalize_date(value)
    except ValueError:
        raise MalformedRequest(f"Invalid booked_date: {value!r}. Use YYYY-MM-DD")


def booking_out(row: Dict) -> BookingOut:
    raw_date = row.get("booked_date")
    return BookingOut(
        full_name=str(row.get("full_name") or ""),
        mo_number=str(row.get("mobile") or ""),
        location=str(row.get("location") or ""),
        booked_date=try_normalize_date(raw_date) or str(raw_date or ""),
        timestamp=isoformat_or_none(row.get("created_at")),
        status=str(row.get("status") or BookingStatus.PENDING.value),
        payment_status=str(row.get("payment_status") or PaymentStatus.PENDING.value),
        admin_notes=str(row.get("admin_notes") or ""),
    )


class BookingService:
    """Service layer for bookings, backed by a row store"""

    def __init__(self, store):
        self.store = store

    def list_bookings(self) -> List[BookingOut]:
        """All bookings in storage order; callers sort if they need to"""
        return [booking_out(row) for row in self.store.scan_all(BOOKINGS)]

    def find_booking(self, booked_date) -> Optional[BookingOut]:
        key = booking_date_key(booked_date)
        for row in self.store.scan_all(BOOKINGS):
            if try_normalize_date(row.get("booked_date")) == key:
                return booking_out(row)
        return None

    def create_booking(self, data: BookingCreate) -> BookingOut:
        key = booking_date_key(data.booked_date)

        # legacy rows may hold datetimes the unique index cannot see
        for row in self.store.scan_all(BOOKINGS):
            if try_normalize_date(row.get("booked_date")) == key:
                logger.warning(f"Booking rejected, {key} already booked")
                raise DateAlreadyBooked()

        row = {
            "full_name": data.full_name,
            "mobile": data.mo_number,
            "location": data.location,
            "booked_date": key,
            "created_at": datetime.now(timezone.utc),
            "status": BookingStatus.PENDING.value,
            "payment_status": PaymentStatus.PENDING.value,
            "admin_notes": "",
        }
        if not self.store.append_unique(BOOKINGS, "booked_date", row):
            logger.warning(f"Booking rejected, {key} taken by a concurrent request")
            raise DateAlreadyBooked()

        logger.info(f"Booking created for {key} ({data.full_name})")
        return booking_out(row)

    def update_booking(self, data: BookingUpdate) -> Dict[str, str]:
        """Write only the fields present in the request; returns what was written"""
        key = booking_date_key(data.booked_date)
        changes = data.changes()

        matched = self.store.update_fields(
            BOOKINGS,
            lambda row: try_normalize_date(row.get("booked_date")) == key,
            changes,
        )
        if not matched:
            logger.warning(f"Update for {key} failed: booking not found")
            raise BookingNotFound()

        logger.info(f"Booking {key} updated: {sorted(changes)}")
        return changes
