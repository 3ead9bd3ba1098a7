# models/booking.py

from enum import Enum
from pydantic import BaseModel, field_validator
from typing import Any, Dict, Optional


class BookingStatus(str, Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"


# "Booked" / "Done" still appear in older rows
STATUS_SYNONYMS = {
    "Pending": BookingStatus.PENDING,
    "Confirmed": BookingStatus.CONFIRMED,
    "Booked": BookingStatus.CONFIRMED,
}

PAYMENT_SYNONYMS = {
    "Pending": PaymentStatus.PENDING,
    "Paid": PaymentStatus.PAID,
    "Done": PaymentStatus.PAID,
}


def canonical_status(value: Any) -> Optional[BookingStatus]:
    """Map a stored booking status onto the canonical enum; unknown text gives None."""
    if not value:
        return BookingStatus.PENDING
    return STATUS_SYNONYMS.get(str(value).strip())


def canonical_payment(value: Any) -> Optional[PaymentStatus]:
    if not value:
        return PaymentStatus.PENDING
    return PAYMENT_SYNONYMS.get(str(value).strip())


def is_review_eligible(status: Any, payment_status: Any) -> bool:
    return (canonical_status(status) is BookingStatus.CONFIRMED
            and canonical_payment(payment_status) is PaymentStatus.PAID)


def normalize_mobile(value: Any) -> str:
    """Strip whitespace and the leading quote spreadsheets put in front of numbers."""
    if value is None:
        return ""
    return str(value).strip().lstrip("'").strip()


class BookingCreate(BaseModel):
    full_name: str
    mo_number: str
    location: str
    booked_date: str

    @field_validator("mo_number", mode="before")
    @classmethod
    def mobile_as_text(cls, v: Any):
        if isinstance(v, int):
            return str(v)
        return v


class BookingUpdate(BaseModel):
    booked_date: str
    status: Optional[str] = None          # Pending, Confirmed
    payment_status: Optional[str] = None  # Pending, Paid
    admin_notes: Optional[str] = None

    def changes(self) -> Dict[str, str]:
        """Only the fields the caller actually sent; null counts as absent."""
        sent = self.model_dump(exclude_unset=True, exclude={"booked_date"})
        return {k: v for k, v in sent.items() if v is not None}


class BookingOut(BaseModel):
    full_name: str
    mo_number: str
    location: str
    booked_date: str
    timestamp: Optional[str] = None
    status: str = BookingStatus.PENDING.value
    payment_status: str = PaymentStatus.PENDING.value
    admin_notes: str = ""
