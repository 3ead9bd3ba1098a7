# utils/errors.py
"""Failures reported to callers as ``{"success": false, "message": ...}``."""


class BookingError(Exception):
    message = "Request failed"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class DateAlreadyBooked(BookingError):
    message = "Date already booked"


class BookingNotFound(BookingError):
    message = "Booking not found"


class NotEligible(BookingError):
    message = "You can only leave a review if you have a Confirmed Booking and Payment is Done."


class InvalidAction(BookingError):
    message = "Invalid action"


class MalformedRequest(BookingError):
    message = "Malformed request"


class AdminAuthRequired(BookingError):
    message = "Admin authentication required"
