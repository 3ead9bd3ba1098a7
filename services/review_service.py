# services/review_service.py
"""Review service - reviews only from guests with a confirmed, paid booking"""

import logging
from datetime import datetime, timezone
from typing import List

from database import BOOKINGS, REVIEWS
from models.booking import is_review_eligible, normalize_mobile
from models.review import DEFAULT_RATING, ReviewCreate, ReviewOut
from utils.dates import isoformat_or_none
from utils.errors import MalformedRequest, NotEligible

logger = logging.getLogger(__name__)


class ReviewService:
    def __init__(self, store):
        self.store = store

    def add_review(self, data: ReviewCreate) -> ReviewOut:
        """
        Append a review for the guest behind ``data.mobile``.

        The reviewer name comes from the matched booking, never from the
        request. Raises NotEligible unless some booking for that mobile is
        Confirmed (or Booked) and Paid (or Done).
        """
        if not data.review or not data.review.strip():
            raise MalformedRequest("Review text is required")

        mobile = normalize_mobile(data.mobile)
        booking = None
        if mobile:
            for row in self.store.scan_all(BOOKINGS):
                if normalize_mobile(row.get("mobile")) != mobile:
                    continue
                if is_review_eligible(row.get("status"), row.get("payment_status")):
                    booking = row
                    break

        if booking is None:
            logger.warning(f"Review rejected for mobile {mobile!r}: no confirmed paid booking")
            raise NotEligible()

        row = {
            "reviewer_name": booking.get("full_name") or "",
            "review_text": data.review,
            "created_at": datetime.now(timezone.utc),
            "rating": data.rating or DEFAULT_RATING,
        }
        self.store.append_row(REVIEWS, row)
        logger.info(f"Review added by {row['reviewer_name']} ({row['rating']} stars)")
        return self._review_out(row)

    def list_reviews(self) -> List[ReviewOut]:
        """Non-empty reviews, newest first"""
        rows = [r for r in self.store.scan_all(REVIEWS) if str(r.get("review_text") or "").strip()]
        return [self._review_out(r) for r in reversed(rows)]

    @staticmethod
    def _review_out(row) -> ReviewOut:
        return ReviewOut(
            name=str(row.get("reviewer_name") or ""),
            review=str(row.get("review_text")),
            date=isoformat_or_none(row.get("created_at")),
            rating=row.get("rating") or DEFAULT_RATING,
        )
