# routes/actions.py
"""
Action endpoints.

One read endpoint and one write endpoint, each dispatching on ``action``.
Every outcome is HTTP 200 with a ``success`` flag; failures carry ``message``.
"""
import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from database import get_store
from models.booking import BookingCreate, BookingUpdate
from models.review import ReviewCreate
from services.booking_service import BookingService
from services.review_service import ReviewService
from utils.auth import get_verifier, require_admin
from utils.errors import BookingError, InvalidAction, MalformedRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def failure(message: str) -> dict:
    return {"success": False, "message": message}


def validation_message(e: ValidationError) -> str:
    parts = []
    for err in e.errors():
        field = ".".join(str(p) for p in err["loc"]) or "body"
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)


# === GET: get_bookings / get_reviews ===
@router.get("/")
async def read_action(action: Optional[str] = None, store=Depends(get_store)):
    try:
        if action == "get_bookings":
            bookings = BookingService(store).list_bookings()
            return {"success": True, "bookings": [b.model_dump() for b in bookings]}
        if action == "get_reviews":
            reviews = ReviewService(store).list_reviews()
            return {"success": True, "reviews": [r.model_dump() for r in reviews]}
    except PyMongoError as e:
        logger.error(f"Storage error while reading {action}: {e}")
        return failure(f"Storage error: {e}")
    return failure(InvalidAction.message)


# === POST: book / update_booking / add_review ===
@router.post("/")
async def write_action(
    request: Request,
    store=Depends(get_store),
    verifier=Depends(get_verifier),
    x_admin_user: Optional[str] = Header(None, alias="X-Admin-User"),
    x_admin_password: Optional[str] = Header(None, alias="X-Admin-Password"),
):
    # browsers post this as text/plain to skip the CORS preflight, so ignore content type
    try:
        data = json.loads(await request.body())
        if not isinstance(data, dict):
            raise MalformedRequest("Request body must be a JSON object")
        action = data.get("action")

        if action == "book":
            BookingService(store).create_booking(BookingCreate(**data))
            return {"success": True, "message": "Booking Created"}

        if action == "update_booking":
            require_admin(verifier, x_admin_user, x_admin_password)
            BookingService(store).update_booking(BookingUpdate(**data))
            return {"success": True, "message": "Updated"}

        if action == "add_review":
            ReviewService(store).add_review(ReviewCreate(**data))
            return {"success": True, "message": "Review Added Successfully!"}

        raise InvalidAction()

    except BookingError as e:
        return failure(e.message)
    except ValidationError as e:
        logger.warning(f"Rejected malformed {request.method} body: {e.errors()}")
        return failure(validation_message(e))
    except ValueError as e:
        logger.warning(f"Unreadable request body: {e}")
        return failure(f"Malformed request: {e}")
    except PyMongoError as e:
        logger.error(f"Storage error while handling {request.method} action: {e}")
        return failure(f"Storage error: {e}")
