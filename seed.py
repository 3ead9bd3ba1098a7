# seed.py → wipes bookings & reviews, then loads demo data

import os
from datetime import timedelta

from database import BOOKINGS, REVIEWS, store
from models.booking import BookingCreate, BookingUpdate
from models.review import ReviewCreate
from services.booking_service import BookingService
from services.review_service import ReviewService
from utils.auth import pwd_context
from utils.dates import today_in_zone

# === CLEAR OLD DATA ===
store.clear(BOOKINGS)
store.clear(REVIEWS)

print("Old data cleared!\n")

bookings = BookingService(store)
reviews = ReviewService(store)
today = today_in_zone()

# ================== 1. BOOKINGS ==================
guests = [
    ("Asha Verma", "9999999999", "Delhi", -20, "Confirmed", "Paid", "Early check-in requested"),
    ("Rahul Mehta", "9876543210", "Mumbai", -9, "Booked", "Done", ""),
    ("Priya Nair", "9123456780", "Kochi", -2, "Confirmed", "Pending", "Pays at arrival"),
    ("Imran Khan", "9000011111", "Jaipur", 5, "Pending", "Pending", ""),
    ("Meera Iyer", "9555512345", "Chennai", 12, "Confirmed", "Paid", "Anniversary, room decoration"),
]

for name, mobile, location, offset, status, payment, notes in guests:
    day = (today + timedelta(days=offset)).isoformat()
    bookings.create_booking(BookingCreate(full_name=name, mo_number=mobile, location=location, booked_date=day))
    bookings.update_booking(BookingUpdate(booked_date=day, status=status, payment_status=payment, admin_notes=notes))
    print(f"Booking {day}: {name} ({status}/{payment})")

# ================== 2. REVIEWS ==================
for mobile, text, rating in [
    ("9999999999", "Clean rooms and a very warm welcome. Would stay again!", 5),
    ("9876543210", "Great location, breakfast could be better.", 4),
    ("9555512345", "Staff arranged everything for our anniversary.", 5),
]:
    review = reviews.add_review(ReviewCreate(mobile=mobile, review=text, rating=rating))
    print(f"Review by {review.name} ({review.rating}★)")

# ================== 3. ADMIN ==================
admin_password = os.getenv("ADMIN_PASSWORD")
if admin_password:
    print("\nSet this in .env:")
    print(f"ADMIN_PASSWORD_HASH={pwd_context.hash(admin_password)}")

print("\nSeeding done!")
