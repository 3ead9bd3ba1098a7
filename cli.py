# cli.py
"""
Hotel booking command line client.

Examples:
  python cli.py calendar --month 2025-06
  python cli.py book --date 2025-06-15 --name Asha --mobile 9999999999 --location Delhi
  python cli.py status --name Asha --mobile 9999999999
  python cli.py reviews
"""

import argparse
import logging
import sys
from datetime import datetime

from client.api import BookingApi
from client.cache import BookingCache
from client.calendar_view import render_text
from client.sync import REJECTED, SyncClient
from utils.dates import today_in_zone
import config


def setup_logging(log_level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format=config.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hotel booking client")
    parser.add_argument("--api-url", default=config.API_URL, help=f"Booking API URL (default: {config.API_URL})")
    parser.add_argument("--cache", default=config.CACHE_PATH, help="Local booking cache file")
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    sub = parser.add_subparsers(dest="command", required=True)

    cal = sub.add_parser("calendar", help="Show a month with booked and open days")
    cal.add_argument("--month", help="YYYY-MM (default: current month)")

    book = sub.add_parser("book", help="Book an open date")
    book.add_argument("--date", required=True, help="YYYY-MM-DD")
    book.add_argument("--name", required=True)
    book.add_argument("--mobile", required=True)
    book.add_argument("--location", required=True)

    status = sub.add_parser("status", help="Look up your bookings")
    status.add_argument("--name", required=True)
    status.add_argument("--mobile", required=True)

    sub.add_parser("reviews", help="List guest reviews, newest first")
    return parser


def main(argv=None, http=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    sync = SyncClient(BookingApi(args.api_url, http=http), BookingCache(args.cache))

    if args.command == "calendar":
        if args.month:
            month = datetime.strptime(args.month, "%Y-%m")
            year, mon = month.year, month.month
        else:
            today = today_in_zone()
            year, mon = today.year, today.month
        painted = []

        def paint(snapshot):
            if painted:
                print("\nUpdated from server:")
            painted.append(snapshot)
            print(render_text(sync.month(year, mon)))

        sync.on_change = paint
        if not sync.open():
            print("Could not reach the booking server; showing cached data.", file=sys.stderr)
            if not painted:
                print(render_text(sync.month(year, mon)))
        return 0

    if args.command == "book":
        sync.open()
        if args.date in sync.cache:
            print(f"This date ({args.date}) is already booked!")
            return 1
        result = sync.submit_booking(args.name, args.mobile, args.location, args.date)
        if result.outcome == REJECTED:
            print(f"Booking failed: {result.message}")
            return 1
        print(result.message)
        return 0

    if args.command == "status":
        bookings = sync.find_my_bookings(args.name, args.mobile)
        if not bookings:
            print("No bookings found with these details.")
            return 1
        for b in bookings:
            print(f"{b['booked_date']}  {b['full_name']}  {b['location']}  "
                  f"status={b.get('status') or 'Pending'}  payment={b.get('payment_status') or 'Pending'}")
        return 0

    if args.command == "reviews":
        reviews = sync.reviews()
        if not reviews:
            print("No reviews yet. Be the first to share your experience!")
        for r in reviews:
            print(f"{'*' * int(r.get('rating') or 5):<5}  {r['name']}: {r['review']}")
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
