import json
from datetime import date

import httpx
import pytest

from client.api import ApiError, BookingApi
from client.cache import BookingCache
from client.calendar_view import DayState
from client.sync import BOOKED, REJECTED, UNCONFIRMED, UNREACHABLE, SyncClient
from conftest import ADMIN_PASSWORD, ADMIN_USER, book


@pytest.fixture
def cache_path(tmp_path):
    return str(tmp_path / "bookings.json")


@pytest.fixture
def sync(api, cache_path):
    return SyncClient(BookingApi("/api/", http=api), BookingCache(cache_path))


def offline_sync(handler, cache_path):
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return SyncClient(BookingApi("http://hotel.test/api/", http=http), BookingCache(cache_path))


# --- cache ---

def test_cache_replace_and_persist(cache_path):
    cache = BookingCache(cache_path)
    cache.replace([
        {"booked_date": "2025-06-15", "full_name": "Asha"},
        {"date": "2025-06-16", "name": "Ravi"},
        {"booked_date": "2025-06-17"},
        {"booked_date": ""},
    ])
    assert cache.snapshot() == {"2025-06-15": "Asha", "2025-06-16": "Ravi", "2025-06-17": "Unknown"}

    fresh = BookingCache(cache_path)
    assert fresh.load() is True
    assert fresh.snapshot() == cache.snapshot()


def test_replace_drops_entries_missing_from_new_list(cache_path):
    cache = BookingCache(cache_path)
    cache.replace([{"booked_date": "2025-06-15", "full_name": "Asha"}])
    cache.apply_optimistic("2025-06-20", "Me")
    cache.replace([{"booked_date": "2025-06-16", "full_name": "Ravi"}])
    assert cache.snapshot() == {"2025-06-16": "Ravi"}


def test_optimistic_entries_are_not_persisted(cache_path):
    cache = BookingCache(cache_path)
    cache.replace([])
    cache.apply_optimistic("2025-06-20", None)
    assert cache.snapshot() == {"2025-06-20": "You"}
    assert "2025-06-20" in cache

    fresh = BookingCache(cache_path)
    fresh.load()
    assert fresh.snapshot() == {}


def test_missing_or_corrupt_cache(cache_path, tmp_path):
    assert BookingCache(cache_path).load() is False
    assert BookingCache(None).load() is False

    with open(cache_path, "w") as f:
        f.write("{not json")
    assert BookingCache(cache_path).load() is False

    with open(cache_path, "w") as f:
        json.dump({"bookings": []}, f)
    assert BookingCache(cache_path).load() is False


# --- sync against the real app ---

def test_open_paints_cache_then_refreshes(api, sync, cache_path):
    with open(cache_path, "w") as f:
        json.dump([{"booked_date": "2025-05-01", "full_name": "Stale"}], f)
    book(api, booked_date="2025-06-15")

    assert sync.open() is True
    assert sync.cache.snapshot() == {"2025-06-15": "Asha"}

    with open(cache_path) as f:
        assert json.load(f)[0]["booked_date"] == "2025-06-15"


def test_open_hands_cached_snapshot_over_before_fetch(api, sync, cache_path):
    with open(cache_path, "w") as f:
        json.dump([{"booked_date": "2025-05-01", "full_name": "Stale"}], f)
    book(api, booked_date="2025-06-15")

    seen = []
    sync.on_change = seen.append
    sync.open()

    assert seen == [{"2025-05-01": "Stale"}, {"2025-06-15": "Asha"}]


def test_cached_snapshot_painted_when_server_unreachable(cache_path):
    with open(cache_path, "w") as f:
        json.dump([{"booked_date": "2025-05-01", "full_name": "Stale"}], f)

    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    seen = []
    sync = offline_sync(handler, cache_path)
    sync.on_change = seen.append

    assert sync.open() is False
    assert seen == [{"2025-05-01": "Stale"}]


def test_submit_booking_applies_optimistic_update(api, sync):
    sync.open()
    result = sync.submit_booking("Asha", "9999999999", "Delhi", "2025-06-15")

    assert result.outcome == BOOKED
    assert result.ok
    view = sync.month(2025, 6, today=date(2025, 6, 1))
    assert {d.key: d for d in view.days}["2025-06-15"].state is DayState.BOOKED


def test_submit_booking_rejected(api, sync):
    book(api, booked_date="2025-06-15")
    result = sync.submit_booking("Ravi", "8888888888", "Pune", "2025-06-15")

    assert result.outcome == REJECTED
    assert result.message == "Date already booked"
    assert "2025-06-15" not in sync.cache


def test_past_booking_still_shows_as_booked(api, sync):
    book(api, booked_date="2025-06-01")
    sync.refresh()
    cell = {d.key: d for d in sync.month(2025, 6, today=date(2025, 6, 20)).days}["2025-06-01"]
    assert cell.state is DayState.BOOKED


def test_status_lookup_and_reviewer_check(api, sync):
    book(api, booked_date="2025-06-15", full_name="Asha Verma", mobile="'9999999999")
    book(api, booked_date="2025-06-18", full_name="Ravi", mobile="8888888888")

    mine = sync.find_my_bookings("asha", "9999999999")
    assert [b["booked_date"] for b in mine] == ["2025-06-15"]
    assert sync.find_my_bookings("ravi", "9999999999") == []

    assert sync.verify_reviewer("9999999999") is None
    result = sync.update_booking("2025-06-15", ADMIN_USER, ADMIN_PASSWORD, status="Confirmed", payment_status="Paid")
    assert result["success"] is True
    assert sync.verify_reviewer("9999999999")["full_name"] == "Asha Verma"

    assert sync.submit_review("9999999999", "Lovely hosts", 5)["success"] is True
    assert sync.reviews()[0]["name"] == "Asha Verma"


def test_admin_bookings_sorted_latest_first(api, sync):
    for day in ["2025-06-10", "2025-08-01", "2025-07-04"]:
        book(api, booked_date=day)
    assert [b["booked_date"] for b in sync.admin_bookings()] == ["2025-08-01", "2025-07-04", "2025-06-10"]


def test_admin_login_via_client(api):
    client = BookingApi("/api/", http=api)
    assert client.admin_login(ADMIN_USER, ADMIN_PASSWORD) == {"success": True}
    assert client.admin_login(ADMIN_USER, "nope")["success"] is False


# --- transport edge cases ---

def test_unreadable_response_counts_as_probable_success(cache_path):
    def handler(request):
        return httpx.Response(200, text="<html>opaque</html>")

    sync = offline_sync(handler, cache_path)
    result = sync.submit_booking("Asha", "9999999999", "Delhi", "2025-06-15")

    assert result.outcome == UNCONFIRMED
    assert "refresh" in result.message
    assert sync.cache.snapshot() == {"2025-06-15": "Asha"}


def test_transport_failure_leaves_cache_untouched(cache_path):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    sync = offline_sync(handler, cache_path)
    result = sync.submit_booking("Asha", "9999999999", "Delhi", "2025-06-15")

    assert result.outcome == UNREACHABLE
    assert sync.cache.snapshot() == {}
    assert sync.refresh() is False


def test_failed_refresh_keeps_cached_snapshot(cache_path):
    with open(cache_path, "w") as f:
        json.dump([{"booked_date": "2025-06-15", "full_name": "Asha"}], f)

    def handler(request):
        return httpx.Response(502, text="Bad Gateway")

    sync = offline_sync(handler, cache_path)
    assert sync.open() is False
    assert sync.cache.snapshot() == {"2025-06-15": "Asha"}


def test_read_failure_raises_api_error(cache_path):
    def handler(request):
        return httpx.Response(200, json={"success": False, "message": "Invalid action"})

    api = BookingApi("http://hotel.test/api/", http=httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(ApiError, match="Invalid action"):
        api.get_bookings()
