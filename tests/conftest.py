import mongomock
import pytest
from fastapi.testclient import TestClient

from database import MongoRowStore, get_store
from main import app
from utils.auth import CredentialVerifier, get_verifier, pwd_context

ADMIN_USER = "frontdesk"
ADMIN_PASSWORD = "s3cret-pass"
ADMIN_HEADERS = {"X-Admin-User": ADMIN_USER, "X-Admin-Password": ADMIN_PASSWORD}


@pytest.fixture
def store():
    return MongoRowStore(mongomock.MongoClient()["hotel_booking_test"])


@pytest.fixture(scope="session")
def verifier():
    return CredentialVerifier(ADMIN_USER, pwd_context.hash(ADMIN_PASSWORD))


@pytest.fixture
def api(store, verifier):
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_verifier] = lambda: verifier
    yield TestClient(app)
    app.dependency_overrides.clear()


def book(api, booked_date="2025-06-15", full_name="Asha", mobile="9999999999", location="Delhi"):
    return api.post("/api/", json={
        "action": "book",
        "booked_date": booked_date,
        "full_name": full_name,
        "mo_number": mobile,
        "location": location,
    }).json()
