from cli import main
from conftest import book


def run(api, tmp_path, *argv):
    return main(["--api-url", "/api/", "--cache", str(tmp_path / "cache.json"), *argv], http=api)


def test_calendar_command(api, tmp_path, capsys):
    book(api, booked_date="2025-06-15")
    assert run(api, tmp_path, "calendar", "--month", "2025-06") == 0
    out = capsys.readouterr().out
    assert "June 2025" in out
    assert "xx" in out


def test_book_command(api, tmp_path, capsys):
    args = ["book", "--date", "2025-06-15", "--name", "Asha", "--mobile", "9999999999", "--location", "Delhi"]
    assert run(api, tmp_path, *args) == 0
    assert "Booking Successful!" in capsys.readouterr().out

    assert run(api, tmp_path, *args) == 1
    assert "already booked" in capsys.readouterr().out


def test_status_and_reviews_commands(api, tmp_path, capsys):
    assert run(api, tmp_path, "status", "--name", "Asha", "--mobile", "9999999999") == 1
    assert "No bookings found" in capsys.readouterr().out

    book(api)
    assert run(api, tmp_path, "status", "--name", "Asha", "--mobile", "9999999999") == 0
    assert "2025-06-15" in capsys.readouterr().out

    assert run(api, tmp_path, "reviews") == 0
    assert "No reviews yet" in capsys.readouterr().out


def test_calendar_prints_cached_month_then_refreshed_one(api, tmp_path, capsys):
    with open(tmp_path / "cache.json", "w") as f:
        f.write('[{"booked_date": "2025-06-10", "full_name": "Stale"}]')
    book(api, booked_date="2025-06-15")

    assert run(api, tmp_path, "calendar", "--month", "2025-06") == 0
    out = capsys.readouterr().out
    cached, refreshed = out.split("Updated from server:")
    assert "June 2025" in cached
    assert "June 2025" in refreshed
