import asyncio
import logging
from datetime import date

from services import deadline_svc
from services.deadline_svc import (
    build_dashboard,
    build_deadline_items,
    classify_urgency,
    due_reminders,
    get_reminder_config,
    parse_deadline,
)

TODAY = date(2025, 3, 10)

SCHOLARSHIPS = {
    "1": {"id": "1", "title": "Soon", "organization": "A", "amount": "$1,000", "deadline": "2025-03-13"},
    "2": {"id": "2", "title": "Later", "organization": "B", "amount": "$2,500", "deadline": "2025-06-01"},
    "3": {"id": "3", "title": "Gone", "organization": "C", "amount": "$500", "deadline": "2025-03-01"},
    "4": {"id": "4", "title": "Rolling", "organization": "D", "amount": "Varies", "deadline": "Rolling"},
}


def _match(match_id, scholarship_id, status="new", score=50, created="2025-03-01T00:00:00"):
    return {
        "id": match_id,
        "profileId": "p1",
        "scholarshipId": scholarship_id,
        "matchScore": score,
        "status": status,
        "createdAt": created,
    }


def test_parse_deadline_formats():
    assert parse_deadline("2025-03-15") == date(2025, 3, 15)
    assert parse_deadline("2025-03-15T10:00:00Z") == date(2025, 3, 15)
    assert parse_deadline("March 15, 2025") == date(2025, 3, 15)
    assert parse_deadline("Sept 1 2025") == date(2025, 9, 1)
    assert parse_deadline("3/15/2025") == date(2025, 3, 15)
    assert parse_deadline("15 March 2025") == date(2025, 3, 15)
    assert parse_deadline("December 1st, 2025") == date(2025, 12, 1)
    assert parse_deadline("Rolling") is None
    assert parse_deadline("2025-02-30") is None
    assert parse_deadline(None) is None


def test_classify_urgency():
    assert classify_urgency(-1) == "missed"
    assert classify_urgency(0) == "urgent"
    assert classify_urgency(7) == "urgent"
    assert classify_urgency(8) == "upcoming"
    assert classify_urgency(30) == "upcoming"
    assert classify_urgency(31) == "future"


def test_reminder_config_days():
    assert get_reminder_config(3)[0] == "DEADLINE_3_DAYS"
    assert get_reminder_config(-2)[0] == "DEADLINE_MISSED"
    assert get_reminder_config(5) is None


def test_deadline_items_sorted_and_untracked_dropped():
    matches = [
        _match("m1", "1"),
        _match("m2", "2"),
        _match("m3", "3"),
        _match("m4", "4"),
        _match("m5", "2", status="passed", created="2025-01-01T00:00:00"),
    ]

    items = build_deadline_items(matches, SCHOLARSHIPS, TODAY)

    assert [i["scholarshipId"] for i in items] == ["3", "1", "2"]
    assert [i["urgency"] for i in items] == ["missed", "urgent", "future"]
    assert items[1]["daysLeft"] == 3


def test_latest_match_decides_tracking():
    matches = [
        _match("old", "1", status="new", created="2025-03-01T00:00:00"),
        _match("new", "1", status="passed", created="2025-03-05T00:00:00"),
    ]

    assert build_deadline_items(matches, SCHOLARSHIPS, TODAY) == []


def test_dashboard_stats():
    matches = [
        _match("m1", "1", status="favorited", score=80),
        _match("m2", "2", status="applied", score=60),
        _match("m3", "1", status="new", score=70, created="2025-03-02T00:00:00"),
    ]

    stats = build_dashboard("p1", matches, SCHOLARSHIPS, TODAY)

    assert stats["totalMatches"] == 3
    assert stats["averageScore"] == 70.0
    assert stats["statusCounts"] == {"favorited": 1, "applied": 1, "new": 1}
    # scholarship "1" counted once even though matched twice
    assert stats["totalPotentialAmount"] == 3500
    assert stats["deadlinesThisMonth"] == 1
    assert len(stats["deadlines"]) == 2


def test_dashboard_without_matches():
    stats = build_dashboard("p1", [], SCHOLARSHIPS, TODAY)

    assert stats["totalMatches"] == 0
    assert stats["averageScore"] == 0.0
    assert stats["deadlines"] == []


def test_due_reminders_only_for_followed_matches():
    profile = {"id": "p1", "userId": "u1"}
    matches = [
        _match("m1", "1", status="favorited"),  # 3 days left
        _match("m2", "3", status="applied"),  # missed
        _match("m3", "2", status="applied"),  # far away
        _match("m4", "1", status="new", created="2025-02-01T00:00:00"),
    ]

    payloads = due_reminders(profile, matches, SCHOLARSHIPS, TODAY)

    assert sorted(p["match_id"] for p in payloads) == ["m1", "m2"]
    assert all(p["user_id"] == "u1" for p in payloads)


def test_deadline_handler_logs_reminder(caplog):
    payload = {"days_left": 1, "scholarship_name": "Soon", "deadline_date": "2025-03-11", "profile_id": "p1"}

    with caplog.at_level(logging.INFO, logger=deadline_svc.__name__):
        asyncio.run(deadline_svc.handle_deadline_approaching(payload))

    assert "DEADLINE_1_DAY" in caplog.text
    assert "March 11, 2025" in caplog.text


def test_unparseable_deadlines_are_skipped():
    for text in ("Varies", "Rolling admission", "99/99/2025", "   "):
        assert parse_deadline(text) is None, text
