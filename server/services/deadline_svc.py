import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional
from dateutil import parser as date_parser
from services.event_manager import event_bus
from services.scholarship_svc import parse_amount

logger = logging.getLogger(__name__)

# ==================== Configuration & Helpers ====================

URGENT_DAYS = 7
UPCOMING_DAYS = 30

# Statuses that drop a scholarship off the deadline tracker
UNTRACKED_STATUSES = {"passed", "rejected"}

# Statuses the background reminder scan looks at
REMINDER_STATUSES = {"favorited", "applied"}

REMINDER_RULES = {
    0: ("DEADLINE_TODAY", "Deadline Today!", "URGENT: Scholarship '{name}' deadline is TODAY ({date}). Submit now!"),
    1: ("DEADLINE_1_DAY", "1 Day Left", "Hurry! Scholarship '{name}' ends tomorrow ({date})."),
    3: ("DEADLINE_3_DAYS", "3 Days Left", "Scholarship '{name}' has 3 days left. Deadline: {date}."),
    7: ("DEADLINE_7_DAYS", "1 Week Left", "Scholarship '{name}' has 1 week left. Ends on {date}."),
}


def parse_deadline(text: Optional[str]) -> Optional[date]:
    """Parse a display deadline: YYYY-MM-DD, ISO datetime, 'March 15, 2025' or 3/15/2025."""
    text = (text or "").strip()
    if not text:
        return None

    try:
        if "T" in text:
            return datetime.fromisoformat(text.replace("Z", "")).date()
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        pass

    # Free-form display dates such as "March 15, 2025" or "3/15/2025"
    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError):
        return None


def days_until(deadline: date, today: date) -> int:
    return (deadline - today).days


def classify_urgency(days_left: int) -> str:
    if days_left < 0:
        return "missed"
    if days_left <= URGENT_DAYS:
        return "urgent"
    if days_left <= UPCOMING_DAYS:
        return "upcoming"
    return "future"


def get_reminder_config(days: int):
    """Reminder metadata for a number of days left, or None when no reminder is due."""
    if days < 0:
        return ("DEADLINE_MISSED", "Deadline Missed", 'The scholarship "{name}" ended on {date}. Unfortunately, you missed the deadline.')
    return REMINDER_RULES.get(days)


# ==================== Deadline Tracker ====================

def build_deadline_items(
    matches: List[Dict[str, Any]],
    scholarships: Dict[str, Dict[str, Any]],
    today: date,
) -> List[Dict[str, Any]]:
    """
    One tracker entry per scholarship among the profile's tracked matches,
    closest deadline first. Repeated generations produce several matches per
    scholarship; the most recent one decides the status shown.
    """
    latest: Dict[str, Dict[str, Any]] = {}
    for match in sorted(matches, key=lambda m: m.get("createdAt") or ""):
        latest[match["scholarshipId"]] = match

    items = []
    for scholarship_id, match in latest.items():
        if match.get("status") in UNTRACKED_STATUSES:
            continue
        scholarship = scholarships.get(scholarship_id)
        if not scholarship:
            continue
        deadline = parse_deadline(scholarship.get("deadline"))
        if deadline is None:
            continue
        days_left = days_until(deadline, today)
        items.append({
            "matchId": match["id"],
            "scholarshipId": scholarship_id,
            "title": scholarship.get("title", ""),
            "organization": scholarship.get("organization", ""),
            "deadline": scholarship.get("deadline", ""),
            "daysLeft": days_left,
            "urgency": classify_urgency(days_left),
            "status": match.get("status", "new"),
        })

    return sorted(items, key=lambda i: i["daysLeft"])


def build_dashboard(
    profile_id: str,
    matches: List[Dict[str, Any]],
    scholarships: Dict[str, Dict[str, Any]],
    today: date,
) -> Dict[str, Any]:
    status_counts: Dict[str, int] = {}
    for match in matches:
        status = match.get("status", "new")
        status_counts[status] = status_counts.get(status, 0) + 1

    scores = [m.get("matchScore", 0) for m in matches]
    average = round(sum(scores) / len(scores), 1) if scores else 0.0

    # Distinct scholarships only, duplicates from repeated runs count once
    matched_ids = {m["scholarshipId"] for m in matches}
    total_amount = sum(
        parse_amount(scholarships[sid].get("amount"))
        for sid in matched_ids if sid in scholarships
    )

    deadlines = build_deadline_items(matches, scholarships, today)
    this_month = 0
    for sid in matched_ids:
        deadline = parse_deadline((scholarships.get(sid) or {}).get("deadline"))
        if deadline and deadline >= today and (deadline.year, deadline.month) == (today.year, today.month):
            this_month += 1

    return {
        "profileId": profile_id,
        "totalMatches": len(matches),
        "averageScore": average,
        "statusCounts": status_counts,
        "totalPotentialAmount": total_amount,
        "deadlinesThisMonth": this_month,
        "deadlines": deadlines,
    }


def due_reminders(
    profile: Dict[str, Any],
    matches: List[Dict[str, Any]],
    scholarships: Dict[str, Dict[str, Any]],
    today: date,
) -> List[Dict[str, Any]]:
    """Reminder payloads for favorited/applied matches whose deadline hits a reminder day."""
    payloads = []
    for item in build_deadline_items(matches, scholarships, today):
        if item["status"] not in REMINDER_STATUSES:
            continue
        if get_reminder_config(item["daysLeft"]) is None:
            continue
        payloads.append({
            "user_id": profile.get("userId"),
            "profile_id": profile["id"],
            "match_id": item["matchId"],
            "scholarship_name": item["title"],
            "days_left": item["daysLeft"],
            "deadline_date": item["deadline"],
        })
    return payloads


# ==================== Event Handlers ====================

async def handle_deadline_approaching(payload: dict):
    """
    Listener: log a reminder for an approaching or missed deadline.
    """
    try:
        days = int(payload.get("days_left"))
    except (ValueError, TypeError):
        logger.error(f"Invalid days_left in payload: {payload.get('days_left')}")
        return

    config = get_reminder_config(days)
    if not config:
        return

    name = payload.get("scholarship_name", "Unknown")
    deadline_str = payload.get("deadline_date", "N/A")
    deadline = parse_deadline(deadline_str)
    formatted_date = deadline.strftime("%B %d, %Y") if deadline else deadline_str

    reminder_type, title, message_tpl = config
    message = message_tpl.format(name=name, date=formatted_date)
    logger.info(f"🔔 [{reminder_type}] {title} for profile {payload.get('profile_id')}: {message}")


event_bus.subscribe("DEADLINE_APPROACHING", handle_deadline_approaching)
