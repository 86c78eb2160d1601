"""
Background tasks for the Scholarship Match service.
"""
from celery_app import celery_app
from datetime import datetime, date, timezone
from typing import Dict, Any, Optional
import asyncio
import logging
from services.event_manager import event_bus
from services.storage_svc import Storage, StorageError, get_storage
from services import deadline_svc

logger = logging.getLogger(__name__)


def _emit(event_type: str, payload: Dict[str, Any]):
    try:
        loop = asyncio.get_running_loop()
        # Inside an event loop (e.g. FastAPI): schedule it
        loop.create_task(event_bus.emit(event_type, payload))
    except RuntimeError:
        # No running loop (Celery worker): run it to completion
        asyncio.run(event_bus.emit(event_type, payload))


def scan_deadlines(storage: Storage, today: Optional[date] = None) -> Dict[str, Any]:
    """
    Emit DEADLINE_APPROACHING for every favorited/applied match whose
    deadline is 0, 1, 3 or 7 days away, or already missed.
    """
    today = today or datetime.now(timezone.utc).date()
    scholarships = {s["id"]: s for s in storage.list_scholarships(active_only=False)}

    scanned = 0
    reminders = 0
    for profile in storage.list_profiles():
        matches = storage.list_matches(profile["id"])
        scanned += len(matches)
        for payload in deadline_svc.due_reminders(profile, matches, scholarships, today):
            _emit("DEADLINE_APPROACHING", payload)
            reminders += 1

    logger.info(f"✅ Deadline check completed. Scanned {scanned} matches, {reminders} reminders.")
    return {"status": "success", "scanned": scanned, "reminders": reminders}


@celery_app.task(name="tasks.check_match_deadlines")
def check_match_deadlines() -> Dict[str, Any]:
    """
    Periodic task: scans tracked matches and emits reminder events.
    It does not format or deliver reminders itself; subscribers do.
    """
    logger.info("⏰ Starting deadline check task...")
    try:
        return scan_deadlines(get_storage())
    except StorageError as e:
        logger.error(f"❌ Error in deadline check task: {e}")
        return {"status": "error", "error": str(e)}
