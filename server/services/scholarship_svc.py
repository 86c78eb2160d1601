import re
import logging
from typing import Any, Dict, List, Optional
from dtos.scholarship_dtos import ScholarshipSearchParams
from services.seed_data import sample_rows
from services.storage_svc import Storage

logger = logging.getLogger(__name__)

_NON_DIGITS = re.compile(r"[^0-9]")


def parse_amount(amount: Optional[str]) -> int:
    """
    Numeric value of a display amount, e.g. "$10,000" -> 10000.
    Every non-digit character is dropped, so currency symbols and
    separators (including "₹16,50,000") are ignored. Empty -> 0.
    """
    digits = _NON_DIGITS.sub("", amount or "")
    return int(digits) if digits else 0


def ensure_catalog(storage: Storage) -> List[Dict[str, Any]]:
    """Return active scholarships, loading the demo catalog when none exist."""
    scholarships = storage.list_scholarships(active_only=True)
    if scholarships:
        return scholarships

    rows = sample_rows()
    storage.save_scholarships(rows)
    logger.info(f"🌱 Seeded {len(rows)} scholarships and internship opportunities")
    return storage.list_scholarships(active_only=True)


def _eligible(values: Optional[List[str]], wanted: str) -> bool:
    # An unset eligibility list means "open to everyone"
    if not values:
        return True
    wanted = wanted.strip().lower()
    return any(v.strip().lower() == wanted for v in values)


def matches_filters(scholarship: Dict[str, Any], filters: ScholarshipSearchParams) -> bool:
    if filters.type and scholarship.get("type") != filters.type:
        return False

    if filters.minAmount is not None and parse_amount(scholarship.get("amount")) < filters.minAmount:
        return False

    if filters.tags:
        tags = {t.lower() for t in scholarship.get("tags") or []}
        if not tags.intersection(t.lower() for t in filters.tags):
            return False

    if filters.fieldOfStudy and not _eligible(scholarship.get("eligibleFields"), filters.fieldOfStudy):
        return False

    if filters.educationLevel and not _eligible(scholarship.get("eligibleLevels"), filters.educationLevel):
        return False

    return True


def search_scholarships(storage: Storage, filters: ScholarshipSearchParams) -> List[Dict[str, Any]]:
    """Active scholarships matching every provided filter, newest first."""
    results = [s for s in ensure_catalog(storage) if matches_filters(s, filters)]
    return sorted(results, key=lambda s: s.get("createdAt") or "", reverse=True)
