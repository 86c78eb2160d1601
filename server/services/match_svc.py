"""
Match generation pipeline.

profile + catalog -> AI provider -> normalize_matches -> Match Store

The AI reply is untrusted text. It is parsed into plain JSON first and
then coerced field by field into MatchSuggestion records. When nothing
usable comes back, every scholarship gets a fixed fallback score so the
caller always receives a complete result set.
"""
import json
import math
import logging
import uuid
from typing import Any, Dict, List, Optional

from dtos.match_dtos import MatchSuggestion
from services.ai_client import AIProvider
from services.storage_svc import Storage

logger = logging.getLogger(__name__)

FALLBACK_SCORE = 50
DEFAULT_REASONING = "No reasoning provided"
FALLBACK_REASONING = "No AI reasoning provided. This is a default match for the scholarship titled: {title}."
INITIAL_STATUS = "new"


def coerce_score(value: Any) -> int:
    """Integer score clamped to [0, 100]; anything non-numeric becomes 0."""
    if isinstance(value, bool):
        return 0
    try:
        score = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(score):
        return 0
    if math.isinf(score):
        return 100 if score > 0 else 0
    return max(0, min(100, int(score)))


def _parse_entries(raw_text: Optional[str]) -> List[Any]:
    if raw_text is None:
        return []
    try:
        parsed = json.loads(raw_text)
    except (ValueError, TypeError) as e:
        logger.error(f"❌ Failed to parse AI match JSON: {e}")
        return []
    if not isinstance(parsed, list):
        logger.warning(f"⚠️  AI match payload is a {type(parsed).__name__}, expected a list")
        return []
    return parsed


def fallback_matches(scholarships: List[Dict[str, Any]]) -> List[MatchSuggestion]:
    return [
        MatchSuggestion(
            scholarshipId=str(s["id"]),
            matchScore=FALLBACK_SCORE,
            aiReasoning=FALLBACK_REASONING.format(title=s.get("title") or s["id"]),
        )
        for s in scholarships
    ]


def normalize_matches(raw_text: Optional[str], scholarships: List[Dict[str, Any]]) -> List[MatchSuggestion]:
    """
    Turn the provider's raw text (or None) into validated match suggestions.

    Entries that are not objects, lack a scholarshipId, or name a
    scholarship outside the candidate set are dropped; only the first entry
    per scholarship is kept. An empty result against a non-empty catalog
    is replaced by the uniform fallback, so a reply naming only unknown
    scholarships degrades to the full fallback set.
    """
    known_ids = {str(s["id"]) for s in scholarships}
    suggestions: List[MatchSuggestion] = []
    seen = set()

    for entry in _parse_entries(raw_text):
        if not isinstance(entry, dict):
            continue
        raw_id = entry.get("scholarshipId")
        if raw_id is None:
            continue
        scholarship_id = str(raw_id).strip()
        if scholarship_id not in known_ids or scholarship_id in seen:
            logger.debug(f"Skipping AI entry for scholarship '{scholarship_id}'")
            continue
        seen.add(scholarship_id)

        reasoning = entry.get("aiReasoning")
        if not isinstance(reasoning, str) or not reasoning.strip():
            reasoning = DEFAULT_REASONING

        suggestions.append(MatchSuggestion(
            scholarshipId=scholarship_id,
            matchScore=coerce_score(entry.get("matchScore")),
            aiReasoning=reasoning,
        ))

    if suggestions:
        return suggestions

    if not scholarships:
        return []

    logger.warning(f"⚠️  AI returned no usable matches, providing fallback matches for {len(scholarships)} scholarships")
    return fallback_matches(scholarships)


def generate_matches(
    profile: Dict[str, Any],
    scholarships: List[Dict[str, Any]],
    provider: AIProvider,
) -> List[MatchSuggestion]:
    """Score every scholarship for the profile. Never raises on AI failure."""
    if not scholarships:
        return []
    raw_text = provider.suggest_matches(profile, scholarships)
    return normalize_matches(raw_text, scholarships)


def generate_and_store_matches(
    storage: Storage,
    provider: AIProvider,
    profile: Dict[str, Any],
    scholarships: List[Dict[str, Any]],
) -> List[Dict[str, Any]]:
    """
    Run one generation and persist it as a new batch.

    Earlier batches for the same profile are kept; every row of this run
    shares one batchId so readers can tell runs apart.
    """
    suggestions = generate_matches(profile, scholarships, provider)
    batch_id = uuid.uuid4().hex

    rows = [
        {
            **suggestion.model_dump(),
            "profileId": profile["id"],
            "status": INITIAL_STATUS,
            "batchId": batch_id,
        }
        for suggestion in suggestions
    ]
    created = storage.create_matches(rows) if rows else []
    logger.info(f"🎯 Generated {len(created)} matches for profile {profile['id']} (batch {batch_id})")
    return created


def list_matches_with_scholarships(
    storage: Storage,
    profile_id: str,
    latest_only: bool = False,
) -> List[Dict[str, Any]]:
    """Matches for a profile, best score first, each with its scholarship embedded."""
    matches = storage.list_matches(profile_id)

    if latest_only and matches:
        # Ties on createdAt go to the later-stored row
        newest = matches[0]
        for match in matches[1:]:
            if (match.get("createdAt") or "") >= (newest.get("createdAt") or ""):
                newest = match
        matches = [m for m in matches if m.get("batchId") == newest.get("batchId")]

    cache: Dict[str, Optional[Dict[str, Any]]] = {}
    results = []
    for match in matches:
        sid = match["scholarshipId"]
        if sid not in cache:
            cache[sid] = storage.get_scholarship(sid)
        results.append({**match, "scholarship": cache[sid]})

    return sorted(results, key=lambda m: (-m.get("matchScore", 0), m.get("createdAt") or ""))


def update_match_status(storage: Storage, match_id: str, status: str) -> Optional[Dict[str, Any]]:
    """
    Overwrite a match's status. Any non-empty status is accepted and no
    transition rules apply. Returns None when the match does not exist.
    """
    updated = storage.update_match_status(match_id, status)
    if updated is not None:
        logger.info(f"📌 Match {match_id} -> {status}")
    return updated
