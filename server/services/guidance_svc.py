import json
import logging
from typing import Any, Dict, List, Optional
from dtos.guidance_dtos import GuidancePayload
from services.ai_client import AIProvider
from services.storage_svc import Storage

logger = logging.getLogger(__name__)

GUIDANCE_FIELDS = ("essayTips", "checklist", "improvementSuggestions")

DEFAULT_GUIDANCE: Dict[str, List[str]] = {
    "essayTips": ["Focus on your personal story and how it connects to the scholarship's mission."],
    "checklist": ["Review the eligibility criteria and gather the required documents."],
    "improvementSuggestions": ["Highlight concrete achievements and be specific about your goals."],
}


def default_guidance() -> GuidancePayload:
    return GuidancePayload(**{k: list(v) for k, v in DEFAULT_GUIDANCE.items()})


def _coerce_items(value: Any) -> List[str]:
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        return []
    items = []
    for item in value:
        if item is None or isinstance(item, (dict, list)):
            continue
        text = str(item).strip()
        if text:
            items.append(text)
    return items


def normalize_guidance(raw_text: Optional[str]) -> GuidancePayload:
    """
    Validate the provider's guidance object.

    None, unparseable text or a non-object yields the default guidance.
    For an object, each field is coerced to a list of strings and a field
    left empty takes its default entry.
    """
    if raw_text is None:
        return default_guidance()

    try:
        parsed = json.loads(raw_text)
    except (ValueError, TypeError) as e:
        logger.error(f"❌ Failed to parse AI guidance JSON: {e}")
        return default_guidance()

    if not isinstance(parsed, dict):
        logger.warning(f"⚠️  AI guidance payload is a {type(parsed).__name__}, expected an object")
        return default_guidance()

    fields = {}
    for name in GUIDANCE_FIELDS:
        items = _coerce_items(parsed.get(name))
        fields[name] = items or list(DEFAULT_GUIDANCE[name])
    return GuidancePayload(**fields)


def generate_guidance(
    profile: Dict[str, Any],
    scholarship: Dict[str, Any],
    provider: AIProvider,
) -> GuidancePayload:
    """Application advice for one (profile, scholarship) pair. Never raises on AI failure."""
    raw_text = provider.suggest_guidance(profile, scholarship)
    return normalize_guidance(raw_text)


def generate_and_store_guidance(
    storage: Storage,
    provider: AIProvider,
    profile: Dict[str, Any],
    scholarship: Dict[str, Any],
) -> Dict[str, Any]:
    guidance = generate_guidance(profile, scholarship, provider)
    record = storage.create_guidance({
        "profileId": profile["id"],
        "scholarshipId": str(scholarship["id"]),
        **guidance.model_dump(),
    })
    logger.info(f"📝 Guidance generated for profile {profile['id']} / scholarship {scholarship['id']}")
    return record
