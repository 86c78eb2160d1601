import json

from conftest import FakeProvider, SAMPLE_PROFILE
from services.guidance_svc import (
    DEFAULT_GUIDANCE,
    generate_guidance,
    generate_and_store_guidance,
    normalize_guidance,
)

SCHOLARSHIP = {"id": "7", "title": "Robotics Award", "organization": "RoboOrg"}


def test_ai_failure_returns_default_guidance():
    guidance = generate_guidance(SAMPLE_PROFILE, SCHOLARSHIP, FakeProvider(ConnectionError("down")))

    assert guidance.model_dump() == DEFAULT_GUIDANCE


def test_complete_payload_is_kept():
    raw = json.dumps({
        "essayTips": ["Tell the robot story"],
        "checklist": ["Transcript", "Two references"],
        "improvementSuggestions": ["Join a competition"],
    })

    guidance = normalize_guidance(raw)

    assert guidance.checklist == ["Transcript", "Two references"]
    assert guidance.essayTips == ["Tell the robot story"]


def test_missing_or_empty_fields_take_defaults():
    raw = json.dumps({"essayTips": ["Be specific"], "checklist": []})

    guidance = normalize_guidance(raw)

    assert guidance.essayTips == ["Be specific"]
    assert guidance.checklist == DEFAULT_GUIDANCE["checklist"]
    assert guidance.improvementSuggestions == DEFAULT_GUIDANCE["improvementSuggestions"]


def test_items_are_coerced_to_strings():
    raw = json.dumps({"essayTips": "Single tip", "checklist": [1, None, {"x": 1}, "  "], "improvementSuggestions": ["ok"]})

    guidance = normalize_guidance(raw)

    assert guidance.essayTips == ["Single tip"]
    assert guidance.checklist == ["1"]


def test_non_object_payload_returns_defaults():
    assert normalize_guidance("[1, 2]").model_dump() == DEFAULT_GUIDANCE
    assert normalize_guidance("{broken").model_dump() == DEFAULT_GUIDANCE


def test_stored_guidance_is_the_latest_for_the_pair(storage, profile):
    first = generate_and_store_guidance(storage, FakeProvider(None), profile, SCHOLARSHIP)
    second = generate_and_store_guidance(
        storage,
        FakeProvider(json.dumps({"essayTips": ["newer"]})),
        profile,
        SCHOLARSHIP,
    )

    latest = storage.get_latest_guidance(profile["id"], "7")

    assert first["id"] != second["id"]
    assert latest["id"] == second["id"]
    assert latest["essayTips"] == ["newer"]
