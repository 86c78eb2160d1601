import json

from conftest import FakeProvider, SAMPLE_PROFILE
from services import match_svc
from services.match_svc import (
    FALLBACK_SCORE,
    DEFAULT_REASONING,
    coerce_score,
    generate_matches,
    generate_and_store_matches,
    list_matches_with_scholarships,
    normalize_matches,
)

CATALOG = [
    {"id": "1", "title": "Robotics Award"},
    {"id": "2", "title": "Nursing Grant"},
    {"id": "3", "title": "Art Prize"},
]


def test_fallback_covers_every_scholarship_when_ai_fails():
    """A provider error yields one fallback match per scholarship, nothing more."""
    provider = FakeProvider(TimeoutError("upstream timed out"))

    result = generate_matches(SAMPLE_PROFILE, CATALOG, provider)

    assert [m.scholarshipId for m in result] == ["1", "2", "3"]
    assert all(m.matchScore == FALLBACK_SCORE for m in result)
    assert "Robotics Award" in result[0].aiReasoning


def test_single_scholarship_fallback_names_its_title():
    catalog = [{"id": "1", "title": "X", "eligibilityGpa": "3.5"}]
    provider = FakeProvider(RuntimeError("boom"))

    result = generate_matches(SAMPLE_PROFILE, catalog, provider)

    assert len(result) == 1
    assert result[0].scholarshipId == "1"
    assert result[0].matchScore == 50
    assert "X" in result[0].aiReasoning


def test_empty_catalog_returns_no_matches_without_calling_ai():
    provider = FakeProvider("[]")

    assert generate_matches(SAMPLE_PROFILE, [], provider) == []
    assert provider.prompts == []


def test_scores_are_clamped_and_non_numeric_becomes_zero():
    raw = json.dumps([
        {"scholarshipId": "1", "matchScore": 150, "aiReasoning": "great"},
        {"scholarshipId": "2", "matchScore": -20, "aiReasoning": "poor"},
        {"scholarshipId": "3", "matchScore": "high", "aiReasoning": "unclear"},
    ])

    result = {m.scholarshipId: m.matchScore for m in normalize_matches(raw, CATALOG)}

    assert result == {"1": 100, "2": 0, "3": 0}


def test_coerce_score_edge_values():
    assert coerce_score("87") == 87
    assert coerce_score(72.9) == 72
    assert coerce_score(None) == 0
    assert coerce_score(True) == 0
    assert coerce_score(float("nan")) == 0
    assert coerce_score(float("inf")) == 100


def test_unknown_and_duplicate_entries_are_dropped():
    raw = json.dumps([
        {"scholarshipId": "1", "matchScore": 90, "aiReasoning": "first"},
        {"scholarshipId": "1", "matchScore": 10, "aiReasoning": "duplicate"},
        {"scholarshipId": "999", "matchScore": 80, "aiReasoning": "invented"},
        "not an object",
        {"matchScore": 70},
    ])

    result = normalize_matches(raw, CATALOG)

    assert len(result) == 1
    assert result[0].scholarshipId == "1"
    assert result[0].aiReasoning == "first"


def test_numeric_ids_are_matched_as_strings():
    raw = json.dumps([{"scholarshipId": 2, "matchScore": 64, "aiReasoning": "ok"}])

    result = normalize_matches(raw, CATALOG)

    assert result[0].scholarshipId == "2"


def test_missing_reasoning_gets_default_text():
    raw = json.dumps([{"scholarshipId": "3", "matchScore": 40}])

    result = normalize_matches(raw, CATALOG)

    assert result[0].aiReasoning == DEFAULT_REASONING


def test_unparseable_or_wrong_shape_falls_back():
    for raw in ("not json at all", json.dumps({"scholarshipId": "1"}), "[]"):
        result = normalize_matches(raw, CATALOG)
        assert len(result) == len(CATALOG), raw
        assert {m.matchScore for m in result} == {FALLBACK_SCORE}


def test_fenced_reply_is_parsed():
    reply = "Here you go:\n```json\n[{\"scholarshipId\": \"2\", \"matchScore\": 77, \"aiReasoning\": \"fits\"}]\n```"
    provider = FakeProvider(reply)

    result = generate_matches(SAMPLE_PROFILE, CATALOG, provider)

    assert [(m.scholarshipId, m.matchScore) for m in result] == [("2", 77)]
    assert "total 3" in provider.prompts[0]


def test_stored_matches_start_as_new_and_share_a_batch(storage, profile):
    provider = FakeProvider(json.dumps([
        {"scholarshipId": "1", "matchScore": 80, "aiReasoning": "a"},
        {"scholarshipId": "2", "matchScore": 60, "aiReasoning": "b"},
    ]))

    created = generate_and_store_matches(storage, provider, profile, CATALOG)

    assert len(created) == 2
    assert {m["status"] for m in created} == {match_svc.INITIAL_STATUS}
    assert len({m["batchId"] for m in created}) == 1
    assert all(m["profileId"] == profile["id"] for m in created)


def test_repeated_generation_keeps_both_batches(storage, profile):
    storage.save_scholarships(CATALOG)
    first = generate_and_store_matches(storage, FakeProvider(None), profile, CATALOG)
    second = generate_and_store_matches(storage, FakeProvider(None), profile, CATALOG)

    everything = list_matches_with_scholarships(storage, profile["id"])
    latest = list_matches_with_scholarships(storage, profile["id"], latest_only=True)

    assert len(everything) == len(first) + len(second)
    assert {m["batchId"] for m in latest} == {second[0]["batchId"]}
    assert len(latest) == len(CATALOG)


def test_listing_is_ordered_by_score_with_scholarship_attached(storage, profile):
    storage.save_scholarships(CATALOG)
    provider = FakeProvider(json.dumps([
        {"scholarshipId": "1", "matchScore": 20, "aiReasoning": "low"},
        {"scholarshipId": "3", "matchScore": 95, "aiReasoning": "high"},
    ]))
    generate_and_store_matches(storage, provider, profile, CATALOG)

    listed = list_matches_with_scholarships(storage, profile["id"])

    assert [m["scholarshipId"] for m in listed] == ["3", "1"]
    assert listed[0]["scholarship"]["title"] == "Art Prize"


def test_reply_with_only_unknown_ids_falls_back_for_every_scholarship():
    raw = json.dumps([{"scholarshipId": "404", "matchScore": 99, "aiReasoning": "invented"}])

    result = normalize_matches(raw, CATALOG)

    assert [m.scholarshipId for m in result] == ["1", "2", "3"]
    assert {m.matchScore for m in result} == {FALLBACK_SCORE}
