import pytest

from conftest import FakeProvider, SAMPLE_PROFILE
from services import ai_client
from services.ai_client import DisabledProvider, extract_json_payload, init_ai_provider
from services.prompt_builder import build_guidance_prompt, build_match_prompt


def test_extract_plain_json():
    assert extract_json_payload('  [{"a": 1}]\n') == '[{"a": 1}]'


def test_extract_fenced_json():
    text = 'Sure!\n```json\n{"essayTips": ["x"]}\n```\nGood luck.'
    assert extract_json_payload(text) == '{"essayTips": ["x"]}'


def test_extract_bare_fence():
    assert extract_json_payload("```\n[]\n```") == "[]"


def test_extract_empty_reply():
    assert extract_json_payload(None) is None
    assert extract_json_payload("   ") is None


def test_complete_swallows_provider_errors():
    provider = FakeProvider(ValueError("response blocked"))

    assert provider.complete("prompt") is None
    assert provider.prompts == ["prompt"]


def test_disabled_provider_never_answers():
    provider = DisabledProvider()

    assert provider.suggest_matches(SAMPLE_PROFILE, [{"id": "1", "title": "X"}]) is None
    assert provider.name == "disabled"


def test_init_none_provider_is_disabled():
    assert isinstance(init_ai_provider("none"), DisabledProvider)


def test_missing_key_degrades_unless_required(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

    assert isinstance(init_ai_provider("gemini"), DisabledProvider)
    with pytest.raises(RuntimeError):
        init_ai_provider("gemini", require_key=True)


def test_unknown_provider_is_rejected():
    with pytest.raises(RuntimeError):
        init_ai_provider("llama")


def test_match_prompt_lists_every_scholarship():
    catalog = [
        {"id": "1", "title": "Robotics Award", "organization": "RoboOrg", "amount": "$1,000",
         "eligibleFields": ["Engineering"], "description": "For builders"},
        {"id": "2", "title": "Art Prize", "organization": "Museum", "amount": "$500"},
    ]

    prompt = build_match_prompt(SAMPLE_PROFILE, catalog)

    assert "Scholarship ID: 1" in prompt and "Scholarship ID: 2" in prompt
    assert "total 2" in prompt
    assert "Fields: Engineering" in prompt
    assert "Levels: Any" in prompt
    assert "ada@example.com" not in prompt


def test_guidance_prompt_names_the_three_sections():
    prompt = build_guidance_prompt(SAMPLE_PROFILE, {"id": "9", "title": "Art Prize"})

    for key in ("essayTips", "checklist", "improvementSuggestions"):
        assert key in prompt
    assert "Art Prize" in prompt


@pytest.fixture(autouse=True)
def _restore_provider():
    previous = ai_client._provider
    yield
    ai_client._provider = previous
