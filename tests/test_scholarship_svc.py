from dtos.scholarship_dtos import ScholarshipSearchParams
from services.scholarship_svc import ensure_catalog, parse_amount, search_scholarships
from services.seed_data import SAMPLE_SCHOLARSHIPS


def test_parse_amount():
    assert parse_amount("$10,000") == 10000
    assert parse_amount("₹16,50,000") == 1650000
    assert parse_amount("$5,000/month") == 5000
    assert parse_amount("") == 0
    assert parse_amount(None) == 0


def test_catalog_is_seeded_once(storage):
    first = ensure_catalog(storage)
    second = ensure_catalog(storage)

    assert len(first) == len(SAMPLE_SCHOLARSHIPS)
    assert {s["id"] for s in first} == {s["id"] for s in second}
    assert all(s["isActive"] for s in first)


def test_existing_catalog_is_not_reseeded(storage):
    storage.save_scholarships([{"id": "only", "title": "Only One", "isActive": True}])

    assert [s["id"] for s in ensure_catalog(storage)] == ["only"]


def test_inactive_scholarships_are_hidden(storage):
    storage.save_scholarships([
        {"id": "a", "title": "Open", "isActive": True},
        {"id": "b", "title": "Closed", "isActive": False},
    ])

    assert [s["id"] for s in storage.list_scholarships()] == ["a"]
    assert len(storage.list_scholarships(active_only=False)) == 2


def test_search_filters_combine(storage):
    storage.save_scholarships([
        {"id": "a", "title": "Big Tech", "amount": "$25,000", "type": "merit-based", "tags": ["Technology"],
         "eligibleFields": ["Computer Science"], "isActive": True},
        {"id": "b", "title": "Small Tech", "amount": "$1,000", "type": "merit-based", "tags": ["technology"],
         "isActive": True},
        {"id": "c", "title": "Nursing", "amount": "$30,000", "type": "need-based", "tags": ["healthcare"],
         "eligibleFields": ["Nursing"], "isActive": True},
    ])

    by_amount = search_scholarships(storage, ScholarshipSearchParams(minAmount=5000))
    by_tag = search_scholarships(storage, ScholarshipSearchParams(tags=["TECHNOLOGY"]))
    by_field = search_scholarships(storage, ScholarshipSearchParams(fieldOfStudy="computer science"))
    combined = search_scholarships(
        storage, ScholarshipSearchParams(type="merit-based", minAmount=5000, tags=["technology"])
    )

    assert {s["id"] for s in by_amount} == {"a", "c"}
    assert {s["id"] for s in by_tag} == {"a", "b"}
    # "b" lists no eligible fields, so it is open to every field
    assert {s["id"] for s in by_field} == {"a", "b"}
    assert [s["id"] for s in combined] == ["a"]
