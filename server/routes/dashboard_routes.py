from datetime import datetime, timezone
from fastapi import APIRouter, HTTPException, Depends
from dtos.dashboard_dtos import DashboardResponse
from services.storage_svc import Storage, get_storage
from services.profile_svc import find_profile
from services import deadline_svc

router = APIRouter()


@router.get("/{profile_id}", response_model=DashboardResponse)
def get_dashboard(profile_id: str, storage: Storage = Depends(get_storage)):
    """Match statistics and the deadline tracker for one profile."""
    profile = find_profile(storage, profile_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    matches = storage.list_matches(profile["id"])
    scholarships = {}
    for sid in {m["scholarshipId"] for m in matches}:
        scholarship = storage.get_scholarship(sid)
        if scholarship:
            scholarships[sid] = scholarship

    today = datetime.now(timezone.utc).date()
    return deadline_svc.build_dashboard(profile["id"], matches, scholarships, today)
