from fastapi import APIRouter, HTTPException, Depends
from typing import List
from dtos.match_dtos import (
    GenerateMatchesRequest,
    GenerateMatchesResponse,
    MatchStatusUpdate,
    MatchResponse,
    MatchWithScholarship,
)
from services.storage_svc import Storage, get_storage
from services.ai_client import AIProvider, get_ai_provider
from services.profile_svc import find_profile
from services import match_svc, scholarship_svc

router = APIRouter()


@router.post("/generate", response_model=GenerateMatchesResponse)
def generate_matches(
    req: GenerateMatchesRequest,
    storage: Storage = Depends(get_storage),
    provider: AIProvider = Depends(get_ai_provider),
):
    """
    Score every active scholarship for the profile and store the results
    as a new batch. AI failures degrade to fallback scores, never to an error.
    """
    profile = find_profile(storage, req.profileId)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    scholarships = scholarship_svc.ensure_catalog(storage)
    matches = match_svc.generate_and_store_matches(storage, provider, profile, scholarships)
    return {"matches": matches}


@router.get("/{profile_id}", response_model=List[MatchWithScholarship])
def list_matches(profile_id: str, latest: bool = False, storage: Storage = Depends(get_storage)):
    return match_svc.list_matches_with_scholarships(storage, profile_id, latest_only=latest)


@router.put("/{match_id}/status", response_model=MatchResponse)
def update_match_status(match_id: str, req: MatchStatusUpdate, storage: Storage = Depends(get_storage)):
    updated = match_svc.update_match_status(storage, match_id, req.status)
    if not updated:
        raise HTTPException(status_code=404, detail="Match not found")
    return updated
