from fastapi import APIRouter, HTTPException, Depends
from dtos.guidance_dtos import GuidanceRequest, GuidanceResponse
from services.storage_svc import Storage, get_storage
from services.ai_client import AIProvider, get_ai_provider
from services.profile_svc import find_profile
from services import guidance_svc, scholarship_svc

router = APIRouter()


@router.post("", response_model=GuidanceResponse)
def create_guidance(
    req: GuidanceRequest,
    storage: Storage = Depends(get_storage),
    provider: AIProvider = Depends(get_ai_provider),
):
    profile = find_profile(storage, req.profileId)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")

    scholarship_svc.ensure_catalog(storage)
    scholarship = storage.get_scholarship(req.scholarshipId)
    if not scholarship:
        raise HTTPException(status_code=404, detail="Scholarship not found")

    return guidance_svc.generate_and_store_guidance(storage, provider, profile, scholarship)


@router.get("/{profile_id}/{scholarship_id}", response_model=GuidanceResponse)
def get_guidance(profile_id: str, scholarship_id: str, storage: Storage = Depends(get_storage)):
    """Most recently generated guidance for the pair."""
    profile = find_profile(storage, profile_id)
    guidance = storage.get_latest_guidance(profile["id"] if profile else profile_id, scholarship_id)
    if not guidance:
        raise HTTPException(status_code=404, detail="Guidance not found")
    return guidance
