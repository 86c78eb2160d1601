from fastapi import APIRouter, HTTPException, Depends, status
from dtos.profile_dtos import ProfileCreateRequest, ProfileUpdateRequest, ProfileResponse
from services.storage_svc import Storage, get_storage
from services import profile_svc

router = APIRouter()


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
def create_profile(req: ProfileCreateRequest, storage: Storage = Depends(get_storage)):
    if not req.userId or not req.userId.strip():
        raise HTTPException(status_code=400, detail="User ID required")
    return profile_svc.create_profile(storage, req.userId.strip(), req.profile.model_dump())


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(user_id: str, storage: Storage = Depends(get_storage)):
    """Look up by owning user id first, then by profile id."""
    profile = storage.get_profile_by_user(user_id) or storage.get_profile(user_id)
    if not profile:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.put("/{profile_id}", response_model=ProfileResponse)
def update_profile(profile_id: str, req: ProfileUpdateRequest, storage: Storage = Depends(get_storage)):
    fields = req.model_dump(exclude_unset=True)
    updated = profile_svc.update_profile(storage, profile_id, fields)
    if not updated:
        raise HTTPException(status_code=404, detail="Profile not found")
    return updated
