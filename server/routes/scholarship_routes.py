from fastapi import APIRouter, HTTPException, Depends, Query
from typing import List, Optional
from dtos.scholarship_dtos import ScholarshipResponse, ScholarshipSearchParams
from services.storage_svc import Storage, get_storage
from services import scholarship_svc

router = APIRouter()


@router.get("", response_model=List[ScholarshipResponse])
def list_scholarships(storage: Storage = Depends(get_storage)):
    """All active scholarships; the demo catalog is loaded on first use."""
    return scholarship_svc.ensure_catalog(storage)


@router.get("/search", response_model=List[ScholarshipResponse])
def search_scholarships(
    type: Optional[str] = Query(None, description="merit-based, need-based, internship, ..."),
    minAmount: Optional[int] = Query(None, ge=0),
    tags: Optional[str] = Query(None, description="Comma separated, matches on any overlap"),
    fieldOfStudy: Optional[str] = None,
    educationLevel: Optional[str] = None,
    storage: Storage = Depends(get_storage),
):
    filters = ScholarshipSearchParams(
        type=type,
        minAmount=minAmount,
        tags=[t.strip() for t in tags.split(",") if t.strip()] if tags else None,
        fieldOfStudy=fieldOfStudy,
        educationLevel=educationLevel,
    )
    return scholarship_svc.search_scholarships(storage, filters)


@router.get("/{scholarship_id}", response_model=ScholarshipResponse)
def get_scholarship(scholarship_id: str, storage: Storage = Depends(get_storage)):
    scholarship_svc.ensure_catalog(storage)
    scholarship = storage.get_scholarship(scholarship_id)
    if not scholarship:
        raise HTTPException(status_code=404, detail="Scholarship not found")
    return scholarship
