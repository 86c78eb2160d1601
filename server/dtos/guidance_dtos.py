from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class GuidanceRequest(BaseModel):
    profileId: str = Field(..., min_length=1)
    scholarshipId: str = Field(..., min_length=1)


class GuidancePayload(BaseModel):
    essayTips: List[str] = Field(..., min_length=1)
    checklist: List[str] = Field(..., min_length=1)
    improvementSuggestions: List[str] = Field(..., min_length=1)


class GuidanceResponse(GuidancePayload):
    id: Optional[str] = None
    profileId: str
    scholarshipId: str
    createdAt: Optional[datetime] = None
