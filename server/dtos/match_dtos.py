from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from datetime import datetime
from dtos.scholarship_dtos import ScholarshipResponse


class MatchSuggestion(BaseModel):
    """One normalized AI (or fallback) score for a single scholarship."""
    scholarshipId: str
    matchScore: int = Field(..., ge=0, le=100)
    aiReasoning: str


class GenerateMatchesRequest(BaseModel):
    profileId: str = Field(..., min_length=1, description="Profile id or owning user id")


class MatchStatusUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    status: str = Field(..., min_length=1, description="new, favorited, passed, applied, rejected, ...")


class MatchResponse(BaseModel):
    id: str
    profileId: str
    scholarshipId: str
    matchScore: int = Field(..., ge=0, le=100)
    aiReasoning: Optional[str] = None
    status: str = "new"
    batchId: Optional[str] = None
    createdAt: Optional[datetime] = None


class MatchWithScholarship(MatchResponse):
    scholarship: Optional[ScholarshipResponse] = None


class GenerateMatchesResponse(BaseModel):
    matches: List[MatchResponse]
