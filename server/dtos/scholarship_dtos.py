from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime


class ScholarshipResponse(BaseModel):
    id: str
    title: str
    organization: str
    amount: str = Field(..., description="Display string, e.g. '$10,000'")
    deadline: str = Field(..., description="Display string, usually YYYY-MM-DD")
    description: str
    requirements: str = ""
    tags: List[str] = []
    type: str = Field(..., description="merit-based, need-based, internship, ...")
    eligibilityGpa: Optional[str] = None
    eligibleFields: Optional[List[str]] = None
    eligibleLevels: Optional[List[str]] = None
    isActive: bool = True
    createdAt: Optional[datetime] = None


class ScholarshipSearchParams(BaseModel):
    type: Optional[str] = None
    minAmount: Optional[int] = Field(None, ge=0)
    tags: Optional[List[str]] = None
    fieldOfStudy: Optional[str] = None
    educationLevel: Optional[str] = None
