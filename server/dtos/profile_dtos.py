from pydantic import BaseModel, Field, field_validator
from typing import Optional, Literal
from datetime import datetime

FinancialNeed = Literal["low", "moderate", "high", "critical"]
LocationPreference = Literal["local", "national", "international", "no-preference"]


class ProfileFields(BaseModel):
    name: str = Field(..., min_length=1, description="Student full name")
    email: str = Field(..., min_length=3, description="Contact email")
    educationLevel: str = Field(..., description="e.g. undergraduate-senior, graduate-student")
    fieldOfStudy: str = Field(..., description="Major or intended field")
    gpa: Optional[str] = Field(None, description="GPA as entered, free text")
    graduationYear: str = Field(..., description="Expected graduation year")
    skills: Optional[str] = None
    activities: Optional[str] = None
    financialNeed: FinancialNeed
    location: LocationPreference


class ProfileCreateRequest(BaseModel):
    # Checked by the route so a missing userId maps to 400, not a schema error
    userId: Optional[str] = None
    profile: ProfileFields


class ProfileUpdateRequest(BaseModel):
    """Partial update; only fields present in the body are written."""
    name: Optional[str] = None
    email: Optional[str] = None
    educationLevel: Optional[str] = None
    fieldOfStudy: Optional[str] = None
    gpa: Optional[str] = None
    graduationYear: Optional[str] = None
    skills: Optional[str] = None
    activities: Optional[str] = None
    financialNeed: Optional[FinancialNeed] = None
    location: Optional[LocationPreference] = None

    @field_validator("name", "email", "educationLevel", "fieldOfStudy", "graduationYear", "financialNeed", "location")
    @classmethod
    def required_fields_not_null(cls, value):
        # Omit a field to leave it unchanged; only gpa, skills and activities can be cleared
        if value is None:
            raise ValueError("may not be null")
        return value


class ProfileResponse(ProfileFields):
    id: str
    userId: str
    createdAt: datetime
    updatedAt: datetime
