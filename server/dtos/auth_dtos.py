from pydantic import BaseModel, Field
from typing import Optional


class RegisterRequest(BaseModel):
    username: str = Field(..., min_length=3, max_length=64)
    password: str = Field(..., min_length=6)
    id: Optional[str] = Field(None, description="Optional client-chosen user id")


class LoginRequest(BaseModel):
    username: str
    password: str


class UserResponse(BaseModel):
    id: str
    username: str


class LoginResponse(BaseModel):
    user: UserResponse
    token: str
    expiresAt: str
