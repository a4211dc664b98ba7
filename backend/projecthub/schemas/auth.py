from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Optional

class SignupRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    name: Optional[str] = None

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class Token(BaseModel):
    access_token: str
    token_type: str

class UserResponse(BaseModel):
    id: int
    email: str
    name: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}

class SignupResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str

class LoginResponse(BaseModel):
    user: UserResponse
    access_token: str
    token_type: str
