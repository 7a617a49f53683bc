"""User schemas."""
from pydantic import BaseModel, EmailStr


class UserResponse(BaseModel):
    user_id: int
    email: EmailStr
    full_name: str

    class Config:
        from_attributes = True


class Token(BaseModel):
    access_token: str
    token_type: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
