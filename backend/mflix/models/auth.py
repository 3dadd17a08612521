"""
Dedicated request/response models for authentication endpoints
(kept separate from the general User models).
"""
from pydantic import BaseModel, Field

from .user import UserOut


class LoginRequest(BaseModel):
    """
    Payload expected by POST /api/auth/login

    The e-mail is only looked up, so a malformed one is a 401, not a 400.
    """
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class LoginResponse(BaseModel):
    token: str
    user: UserOut


class Message(BaseModel):
    message: str
