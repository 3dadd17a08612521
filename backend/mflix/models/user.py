from pydantic import BaseModel, EmailStr, Field

class UserBase(BaseModel):
    email: EmailStr
    name: str = Field(..., min_length=1, max_length=80)

class UserCreate(UserBase):
    # presence check only, no strength policy
    password: str = Field(..., min_length=1)

class UserOut(BaseModel):
    """
    Public-safe projection – never carries the password hash.

    Plain strings: pre-existing users predate the registration rules.
    """
    id: str
    name: str
    email: str
