# backend/mflix/routers/auth.py
#
# Central authentication routes:
#   • POST /auth/register – JSON body → create user
#   • POST /auth/login    – JSON body {email, password} → JWT + user projection
#   • GET  /auth/me       – Bearer token → user projection
#
# The handlers stay thin; hashing, lookups and token signing live in
# backend/mflix/services/users.py.

from fastapi import APIRouter, Depends, status

from ..core.auth import get_current_user
from ..core.deps import get_user_service
from ..models.auth import LoginRequest, LoginResponse, Message
from ..models.user import UserCreate, UserOut
from ..services.users import UserService

router = APIRouter(prefix="/auth", tags=["auth"])


# ───────────────────────────── register ──────────────────────────────
@router.post(
    "/register",
    response_model=Message,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
)
async def register(payload: UserCreate, users: UserService = Depends(get_user_service)) -> Message:
    """
    Accepts the **JSON** body described by `UserCreate`.
    A duplicate e-mail comes back as `400 {"error": ...}`.
    """
    await users.register(payload)
    return Message(message="User created")


# ────────────────────────────── login ────────────────────────────────
@router.post(
    "/login",
    response_model=LoginResponse,
    summary="E-mail/password login",
)
async def login(payload: LoginRequest, users: UserService = Depends(get_user_service)) -> LoginResponse:
    """
    Returns a token valid for one day plus the public user projection.
    """
    return await users.login(payload.email, payload.password)


# ─────────────────────────────── me ──────────────────────────────────
@router.get("/me", response_model=UserOut, summary="Who does this token belong to")
async def me(user: UserOut = Depends(get_current_user)) -> UserOut:
    return user
