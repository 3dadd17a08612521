"""
User-centric helpers:
• register        – create a new user (bcrypt-hashed password)
• login           – validate credentials, issue a 1-day JWT
• current_user    – resolve a bearer token back to its user projection
"""

import logging

from jose import JWTError
from pymongo.errors import DuplicateKeyError

from ..core.config import Settings
from ..core.errors import Conflict, Unauthorized
from ..core.security import create_token, decode_token, password_context
from ..models.auth import LoginResponse
from ..models.user import UserCreate, UserOut

log = logging.getLogger(__name__)


def _public(doc: dict) -> UserOut:
    return UserOut(id=str(doc["_id"]), name=doc["name"], email=doc["email"])


class UserService:
    def __init__(self, users, settings: Settings):
        self.users = users
        self.settings = settings
        self.pwd_ctx = password_context(settings.bcrypt_rounds)

    # ────────────────────────── password hashing ───────────────────────
    def _hash(self, pw: str) -> str:
        return self.pwd_ctx.hash(pw)

    def _verify(self, pw: str, hashed: str) -> bool:
        try:
            return self.pwd_ctx.verify(pw, hashed)
        except ValueError:  # stored value is not a recognised hash
            return False

    # ────────────────────────── CRUD helpers ───────────────────────────
    async def _find_by_email(self, email: str):
        return await self.users.find_one({"email": email})

    async def register(self, payload: UserCreate) -> UserOut:
        """
        Inserts a new user document (raises Conflict if the e-mail exists).
        """
        if await self._find_by_email(payload.email):
            raise Conflict("Email already in use")

        doc = {
            "name": payload.name,
            "email": payload.email,
            "password": self._hash(payload.password),
        }
        try:
            res = await self.users.insert_one(doc)
        except DuplicateKeyError as exc:
            # lost the race against a concurrent registration
            raise Conflict("Email already in use") from exc
        log.info("registered user %s", res.inserted_id)
        return UserOut(id=str(res.inserted_id), name=doc["name"], email=doc["email"])

    async def login(self, email: str, password: str) -> LoginResponse:
        """
        Returns a signed token plus the public projection, or raises Unauthorized.
        """
        doc = await self._find_by_email(email)
        if not doc or not doc.get("password") or not self._verify(password, doc["password"]):
            log.info("failed login attempt")
            raise Unauthorized("Invalid credentials")

        user = _public(doc)
        token = create_token(
            {"userId": user.id, "name": user.name, "email": user.email},
            self.settings.jwt_secret,
            self.settings.jwt_expires,
        )
        return LoginResponse(token=token, user=user)

    def current_user(self, token: str) -> UserOut:
        """Stateless: the token's own claims are the session."""
        try:
            claims = decode_token(token, self.settings.jwt_secret)
        except JWTError as exc:
            raise Unauthorized("Could not validate credentials") from exc
        if not all(claims.get(k) for k in ("userId", "name", "email")):
            raise Unauthorized("Could not validate credentials")
        return UserOut(id=claims["userId"], name=claims["name"], email=claims["email"])
