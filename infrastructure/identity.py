"""In-Memory Identity Provider"""
import logging
from typing import Dict, Optional
from uuid import uuid4

from domain.auth import AuthResult, ExternalProfile, User, UserInDB
from domain.gateways import IdentityProvider
from infrastructure.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def _public(user: UserInDB) -> User:
    return User(**user.model_dump(exclude={"hashed_password", "provider"}))


class InMemoryIdentityProvider(IdentityProvider):
    """Identity provider keeping accounts and sessions in memory"""

    def __init__(self):
        self._users: Dict[str, UserInDB] = {}
        self._uid_by_email: Dict[str, str] = {}
        self._uid_by_external: Dict[str, str] = {}
        self._sessions: Dict[str, str] = {}

    def _start_session(self, user: UserInDB) -> AuthResult:
        session_id = uuid4().hex
        self._sessions[session_id] = user.uid
        return AuthResult.ok(user=_public(user), session_id=session_id)

    async def register(self, email: str, password: str, display_name: str) -> AuthResult:
        email = (email or "").strip().lower()
        if "@" not in email:
            return AuthResult.failed("Invalid email address")
        if len(password or "") < MIN_PASSWORD_LENGTH:
            return AuthResult.failed(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if email in self._uid_by_email:
            return AuthResult.failed("Email already registered")

        user = UserInDB(
            email=email,
            display_name=display_name,
            hashed_password=get_password_hash(password),
        )
        self._users[user.uid] = user
        self._uid_by_email[email] = user.uid
        logger.info("Registered user %s", user.uid)
        return self._start_session(user)

    async def login(self, email: str, password: str) -> AuthResult:
        uid = self._uid_by_email.get((email or "").strip().lower())
        user = self._users.get(uid) if uid else None
        if not user or not user.hashed_password or not verify_password(password, user.hashed_password):
            return AuthResult.failed("Incorrect email or password")
        return self._start_session(user)

    async def login_with_external_provider(self, profile: ExternalProfile) -> AuthResult:
        key = f"{profile.provider}:{profile.subject}"
        uid = self._uid_by_external.get(key)
        if uid is None:
            email = profile.email.strip().lower()
            if email in self._uid_by_email:
                return AuthResult.failed("An account already exists with a different sign-in method")
            user = UserInDB(
                email=email,
                display_name=profile.display_name,
                provider=profile.provider,
            )
            self._users[user.uid] = user
            self._uid_by_email[email] = user.uid
            self._uid_by_external[key] = user.uid
            logger.info("Registered user %s via %s", user.uid, profile.provider)
        else:
            user = self._users[uid]

        return self._start_session(user)

    async def logout(self, session_id: str) -> AuthResult:
        if self._sessions.pop(session_id, None) is None:
            return AuthResult.failed("No active session")
        return AuthResult.ok()

    async def get_user(self, uid: str) -> Optional[User]:
        user = self._users.get(uid)
        return _public(user) if user else None

    async def is_session_active(self, session_id: str) -> bool:
        return session_id in self._sessions

    async def update_display_name(self, uid: str, display_name: str) -> AuthResult:
        user = self._users.get(uid)
        if not user:
            return AuthResult.failed("User not found")
        updated = user.model_copy(update={"display_name": display_name})
        self._users[uid] = updated
        return AuthResult.ok(user=_public(updated))
