"""Authentication service for registration, login and JWT token handling."""
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from app.config import settings
from core.database.entities import User, UserRole
from core.models.user import RegisterRequest, UserIdentity, UserPublic
from core.services.auth.credential_store import CredentialStore
from core.services.errors.exceptions import InvalidCredentials, Unauthorized
from core.utils.logger import logger


class AuthService:
    """Issues and verifies stateless session tokens."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        access_token_expire_minutes: Optional[int] = None,
    ):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM
        self.access_token_expire_minutes = (
            access_token_expire_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES
        )

    def register(self, store: CredentialStore, payload: RegisterRequest) -> UserPublic:
        """Create a standard user from a registration payload."""
        user = store.create(
            name=payload.name,
            email=payload.email,
            password=payload.password,
            role=UserRole.STANDARD,
            location=payload.location,
            phone_number=payload.phone_number,
        )
        return self.get_public_user(user)

    def login(self, store: CredentialStore, email: str, password: str) -> str:
        """
        Check credentials and mint a session token.

        Raises:
            InvalidCredentials: for an unknown email and a wrong password alike
        """
        user = store.find_verified(email, password)
        if user is None:
            logger.warning("Login attempt failed")
            raise InvalidCredentials()

        logger.info(f"Login successful for user {user.id}")
        return self.create_access_token(data={"sub": str(user.id), "role": user.role})

    def authenticate(self, token: Optional[str]) -> UserIdentity:
        """
        Verify a token's signature and expiry and return who it was issued to.

        Raises:
            Unauthorized: missing, malformed, tampered or expired token
        """
        if not token:
            raise Unauthorized("missing token")

        payload = self.decode_token(token)
        if payload is None:
            raise Unauthorized("invalid or expired token")

        subject = payload.get("sub")
        role = payload.get("role")
        if not subject or not role:
            raise Unauthorized("missing claims")
        try:
            user_id = UUID(subject)
        except (TypeError, ValueError):
            raise Unauthorized("malformed subject")

        return UserIdentity(user_id=user_id, role=role)

    def create_access_token(self, data: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token."""
        to_encode = data.copy()
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.access_token_expire_minutes)
        to_encode.update({"exp": datetime.now(timezone.utc) + expires_delta})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> Optional[dict]:
        """Decode and verify a JWT token. Returns None if it does not verify."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug(f"Token rejected: {str(e)}")
            return None

    def get_public_user(self, user: User) -> UserPublic:
        """Get user fields without the password hash."""
        return UserPublic.model_validate(user)


# Global auth service instance
auth_service = AuthService()
