"""Authentication endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from core.database.db import get_db
from core.database.entities import User
from core.models.user import LoginRequest, RegisterRequest, TokenResponse, UserPublic
from core.services.auth.auth_service import auth_service
from core.services.auth.credential_store import CredentialStore
from core.services.errors.error_handler import ErrorHandler
from core.services.errors.exceptions import (
    DuplicateEmail,
    InvalidCredentials,
    Unauthorized,
    ValidationError,
)
from core.utils.logger import logger

router = APIRouter()
security = HTTPBearer(auto_error=False)


def get_credential_store(db: Session = Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def _unauthorized(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    store: CredentialStore = Depends(get_credential_store),
) -> User:
    """Get current authenticated user from the bearer token."""
    token = credentials.credentials if credentials else None
    try:
        identity = auth_service.authenticate(token)
    except Unauthorized as e:
        logger.warning(f"Rejected token: {e.reason}")
        raise _unauthorized()

    user = store.get_by_id(identity.user_id)
    if user is None:
        raise _unauthorized("User not found")
    return user


@router.post("/register", response_model=UserPublic, status_code=status.HTTP_201_CREATED)
async def register(request: RegisterRequest, store: CredentialStore = Depends(get_credential_store)):
    """
    Register a new standard user.

    Args:
        request: Name, email, password and optional location / phone number

    Returns:
        The created user's public fields
    """
    try:
        return auth_service.register(store, request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.to_detail())
    except DuplicateEmail:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ErrorHandler.handle_unexpected(e, "registration"),
        )


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest, store: CredentialStore = Depends(get_credential_store)):
    """
    Login endpoint to authenticate user and get JWT token.

    Args:
        request: Login credentials (email and password)

    Returns:
        The signed session token
    """
    try:
        token = auth_service.login(store, request.email, request.password)
        return TokenResponse(token=token)
    except InvalidCredentials:
        raise _unauthorized("Invalid credentials")
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=ErrorHandler.handle_unexpected(e, "login"),
        )


@router.get("/health")
async def auth_health():
    """Health check for auth service."""
    return {"status": "healthy", "service": "auth"}
