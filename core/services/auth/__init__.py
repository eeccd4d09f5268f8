"""Authentication services."""
from core.services.auth.credential_store import CredentialStore
from core.services.auth.auth_service import AuthService, auth_service

__all__ = ["CredentialStore", "AuthService", "auth_service"]
