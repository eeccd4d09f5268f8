"""User records and password verification."""
from typing import Any, Dict, Optional, Union
from uuid import UUID

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as SchemaValidationError
from sqlalchemy import inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from core.database.entities import User, UserRole
from core.services.errors.exceptions import DuplicateEmail, ValidationError
from core.utils.logger import logger
from core.utils.passwords import dummy_verify, verify_password

PASSWORD_MIN_LENGTH = 6
LOCATION_MIN_LENGTH = 3
PHONE_MIN_LENGTH = 6

# Columns checked on every write, in the order errors are reported
VALIDATED_FIELDS = ("name", "email", "password", "location", "phone_number", "role")

_email_address = TypeAdapter(EmailStr)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def validate_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check and normalise user fields.

    Only the keys present in ``fields`` are checked, so the same rules apply
    to a full registration and to a partial update.

    Returns:
        The cleaned values, keyed like ``fields``

    Raises:
        ValidationError: naming the first offending field
    """
    cleaned = dict(fields)

    if "name" in fields:
        name = (fields["name"] or "").strip()
        if not name:
            raise ValidationError("name", "Name is required")
        cleaned["name"] = name

    if "email" in fields:
        email = normalize_email(fields["email"] or "")
        if not email:
            raise ValidationError("email", "Email is required")
        try:
            cleaned["email"] = normalize_email(_email_address.validate_python(email))
        except SchemaValidationError:
            raise ValidationError("email", "Email is not a valid address")

    if "password" in fields:
        password = fields["password"]
        if not password:
            raise ValidationError("password", "Password is required")
        if len(password) < PASSWORD_MIN_LENGTH:
            raise ValidationError(
                "password", f"Password must be at least {PASSWORD_MIN_LENGTH} characters"
            )

    if "location" in fields:
        location = fields["location"].strip() if fields["location"] else None
        if location is not None and len(location) < LOCATION_MIN_LENGTH:
            raise ValidationError(
                "location", f"Location must be at least {LOCATION_MIN_LENGTH} characters"
            )
        cleaned["location"] = location

    if "phone_number" in fields:
        phone_number = fields["phone_number"].strip() if fields["phone_number"] else None
        if phone_number is not None and len(phone_number) < PHONE_MIN_LENGTH:
            raise ValidationError(
                "phone_number", f"Phone number must be at least {PHONE_MIN_LENGTH} characters"
            )
        cleaned["phone_number"] = phone_number

    if "role" in fields:
        try:
            cleaned["role"] = UserRole(fields["role"]).value
        except ValueError:
            raise ValidationError("role", f"Unknown role: {fields['role']}")

    return cleaned


class CredentialStore:
    """Creates users and checks their passwords against a database session."""

    def __init__(self, db: Session):
        self.db = db

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email, case-insensitively."""
        return self.db.scalar(select(User).where(User.email == normalize_email(email)))

    def get_by_id(self, user_id: Union[UUID, str]) -> Optional[User]:
        """Get user by ID."""
        if isinstance(user_id, str):
            try:
                user_id = UUID(user_id)
            except ValueError:
                return None
        return self.db.get(User, user_id)

    def create(
        self,
        name: Optional[str],
        email: Optional[str],
        password: Optional[str],
        role: Union[UserRole, str] = UserRole.STANDARD,
        location: Optional[str] = None,
        phone_number: Optional[str] = None,
    ) -> User:
        """
        Validate and persist a new user.

        Args:
            name: Display name, required
            email: Unique email, stored lowercase
            password: Plaintext, at least 6 characters; only its hash is stored
            role: "user" or "admin"
            location: Optional, at least 3 characters when given
            phone_number: Optional, at least 6 characters when given

        Returns:
            The stored user

        Raises:
            ValidationError: a field is missing or malformed
            DuplicateEmail: the email is already registered
        """
        cleaned = validate_fields({
            "name": name,
            "email": email,
            "password": password,
            "location": location,
            "phone_number": phone_number,
            "role": role,
        })
        email = cleaned["email"]

        if self.get_by_email(email) is not None:
            raise DuplicateEmail(email)

        user = User(**cleaned)  # password hashed by the before_insert hook
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration
            self.db.rollback()
            raise DuplicateEmail(email)
        self.db.refresh(user)
        logger.info(f"Created user {user.id} ({user.role})")
        return user

    def save(self, user: User) -> User:
        """
        Persist changes to an existing user.

        Modified fields go through the same checks as ``create``; a rejected
        update is rolled back. The hash is only redone if the password was
        reassigned.

        Raises:
            ValidationError: a modified field is missing or malformed
            DuplicateEmail: the new email belongs to another user
        """
        state = inspect(user)
        changed = {
            key: getattr(user, key)
            for key in VALIDATED_FIELDS
            if state.attrs[key].history.has_changes()
        }
        try:
            cleaned = validate_fields(changed)
        except ValidationError:
            self.db.rollback()
            raise
        for key, value in cleaned.items():
            setattr(user, key, value)

        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateEmail(cleaned.get("email", user.email))
        self.db.refresh(user)
        return user

    def find_verified(self, email: str, password: str) -> Optional[User]:
        """Return the user if the password matches, else None."""
        user = self.get_by_email(email or "")
        if user is None:
            dummy_verify()
            return None
        if not verify_password(password or "", user.password):
            return None
        return user

    def verify(self, email: str, candidate_password: str) -> bool:
        """Check credentials. Unknown emails fail closed."""
        return self.find_verified(email, candidate_password) is not None
