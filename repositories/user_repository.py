"""
User Repository - Data access layer for user-related operations
"""

from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.models import AppUser, UserProfile
from app.exceptions import ConflictError


class UserRepository(BaseRepository[AppUser]):
    """Repository for user data access"""

    def __init__(self, db: Session):
        super().__init__(db, AppUser)

    def get_by_email(self, email: str) -> Optional[AppUser]:
        """Get user by email (case-insensitive)"""
        return (
            self.db.query(AppUser)
            .filter(AppUser.email == email.strip().lower())
            .first()
        )

    def create_user(self, email: str, full_name: str = None) -> AppUser:
        """Create a new user together with a default profile"""
        user = AppUser(email=email.strip().lower(), full_name=full_name)
        user.profile = UserProfile()
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(f"User with email {email} already exists")

    def delete_user(self, user_id: UUID) -> bool:
        """Delete user and all related data (cascade)"""
        return self.delete(user_id)


class UserProfileRepository(BaseRepository[UserProfile]):
    """Repository for the per-user settings row"""

    def __init__(self, db: Session):
        super().__init__(db, UserProfile)

    def get_or_create(self, user_id: UUID) -> UserProfile:
        """Return the profile, creating one with defaults if missing"""
        profile = self.get_by_id(user_id)
        if profile is None:
            profile = UserProfile(user_id=user_id)
            self.db.add(profile)
            self.db.flush()
        return profile
