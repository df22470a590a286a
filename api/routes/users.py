"""User management routes"""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_db
from api.responses import DeleteResponse
from domain.schemas.profile_schemas import UserProfileResponse, UserCreate
from services.profile_service import ProfileService
from domain.mappers import UserMapper

router = APIRouter(prefix="/users", tags=["Users"])
logger = logging.getLogger("repscale.api.users")


@router.post(
    "", response_model=UserProfileResponse, status_code=status.HTTP_201_CREATED
)
def create_user(user: UserCreate, db: Session = Depends(get_db)):
    """Create a new user with a default settings profile"""
    new_user = ProfileService.create_user(db, user)
    return UserMapper.to_response(new_user)


@router.get("", response_model=List[UserProfileResponse])
def get_all_users(
    skip: int = Query(default=0, ge=0, description="Users to skip"),
    limit: int = Query(default=100, ge=1, le=100, description="Maximum results"),
    db: Session = Depends(get_db),
):
    """List users a page at a time"""
    users = ProfileService.get_all_users(db, skip=skip, limit=limit)
    return [UserMapper.to_response(u) for u in users]


@router.get("/{user_id}", response_model=UserProfileResponse)
def get_user(user_id: UUID, db: Session = Depends(get_db)):
    """Get a user with their settings profile."""
    user = ProfileService.get_user(db, user_id)
    return UserMapper.to_response(user)


@router.delete("/{user_id}", response_model=DeleteResponse)
def delete_user(user_id: UUID, db: Session = Depends(get_db)):
    """Delete a user and all their related data."""
    ProfileService.delete_user(db, user_id)
    return DeleteResponse(deleted=str(user_id))
