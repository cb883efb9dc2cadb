"""
프로필 관련 API 라우터.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.schemas.common import ErrorResponse, MessageResponse
from app.schemas.profile import ProfilePayload
from app.services.profile_service import get_profile, update_profile

# 프로필 관련 라우터(접두사: /profile)
router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=ProfilePayload,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def read_profile(user_id: int, db: Session = Depends(get_db)) -> ProfilePayload:
    """사용자 프로필(6개 속성)을 조회한다. 저장 전 속성은 null."""
    profile = get_profile(db, user_id)
    return ProfilePayload(**profile)


@router.put(
    "/{user_id}",
    status_code=status.HTTP_200_OK,
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def save_profile(
    user_id: int,
    payload: ProfilePayload,
    db: Session = Depends(get_db),
) -> MessageResponse:
    """사용자 프로필 6개 속성을 모두 덮어쓴다."""
    update_profile(db, user_id, payload.to_attributes())
    return MessageResponse(message="Profile updated successfully")
