"""
사용자 프로필 조회/수정 비즈니스 로직.
"""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, StorageError, ValidationError
from app.repositories import user_repository
from app.repositories.user_repository import PROFILE_COLUMNS

logger = logging.getLogger(__name__)


def get_profile(db: Session, user_id: int) -> dict:
    """
    프로필 속성 6개를 조회합니다. 이름/이메일/비밀번호 해시는 반환하지 않습니다.

    Raises
    ------
    NotFoundError:
        사용자가 존재하지 않는 경우
    StorageError:
        DB 오류
    """
    try:
        profile = user_repository.find_profile(db, user_id)
    except SQLAlchemyError as e:
        logger.error(f"Profile lookup failed for user {user_id}: {e}")
        raise StorageError() from e

    if profile is None:
        raise NotFoundError()
    return profile


def update_profile(db: Session, user_id: int, attributes: dict) -> None:
    """
    프로필 속성 6개를 한 번에 덮어씁니다.

    0은 유효한 값이므로 None 여부로만 누락을 판단합니다.
    사용자 존재 여부는 별도 조회 없이 UPDATE의 영향받은 행 수로 판단합니다.
    """
    missing = [key for key in PROFILE_COLUMNS if attributes.get(key) is None]
    if missing:
        raise ValidationError("All profile fields are required")

    values = {key: attributes[key] for key in PROFILE_COLUMNS}

    try:
        affected = user_repository.update_profile(db, user_id, values)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Profile update failed for user {user_id}: {e}")
        raise StorageError("Failed to update profile") from e

    if affected == 0:
        raise NotFoundError()

    logger.info(f"Profile updated: user_id={user_id}")
