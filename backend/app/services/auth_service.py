"""
회원가입/로그인 비즈니스 로직.
"""

from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    DuplicateEmailError,
    InvalidCredentialsError,
    StorageError,
    ValidationError,
)
from app.core.security import hash_password, verify_password
from app.repositories import user_repository
from app.repositories.user_repository import Account, DuplicateEmail

logger = logging.getLogger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or value.strip() == ""


def register_user(db: Session, name: Optional[str], email: Optional[str], password: Optional[str]) -> Account:
    """
    신규 계정을 등록합니다.

    Parameters
    ----------
    db:
        데이터베이스 세션
    name, email, password:
        가입 정보 (형식 검증은 클라이언트 책임, 여기서는 빈 값만 확인)

    Returns
    -------
    Account:
        생성된 계정

    Raises
    ------
    ValidationError:
        빈 필드가 있는 경우
    DuplicateEmailError:
        이미 가입된 이메일인 경우
    StorageError:
        그 외 DB 오류
    """
    if _is_blank(name) or _is_blank(email) or not password:
        raise ValidationError("Name, email and password are required")

    password_hash = hash_password(password)

    try:
        result = user_repository.create_account(db, name, email, password_hash)
    except SQLAlchemyError as e:
        logger.error(f"Signup failed: {e}")
        raise StorageError() from e

    if isinstance(result, DuplicateEmail):
        raise DuplicateEmailError()

    logger.info(f"User created: user_id={result.user_id}")
    return result


def authenticate_user(db: Session, email: Optional[str], password: Optional[str]) -> Account:
    """
    이메일/비밀번호로 사용자를 인증합니다.

    존재하지 않는 이메일과 틀린 비밀번호는 동일하게 InvalidCredentialsError로 처리합니다.
    """
    if _is_blank(email) or not password:
        raise InvalidCredentialsError()

    try:
        user = user_repository.find_by_email(db, email)
    except SQLAlchemyError as e:
        logger.error(f"Login lookup failed: {e}")
        raise StorageError() from e

    if user is None or not verify_password(password, user.password_hash):
        raise InvalidCredentialsError()

    return Account(user_id=user.user_id, name=user.name, email=user.email)
