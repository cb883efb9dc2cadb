"""
users 테이블 접근 계층.

계정 생성 결과를 예외 대신 합 타입(`Account | DuplicateEmail`)으로 반환하여
비즈니스 로직이 특정 DB 엔진의 오류 코드에 의존하지 않도록 한다.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.user import User


@dataclass(frozen=True)
class Account:
    user_id: int
    name: str
    email: str


@dataclass(frozen=True)
class DuplicateEmail:
    email: str


CreateAccountResult = Union[Account, DuplicateEmail]


# 프로필 속성 이름 -> users 컬럼 이름
PROFILE_COLUMNS = {
    "gender": "gender",
    "age_group": "age_group",
    "shopping_level": "shopping_lvl",
    "is_student": "is_student",
    "preferred_hour": "pref_shop_hour",
    "preferred_day": "pref_shop_day",
}


def create_account(db: Session, name: str, email: str, password_hash: str) -> CreateAccountResult:
    """
    계정을 삽입한다.

    이메일 중복은 사전 조회가 아닌 유니크 제약 위반으로 감지한다.
    그 외 DB 오류(SQLAlchemyError)는 그대로 전파된다.
    """
    user = User(name=name, email=email, password_hash=password_hash)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        return DuplicateEmail(email=email)
    db.refresh(user)
    return Account(user_id=user.user_id, name=user.name, email=user.email)


def find_by_email(db: Session, email: str) -> Optional[User]:
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()


def find_profile(db: Session, user_id: int) -> Optional[dict]:
    """프로필 속성 6개만 조회한다. 사용자가 없으면 None."""
    row = db.execute(
        select(
            User.gender,
            User.age_group,
            User.shopping_lvl,
            User.is_student,
            User.pref_shop_hour,
            User.pref_shop_day,
        ).where(User.user_id == user_id)
    ).first()
    if row is None:
        return None
    return dict(zip(PROFILE_COLUMNS.keys(), row))


def update_profile(db: Session, user_id: int, attributes: dict) -> int:
    """프로필 속성 6개를 단일 UPDATE로 덮어쓰고 영향받은 행 수를 반환한다."""
    values = {PROFILE_COLUMNS[key]: value for key, value in attributes.items()}
    result = db.execute(
        update(User).where(User.user_id == user_id).values(**values)
    )
    db.commit()
    return result.rowcount
