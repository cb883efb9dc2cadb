"""
User 모델.
계정 정보와 추천 요청에 사용하는 6개의 프로필 속성을 저장합니다.
"""

from sqlalchemy import Boolean, Column, Integer, SmallInteger, String

from app.db.database import Base
from app.models.base import TimestampMixin


class User(TimestampMixin, Base):
    """`users` 테이블 모델."""

    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)

    # 프로필 속성 (최초 저장 전에는 NULL)
    gender = Column(SmallInteger, nullable=True, comment="성별 코드")
    age_group = Column(SmallInteger, nullable=True, comment="연령대 코드")
    shopping_lvl = Column(SmallInteger, nullable=True, comment="쇼핑 레벨 코드")
    is_student = Column(SmallInteger, nullable=True, comment="학생 여부 (0/1)")
    pref_shop_hour = Column(SmallInteger, nullable=True, comment="선호 쇼핑 시간 (0-23)")
    pref_shop_day = Column(SmallInteger, nullable=True, comment="선호 쇼핑 요일")

    def __repr__(self) -> str:
        return f"User(user_id={self.user_id}, email={self.email})"
