"""
브랜드/카테고리 조회 테이블 모델.
추천 모델이 반환하는 숫자 ID를 표시용 이름으로 변환할 때 사용합니다.
"""

from sqlalchemy import Column, Integer, String

from app.db.database import Base


class Brand(Base):
    """`brands` 테이블 모델."""

    __tablename__ = "brands"

    brand_id = Column(Integer, primary_key=True, autoincrement=False)
    brand_name = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"Brand(brand_id={self.brand_id}, name={self.brand_name})"


class Category(Base):
    """`categories` 테이블 모델."""

    __tablename__ = "categories"

    category_id = Column(Integer, primary_key=True, autoincrement=False)
    category_name = Column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"Category(category_id={self.category_id}, name={self.category_name})"
