"""
브랜드/카테고리 조회 테이블 데이터를 DB에 일괄 삽입하는 배치 스크립트.

JSON 형식:
    {
        "brands": [{"id": 5, "name": "Acme"}, ...],
        "categories": [{"id": 12, "name": "Shoes"}, ...]
    }

사용법:
    python scripts/load_lookups.py data/lookups.json
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 Python 경로에 추가
BACKEND_DIR = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(BACKEND_DIR))

from sqlalchemy.orm import Session

from app.db.database import Base, SessionLocal, engine
from app.models.lookup import Brand, Category

# 로깅 설정
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def upsert_lookups(db: Session, data: dict) -> tuple[int, int]:
    """
    브랜드/카테고리 행을 삽입하거나 이름을 갱신한다.

    Args:
        db: 데이터베이스 세션
        data: {"brands": [...], "categories": [...]}

    Returns:
        (처리한 브랜드 수, 처리한 카테고리 수)
    """
    brand_count = 0
    for row in data.get("brands", []):
        db.merge(Brand(brand_id=int(row["id"]), brand_name=str(row["name"])))
        brand_count += 1

    category_count = 0
    for row in data.get("categories", []):
        db.merge(Category(category_id=int(row["id"]), category_name=str(row["name"])))
        category_count += 1

    db.commit()
    return brand_count, category_count


def load_lookups_from_json(json_file_path: str) -> None:
    """JSON 파일에서 조회 테이블 데이터를 읽어 DB에 반영한다."""
    with open(json_file_path, "r", encoding="utf-8") as f:
        data = json.load(f)

    Base.metadata.create_all(bind=engine, tables=[Brand.__table__, Category.__table__])

    db = SessionLocal()
    try:
        brands, categories = upsert_lookups(db, data)
        logger.info(f"Loaded {brands} brands and {categories} categories.")
    except Exception as e:
        db.rollback()
        logger.error(f"Error occurred: {e}")
        raise
    finally:
        db.close()


def main() -> None:
    """메인 함수"""
    if len(sys.argv) < 2:
        print("사용법: python scripts/load_lookups.py <json_file_path>")
        sys.exit(1)

    load_lookups_from_json(sys.argv[1])


if __name__ == "__main__":
    main()
