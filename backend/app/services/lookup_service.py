"""
브랜드/카테고리 이름 조회 서비스.

두 조회는 서로 독립적이므로 별도 스레드에서 동시에 실행하고 결과를 합친다.
한쪽 조회 실패가 다른 쪽을 취소하지 않으며, 실패한 쪽은 빈 매핑으로 대체된다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Dict, Iterable

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.lookup import Brand, Category

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


def _fetch_names(session_factory: SessionFactory, id_column, name_column, ids: Iterable[int]) -> Dict[int, str]:
    ids = list(ids)
    if not ids:
        return {}

    # 스레드마다 독립된 세션 사용
    with session_factory() as db:
        rows = db.execute(select(id_column, name_column).where(id_column.in_(ids))).all()
    return {row_id: name for row_id, name in rows}


def fetch_brand_names(session_factory: SessionFactory, brand_ids: Iterable[int]) -> Dict[int, str]:
    """브랜드 ID -> 브랜드 이름. DB 오류 시 빈 매핑."""
    try:
        return _fetch_names(session_factory, Brand.brand_id, Brand.brand_name, brand_ids)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching brand names: {e}")
        return {}


def fetch_category_names(session_factory: SessionFactory, category_ids: Iterable[int]) -> Dict[int, str]:
    """카테고리 ID -> 카테고리 이름. DB 오류 시 빈 매핑."""
    try:
        return _fetch_names(session_factory, Category.category_id, Category.category_name, category_ids)
    except SQLAlchemyError as e:
        logger.error(f"Error fetching category names: {e}")
        return {}


async def resolve_names(
    session_factory: SessionFactory,
    brand_ids: Iterable[int],
    category_ids: Iterable[int],
) -> tuple[Dict[int, str], Dict[int, str]]:
    """
    브랜드/카테고리 이름을 동시에 조회합니다.

    Returns
    -------
    tuple[Dict[int, str], Dict[int, str]]:
        (브랜드 매핑, 카테고리 매핑)
    """
    results = await asyncio.gather(
        asyncio.to_thread(fetch_brand_names, session_factory, brand_ids),
        asyncio.to_thread(fetch_category_names, session_factory, category_ids),
        return_exceptions=True,
    )

    mappings = []
    for label, result in zip(("brand", "category"), results):
        if isinstance(result, BaseException):
            logger.error(f"Unexpected error resolving {label} names: {result!r}")
            mappings.append({})
        else:
            mappings.append(result)

    return mappings[0], mappings[1]
