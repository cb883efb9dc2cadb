"""
데이터베이스 엔진 및 세션 설정.
"""

from __future__ import annotations

from typing import Callable, Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import DATABASE_URL

# pool_pre_ping: 끊어진 커넥션을 사용 전에 감지
engine = create_engine(DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """요청 단위 DB 세션 의존성."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_session_factory() -> Callable[[], Session]:
    """
    세션 팩토리 의존성.

    여러 스레드에서 동시에 조회할 때 스레드마다 독립된 세션을 열기 위해 사용한다.
    """
    return SessionLocal
