from datetime import datetime, timezone
from sqlalchemy import Column, DateTime


class TimestampMixin:
    """
    생성/수정 시간 공통 컬럼
    """

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc)) # 생성 시간
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc)) # 수정 시간
