"""
공통 스키마 정의.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class MessageResponse(BaseModel):
    """단순 메시지 응답."""

    message: str


class ErrorResponse(BaseModel):
    """오류 응답. 스택 트레이스나 내부 식별자는 포함하지 않는다."""

    error: str
    details: Optional[str] = None
