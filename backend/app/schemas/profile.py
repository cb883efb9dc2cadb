"""
프로필 관련 스키마 정의.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class ProfilePayload(BaseModel):
    """
    프로필 속성 6개.

    요청에서는 누락/NULL 여부를 서비스 계층에서 판단하기 위해 모두 Optional로 받는다.
    """

    gender: Optional[int] = None
    age_group: Optional[int] = Field(default=None, alias="ageGroup")
    shopping_level: Optional[int] = Field(default=None, alias="shoppingLevel")
    is_student: Optional[int] = Field(default=None, alias="isStudent")
    preferred_hour: Optional[int] = Field(default=None, alias="hourOfClick", ge=0, le=23)
    preferred_day: Optional[int] = Field(default=None, alias="dayOfClick")

    class Config:
        populate_by_name = True

    def to_attributes(self) -> dict:
        return self.model_dump(by_alias=False)
