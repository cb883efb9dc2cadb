"""
인증 관련 스키마 정의.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


# 회원가입 요청 스키마 (빈 값 검사는 서비스 계층에서 수행)
class SignupRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


# 로그인 요청 스키마
class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


# 로그인 응답 스키마
class LoginResponse(BaseModel):
    message: str = "Login successful"
    user_id: int = Field(alias="userId")
    name: str

    class Config:
        populate_by_name = True
