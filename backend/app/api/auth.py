"""
인증 관련 API 라우터.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.database import get_db
from app.schemas.auth import LoginRequest, LoginResponse, SignupRequest
from app.schemas.common import ErrorResponse, MessageResponse
from app.services.auth_service import authenticate_user, register_user


router = APIRouter(tags=["Authentication"])


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def signup(payload: SignupRequest, db: Session = Depends(get_db)) -> MessageResponse:
    """신규 사용자 회원가입 엔드포인트."""

    # 사용자 등록 (중복 이메일은 DuplicateEmailError -> 400)
    register_user(db, payload.name, payload.email, payload.password)

    return MessageResponse(message="User created successfully")


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=LoginResponse,
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    """기존 사용자 로그인 엔드포인트."""

    # 사용자 인증
    account = authenticate_user(db, payload.email, payload.password)

    # 로그인 응답 반환
    return LoginResponse(userId=account.user_id, name=account.name)
