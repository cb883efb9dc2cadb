"""
애플리케이션 공통 예외 정의.

각 예외는 HTTP 상태 코드와 클라이언트에 노출할 메시지를 함께 가진다.
내부 진단 정보는 서버 로그로만 남기고 응답에는 포함하지 않는다.
"""

from __future__ import annotations

from typing import Optional

from fastapi import status


class AppException(Exception):
    """모든 애플리케이션 예외의 기본 클래스."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


# 400: 클라이언트가 수정 가능한 입력 오류
class ValidationError(AppException):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"


# 400: 중복 이메일 (기존 동작 유지, 409가 아님)
class DuplicateEmailError(AppException):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Email already exists"


# 401: 존재하지 않는 이메일과 틀린 비밀번호를 구분하지 않는다
class InvalidCredentialsError(AppException):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid credentials"


# 404
class NotFoundError(AppException):
    status_code = status.HTTP_404_NOT_FOUND
    message = "User not found"


# 500: 데이터베이스 계층 오류
class StorageError(AppException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Database error"


class RecommendationError(Exception):
    """추천 요청 실패의 기본 클래스. 응답에는 details로 노출된다."""

    def __init__(self, details: str):
        self.details = details
        super().__init__(details)


class UpstreamError(RecommendationError):
    """외부 추천 모델 API 호출 실패 (연결 실패 또는 2xx 이외의 응답)."""

    def __init__(self, details: str, status_code: Optional[int] = None, body: str = ""):
        self.status_code = status_code
        self.body = body
        super().__init__(details)


class MalformedResponseError(RecommendationError):
    """추천 모델 API 응답에 필요한 필드가 없는 경우."""
