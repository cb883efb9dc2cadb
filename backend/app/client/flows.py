"""
로그인/회원가입 화면과 대시보드 화면의 동작 흐름.

각 동작은 화면에 잠시 표시할 FlowMessage 하나를 반환하며, 어떤 오류도 예외로 새어나가지 않는다.
(로그인 여부 확인 require_session 제외)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from app.client import validators
from app.client.api_client import ApiClient, ApiClientError
from app.client.session import SessionStore, UserSession

logger = logging.getLogger(__name__)

MessageKind = Literal["success", "error", "info"]

EMPTY_RESULTS_MESSAGE = "No recommendations found. Please try again."
RECOMMEND_FAILED_MESSAGE = "Failed to get recommendations"


@dataclass(frozen=True)
class FlowMessage:
    text: str
    kind: MessageKind = "error"

    @property
    def is_error(self) -> bool:
        return self.kind == "error"


class NotLoggedInError(Exception):
    """저장된 세션이 없는 상태에서 보호된 화면에 접근한 경우."""


class AuthFlow:
    """로그인/회원가입 폼 처리."""

    def __init__(self, api: ApiClient, store: SessionStore):
        self.api = api
        self.store = store

    def signup(self, name: str, email: str, password: str, confirm_password: str) -> FlowMessage:
        name = validators.sanitize(name)
        email = validators.sanitize(email)

        # 이름 -> 이메일 -> 비밀번호 -> 비밀번호 확인 순서로 첫 번째 실패만 표시
        for check in (
            validators.validate_name(name),
            validators.validate_email(email),
            validators.validate_password(password, strict=True),
        ):
            if not check.valid:
                return FlowMessage(check.message)

        if validators.is_empty(confirm_password):
            return FlowMessage("Please confirm your password")
        if password != confirm_password:
            return FlowMessage("Passwords do not match!")

        try:
            self.api.signup(name, email, password)
        except ApiClientError as e:
            return FlowMessage(e.message or "Sign up failed")

        return FlowMessage("Account created successfully!", "success")

    def login(self, email: str, password: str) -> FlowMessage:
        email = validators.sanitize(email)

        for check in (
            validators.validate_email(email),
            validators.validate_password(password, strict=False),
        ):
            if not check.valid:
                return FlowMessage(check.message)

        try:
            data = self.api.login(email, password)
        except ApiClientError as e:
            return FlowMessage(e.message or "Login failed")

        self.store.save(UserSession(user_id=int(data["userId"]), name=data["name"]))
        return FlowMessage("Login successful! Redirecting...", "success")

    def logout(self) -> None:
        self.store.clear()


@dataclass
class RecommendationView:
    """추천 결과 화면 상태."""

    message: FlowMessage
    model_type: Optional[str] = None
    total_products_scored: Optional[int] = None
    recommendations: List[Dict[str, Any]] = field(default_factory=list)


class DashboardFlow:
    """프로필 저장 및 추천 조회 화면 처리. 세션이 있어야 사용할 수 있다."""

    def __init__(self, api: ApiClient, store: SessionStore):
        self.api = api
        self.store = store

    def require_session(self) -> UserSession:
        session = self.store.load()
        if session is None:
            raise NotLoggedInError()
        return session

    def welcome_text(self) -> str:
        return f"Welcome back, {self.require_session().name}!"

    def load_profile(self) -> Optional[Dict[str, Any]]:
        """저장된 프로필이 있으면 반환한다. 아직 저장하지 않았거나 실패하면 None."""
        session = self.require_session()
        try:
            profile = self.api.load_profile(session.user_id)
        except ApiClientError as e:
            logger.error(f"Failed to load profile: {e.message}")
            return None

        if profile is None or profile.get("gender") is None:
            return None
        return profile

    def save_profile(self, profile: Dict[str, Any]) -> FlowMessage:
        session = self.require_session()
        try:
            self.api.save_profile(session.user_id, profile)
        except ApiClientError as e:
            return FlowMessage(e.message or "Failed to save profile")
        return FlowMessage("Profile saved successfully!", "success")

    def get_recommendations(self, profile: Dict[str, Any], model: Optional[str]) -> RecommendationView:
        """model은 "gen" (생성 모델) 또는 기본 모델 식별자."""
        self.require_session()

        if not model:
            return RecommendationView(FlowMessage("Please select a model type first"))

        try:
            data = self.api.get_recommendations(profile, use_gen_model=model == "gen")
        except ApiClientError:
            return RecommendationView(FlowMessage(RECOMMEND_FAILED_MESSAGE))

        recommendations = data.get("recommendations") or []
        if not data.get("success") or not recommendations:
            return RecommendationView(FlowMessage(EMPTY_RESULTS_MESSAGE, "info"))

        return RecommendationView(
            message=FlowMessage(f"{len(recommendations)} recommendations", "success"),
            model_type=data.get("modelType"),
            total_products_scored=data.get("totalProductsScored"),
            recommendations=recommendations,
        )
