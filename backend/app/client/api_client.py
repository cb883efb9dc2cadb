"""
백엔드 REST API 클라이언트 (httpx).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3000/api"

PROFILE_FIELDS = ("gender", "ageGroup", "shoppingLevel", "isStudent", "hourOfClick", "dayOfClick")


class ApiClientError(Exception):
    """API 호출 실패. message는 사용자에게 그대로 보여줄 수 있는 문장이다."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        data = response.json()
    except ValueError:
        return default
    if isinstance(data, dict) and data.get("error"):
        return str(data["error"])
    return default


def coerce_profile(profile: Dict[str, Any]) -> Dict[str, int]:
    """폼 값(문자열)을 정수로 변환한다."""
    try:
        return {field: int(profile[field]) for field in PROFILE_FIELDS}
    except KeyError as e:
        raise ApiClientError(f"Missing profile field: {e.args[0]}") from e
    except (TypeError, ValueError) as e:
        raise ApiClientError("Profile fields must be numbers") from e


class ApiClient:
    """
    백엔드 API 호출 래퍼.

    http_client를 주입하지 않으면 base_url로 새 httpx.Client를 만든다.
    """

    def __init__(self, base_url: str = DEFAULT_BASE_URL, http_client: Optional[httpx.Client] = None, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.http = http_client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self.http.close()

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _send(self, method: str, path: str, default_error: str, **kwargs) -> httpx.Response:
        try:
            return self.http.request(method, self._url(path), **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e!r}")
            raise ApiClientError(default_error) from e

    def signup(self, name: str, email: str, password: str) -> Dict[str, Any]:
        response = self._send(
            "POST", "/signup", "Sign up failed",
            json={"name": name, "email": email, "password": password},
        )
        if not response.is_success:
            raise ApiClientError(_error_message(response, "Sign up failed"), response.status_code)
        return response.json()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        response = self._send(
            "POST", "/login", "Login failed",
            json={"email": email, "password": password},
        )
        if not response.is_success:
            raise ApiClientError(_error_message(response, "Login failed"), response.status_code)
        return response.json()

    def load_profile(self, user_id: int) -> Optional[Dict[str, Any]]:
        """저장된 프로필을 반환한다. 사용자가 없으면(404) None."""
        response = self._send("GET", f"/profile/{user_id}", "Failed to load profile")
        if response.status_code == 404:
            return None
        if not response.is_success:
            raise ApiClientError("Failed to load profile", response.status_code)
        return response.json()

    def save_profile(self, user_id: int, profile: Dict[str, Any]) -> None:
        response = self._send(
            "PUT", f"/profile/{user_id}", "Failed to save profile",
            json=coerce_profile(profile),
        )
        if not response.is_success:
            raise ApiClientError(_error_message(response, "Failed to save profile"), response.status_code)

    def get_recommendations(self, profile: Dict[str, Any], use_gen_model: bool) -> Dict[str, Any]:
        body = dict(coerce_profile(profile), useGenModel=use_gen_model)
        response = self._send("POST", "/recommend", "Failed to get recommendations", json=body)
        if not response.is_success:
            raise ApiClientError("Failed to get recommendations", response.status_code)
        return response.json()
