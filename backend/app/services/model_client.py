"""
외부 추천 모델 API 클라이언트 (httpx).
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from app.core.config import MODEL_API_TIMEOUT, MODEL_API_URL
from app.core.exceptions import MalformedResponseError, UpstreamError

logger = logging.getLogger(__name__)


class RecommendationModelClient:
    """단일 예측 엔드포인트에 정규화된 프로필을 POST로 전달한다. 재시도는 하지 않는다."""

    def __init__(
        self,
        url: str = MODEL_API_URL,
        timeout: float = MODEL_API_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url
        self.timeout = timeout
        self.transport = transport

    async def predict(self, payload: dict) -> dict:
        """
        예측 API를 호출하고 JSON 응답을 반환합니다.

        Raises
        ------
        UpstreamError:
            연결 실패, 타임아웃 또는 2xx 이외의 응답
        MalformedResponseError:
            응답 본문이 JSON 객체가 아닌 경우
        """
        logger.info(f"Calling recommendation API with data: {payload}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            logger.error(f"Recommendation API request failed: {e!r}")
            raise UpstreamError(f"Recommendation API request failed: {e}") from e

        if not response.is_success:
            body = response.text
            logger.error(
                f"API responded with status: {response.status_code}, body: {body}"
            )
            raise UpstreamError(
                f"API responded with status: {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Recommendation API returned non-JSON body: {response.text}")
            raise MalformedResponseError("Recommendation API returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise MalformedResponseError("Recommendation API returned an unexpected payload")

        logger.info(f"Recommendation API response: {data}")
        return data


def get_model_client() -> RecommendationModelClient:
    """추천 모델 클라이언트 의존성."""
    return RecommendationModelClient()
