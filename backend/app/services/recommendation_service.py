"""
추천 오케스트레이션 로직.

1. 프로필을 외부 모델 API 형식으로 정규화
2. 외부 모델 API 호출
3. 응답 검증 후 중복 제거된 브랜드/카테고리 ID 수집
4. 두 조회 테이블을 동시에 조회하여 이름 보강
5. 원래 순서(순위)대로 보강된 추천 목록 생성
"""

from __future__ import annotations

import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List

from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import MalformedResponseError, ValidationError
from app.schemas.recommendation import (
    RecommendationPayload,
    RecommendResponse,
    UpstreamItem,
    UpstreamResponse,
)
from app.services.lookup_service import SessionFactory, resolve_names
from app.services.model_client import RecommendationModelClient

logger = logging.getLogger(__name__)

BASE_MODEL_NAME = "DeepFM"
GEN_MODEL_NAME = "DeepFM (gen)"

LEADING_INT_PATTERN = re.compile(r"\s*([+-]?\d+)")


def to_strict_bool(value: Any) -> bool:
    """True 또는 문자열 "true"만 참으로 취급한다."""
    return value is True or value == "true"


def _to_int(value: Any, field: str) -> int:
    """앞쪽 정수 부분만 사용한다. ("14.0" -> 14, 14.7 -> 14)"""
    if isinstance(value, bool):
        raise ValidationError(f"'{field}' must be an integer")
    if isinstance(value, (int, float)):
        if math.isfinite(value):
            return int(value)
    elif isinstance(value, str):
        match = LEADING_INT_PATTERN.match(value)
        if match:
            return int(match.group(1))
    raise ValidationError(f"'{field}' must be an integer")


def normalize_profile(profile: Dict[str, Any], use_alternate_model: Any) -> Dict[str, Any]:
    """프로필을 외부 모델 API 요청 형식으로 변환한다."""
    return {
        "gender": str(profile["gender"]),
        "age": str(profile["age_group"]),
        "shopping": str(profile["shopping_level"]),
        "occupation": str(profile["is_student"]),
        "hour": _to_int(profile["preferred_hour"], "hourOfClick"),
        "day": _to_int(profile["preferred_day"], "dayOfClick"),
        "use_gen_model": to_strict_bool(use_alternate_model),
    }


def to_confidence(probability: float) -> int:
    """확률을 정수 퍼센트로 변환한다. Decimal 사사오입 (0.005 -> 1, 0.8734 -> 87)"""
    percent = Decimal(str(probability)) * 100
    return int(percent.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def parse_upstream_response(data: Dict[str, Any]) -> UpstreamResponse:
    """외부 모델 응답을 검증한다. 필요한 필드가 없으면 MalformedResponseError."""
    try:
        return UpstreamResponse.model_validate(data)
    except PydanticValidationError as e:
        logger.error(f"Malformed recommendation API response: {e}")
        raise MalformedResponseError(
            f"Invalid response from recommendation API: {e.error_count()} field error(s)"
        ) from e


def build_recommendations(
    items: List[UpstreamItem],
    brand_names: Dict[int, str],
    category_names: Dict[int, str],
) -> List[RecommendationPayload]:
    """순위는 응답 내 위치(1부터)이며 재정렬하지 않는다."""
    return [
        RecommendationPayload(
            rank=index,
            brandId=item.brand,
            brandName=brand_names.get(item.brand) or f"Unknown Brand ({item.brand})",
            categoryId=item.cate_id,
            categoryName=category_names.get(item.cate_id) or f"Unknown Category ({item.cate_id})",
            price=item.price,
            probability=item.probability,
            confidence=to_confidence(item.probability),
        )
        for index, item in enumerate(items, start=1)
    ]


async def recommend(
    profile: Dict[str, Any],
    use_alternate_model: Any,
    model_client: RecommendationModelClient,
    session_factory: SessionFactory,
) -> RecommendResponse:
    """
    사용자 프로필에 대한 추천 목록을 생성합니다.

    Parameters
    ----------
    profile:
        gender, age_group, shopping_level, is_student, preferred_hour, preferred_day
    use_alternate_model:
        생성 모델(gen) 사용 여부. True 또는 "true"만 참으로 취급
    model_client:
        외부 추천 모델 API 클라이언트
    session_factory:
        조회 테이블용 세션 팩토리

    Returns
    -------
    RecommendResponse:
        보강된 추천 목록, 전체 스코어링 상품 수, 사용된 모델 이름

    Raises
    ------
    ValidationError:
        시간/요일 값을 정수로 변환할 수 없는 경우
    UpstreamError:
        외부 API 호출 실패 또는 2xx 이외의 응답
    MalformedResponseError:
        외부 API 응답에 필요한 필드가 없는 경우
    """
    # 1. 정규화
    payload = normalize_profile(profile, use_alternate_model)

    # 2. 외부 모델 호출
    data = await model_client.predict(payload)

    # 3. 응답 검증 (빈 목록은 정상 결과로 취급)
    upstream = parse_upstream_response(data)
    items = upstream.top_10_recommendations

    # 4. 중복 제거된 ID 수집
    brand_ids = {item.brand for item in items}
    category_ids = {item.cate_id for item in items}

    # 5. 이름 동시 조회
    brand_names, category_names = await resolve_names(session_factory, brand_ids, category_ids)

    # 6-7. 보강 및 신뢰도 계산
    recommendations = build_recommendations(items, brand_names, category_names)

    # 8. 사용된 모델 표시
    model_type = GEN_MODEL_NAME if payload["use_gen_model"] else BASE_MODEL_NAME

    return RecommendResponse(
        modelType=model_type,
        totalProductsScored=upstream.total_products_scored,
        recommendations=recommendations,
    )
