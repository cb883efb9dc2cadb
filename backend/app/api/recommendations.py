"""
상품 추천 관련 API 라우터.
"""

from __future__ import annotations

from typing import Callable

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.database import get_session_factory
from app.schemas.common import ErrorResponse
from app.schemas.recommendation import RecommendRequest, RecommendResponse
from app.services.model_client import RecommendationModelClient, get_model_client
from app.services.recommendation_service import recommend

router = APIRouter(tags=["Recommendations"])


@router.post(
    "/recommend",
    status_code=status.HTTP_200_OK,
    response_model=RecommendResponse,
    responses={500: {"model": ErrorResponse}},
)
async def get_recommendations(
    request: RecommendRequest,
    model_client: RecommendationModelClient = Depends(get_model_client),
    session_factory: Callable[[], Session] = Depends(get_session_factory),
) -> RecommendResponse:
    """
    사용자 프로필 기반 상위 추천 상품 목록을 조회합니다.

    외부 모델 API가 반환한 브랜드/카테고리 ID는 조회 테이블의 이름으로 보강됩니다.
    조회 테이블에 없는 ID는 "Unknown Brand (id)" 형태로 표시됩니다.
    """
    return await recommend(
        profile=request.to_profile(),
        use_alternate_model=request.use_gen_model,
        model_client=model_client,
        session_factory=session_factory,
    )
