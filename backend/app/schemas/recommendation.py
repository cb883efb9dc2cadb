"""
추천 관련 요청/응답 스키마 정의.
"""

from __future__ import annotations

from typing import Any, List, Union

from pydantic import BaseModel, Field


# 추천 요청 스키마 (값은 문자열/숫자 모두 허용하고 서비스에서 정규화)
class RecommendRequest(BaseModel):
    gender: Union[int, str]
    age_group: Union[int, str] = Field(alias="ageGroup")
    shopping_level: Union[int, str] = Field(alias="shoppingLevel")
    is_student: Union[int, str] = Field(alias="isStudent")
    preferred_hour: Union[int, float, str] = Field(alias="hourOfClick")
    preferred_day: Union[int, float, str] = Field(alias="dayOfClick")
    # 원본 값 그대로 서비스에 전달 (True 또는 "true"만 참)
    use_gen_model: Any = Field(default=False, alias="useGenModel")

    class Config:
        populate_by_name = True

    def to_profile(self) -> dict:
        return self.model_dump(by_alias=False, exclude={"use_gen_model"})


# 이름이 보강된 추천 아이템
class RecommendationPayload(BaseModel):
    rank: int
    brand_id: int = Field(alias="brandId")
    brand_name: str = Field(alias="brandName")
    category_id: int = Field(alias="categoryId")
    category_name: str = Field(alias="categoryName")
    price: float
    probability: float
    confidence: int

    class Config:
        populate_by_name = True


# 추천 응답 스키마
class RecommendResponse(BaseModel):
    success: bool = True
    model_type: str = Field(alias="modelType")
    total_products_scored: int = Field(alias="totalProductsScored")
    recommendations: List[RecommendationPayload]

    class Config:
        populate_by_name = True


# 외부 추천 모델 API 응답 아이템
class UpstreamItem(BaseModel):
    brand: int
    cate_id: int
    price: float
    probability: float = Field(ge=0.0, le=1.0)


# 외부 추천 모델 API 응답
class UpstreamResponse(BaseModel):
    top_10_recommendations: List[UpstreamItem]
    total_products_scored: int
