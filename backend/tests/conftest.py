import json
import os

# app 모듈 import 전에 테스트용 설정 지정
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from app.db.database import Base, get_db, get_session_factory
from app.models.lookup import Brand, Category
from app.services.model_client import RecommendationModelClient, get_model_client
from main import app

MODEL_URL = "http://model.test/predict"


@pytest.fixture
def engine(tmp_path):
    engine = create_engine(
        f"sqlite:///{tmp_path / 'test.db'}",
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seed_lookups(db):
    db.add_all([
        Brand(brand_id=5, brand_name="Acme"),
        Brand(brand_id=9, brand_name="Globex"),
        Category(category_id=100, category_name="Shoes"),
        Category(category_id=200, category_name="Bags"),
    ])
    db.commit()


class FakeModel:
    """외부 추천 모델 API 대역. 마지막 요청 본문을 기록한다."""

    def __init__(self):
        self.status_code = 200
        self.body = {"top_10_recommendations": [], "total_products_scored": 0}
        self.requests = []
        # httpx 전송 예외 클래스 (예: httpx.ConnectError)
        self.raise_error = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.raise_error is not None:
            raise self.raise_error("model unreachable", request=request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)


@pytest.fixture
def fake_model():
    return FakeModel()


@pytest.fixture
def model_client(fake_model):
    return RecommendationModelClient(
        url=MODEL_URL,
        timeout=5.0,
        transport=httpx.MockTransport(fake_model.handler),
    )


@pytest.fixture
def client(session_factory, model_client):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_model_client] = lambda: model_client
    yield TestClient(app)
    app.dependency_overrides.clear()


