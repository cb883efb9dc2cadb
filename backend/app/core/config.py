"""
환경 변수 기반 애플리케이션 설정.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# 환경 변수 로드 (.env)
load_dotenv()

# 데이터베이스 설정
DB_HOST = os.getenv("DB_HOST", "localhost")
DB_USER = os.getenv("DB_USER", "root")
DB_PASSWORD = os.getenv("DB_PASSWORD", "")
DB_NAME = os.getenv("DB_NAME", "shop_reco")
DB_PORT = int(os.getenv("DB_PORT", "3306"))

# DATABASE_URL이 지정되면 개별 DB_* 값보다 우선한다
DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}",
)

# 추천 모델 API 설정
MODEL_API_URL = os.getenv(
    "MODEL_API_URL",
    "https://0ets9ftbrg.execute-api.ap-southeast-2.amazonaws.com/prod/predict",
)
MODEL_API_TIMEOUT = float(os.getenv("MODEL_API_TIMEOUT", "15.0"))

# 비밀번호 해싱 비용 (bcrypt rounds)
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# CORS 허용 오리진 (콤마 구분)
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

# 서버 포트
PORT = int(os.getenv("PORT", "3000"))
