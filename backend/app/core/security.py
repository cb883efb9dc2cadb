"""
비밀번호 해싱 유틸리티 (bcrypt).
"""

from __future__ import annotations

import bcrypt

from app.core.config import BCRYPT_ROUNDS


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    """솔트를 포함한 bcrypt 해시 문자열을 반환한다."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """
    비밀번호와 저장된 해시를 비교한다.

    문자열 직접 비교 대신 bcrypt.checkpw를 사용하여 상수 시간 비교를 보장한다.
    해시 형식이 잘못된 경우에도 False를 반환한다.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False
