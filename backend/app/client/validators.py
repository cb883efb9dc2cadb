"""
클라이언트 입력 검증 규칙.

모든 검증 함수는 ValidationResult를 반환하며, 실패 시 처음 실패한 규칙의 메시지만 담는다.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NAME_PATTERN = re.compile(r"^[a-zA-Z\s-]{2,50}$")
MIN_PASSWORD_LENGTH = 8


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: Optional[str] = None


VALID = ValidationResult(valid=True)


def _fail(message: str) -> ValidationResult:
    return ValidationResult(valid=False, message=message)


def sanitize(value: Optional[str]) -> str:
    return (value or "").strip()


def is_empty(value: Optional[str]) -> bool:
    return not value or value.strip() == ""


def validate_email(email: Optional[str]) -> ValidationResult:
    if is_empty(email):
        return _fail("Email is required")
    if not EMAIL_PATTERN.fullmatch(email):
        return _fail("Please enter a valid email address")
    return VALID


def validate_password(password: Optional[str], strict: bool = True) -> ValidationResult:
    """
    strict=True (회원가입): 길이 -> 대문자 -> 소문자 -> 숫자 순서로 검사.
    strict=False (로그인): 빈 값만 검사.
    """
    if is_empty(password):
        return _fail("Password is required")
    if not strict:
        return VALID

    if len(password) < MIN_PASSWORD_LENGTH:
        return _fail("Password must be at least 8 characters")
    if not re.search(r"[A-Z]", password):
        return _fail("Password must contain an uppercase letter")
    if not re.search(r"[a-z]", password):
        return _fail("Password must contain a lowercase letter")
    if not re.search(r"[0-9]", password):
        return _fail("Password must contain a number")
    return VALID


def validate_name(name: Optional[str]) -> ValidationResult:
    if is_empty(name):
        return _fail("Name is required")
    if not NAME_PATTERN.fullmatch(name):
        return _fail(
            "Name must be 2-50 characters and contain only letters, spaces, or hyphens"
        )
    return VALID
