"""
클라이언트 세션 및 세션 저장소 추상화.

세션은 (user_id, name) 쌍이며 만료/갱신/폐기 개념이 없다. 저장소에 세션이 있으면 로그인 상태로 본다.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserSession:
    user_id: int
    name: str


class SessionStore(ABC):
    """세션 저장소 추상 클래스"""

    @abstractmethod
    def load(self) -> Optional[UserSession]:
        """저장된 세션을 반환합니다. 없으면 None."""

    @abstractmethod
    def save(self, session: UserSession) -> None:
        """세션을 저장합니다."""

    @abstractmethod
    def clear(self) -> None:
        """세션을 삭제합니다."""


class MemorySessionStore(SessionStore):
    """프로세스 메모리 세션 저장소"""

    def __init__(self):
        self._session: Optional[UserSession] = None

    def load(self) -> Optional[UserSession]:
        return self._session

    def save(self, session: UserSession) -> None:
        self._session = session

    def clear(self) -> None:
        self._session = None


class FileSessionStore(SessionStore):
    """JSON 파일 세션 저장소"""

    def __init__(self, path: str = ".session.json"):
        self.path = Path(path)

    def load(self) -> Optional[UserSession]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return UserSession(user_id=int(data["userId"]), name=str(data["userName"]))
        except (ValueError, KeyError, TypeError) as e:
            # 손상된 세션 파일은 로그아웃 상태로 취급
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return None

    def save(self, session: UserSession) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        data = asdict(session)
        self.path.write_text(
            json.dumps({"userId": data["user_id"], "userName": data["name"]}),
            encoding="utf-8",
        )

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
