"""
목적: 로그 레코드 모델을 정의한다.
설명: 채팅 턴/웹 검색 로그가 공유하는 레벨, 컨텍스트, 레코드를 Pydantic으로 표현한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/genie_chat/shared/logging/logger.py, src/genie_chat/core/search/service.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogContext(BaseModel):
    """요청 단위 상관 정보. 비어 있는 필드는 stdout 출력에서 생략된다."""

    trace_id: Optional[str] = None
    request_id: Optional[str] = None
    user_id: Optional[str] = None
    chat_id: Optional[str] = None
    tags: Dict[str, str] = Field(default_factory=dict)


class LogRecord(BaseModel):
    """저장소에 쌓이는 로그 한 건.

    웹 검색 실패 이력은 metadata에 query/error를 담는다.
    """

    level: LogLevel
    message: str
    logger_name: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    context: Optional[LogContext] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
