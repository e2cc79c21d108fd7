"""
목적: 로깅 모듈 공개 API를 제공한다.
설명: 로거/저장소 구현체와 로그 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/shared/logging/logger.py, src/genie_chat/shared/logging/models.py
"""

from genie_chat.shared.logging.logger import (
    DEFAULT_LOG_HISTORY_LIMIT,
    BoundedLogRepository,
    InMemoryLogger,
    InMemoryLogRepository,
    Logger,
    LogRepository,
    create_default_logger,
)
from genie_chat.shared.logging.models import LogContext, LogLevel, LogRecord

__all__ = [
    "DEFAULT_LOG_HISTORY_LIMIT",
    "BoundedLogRepository",
    "InMemoryLogger",
    "InMemoryLogRepository",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "LogRepository",
    "Logger",
    "create_default_logger",
]
