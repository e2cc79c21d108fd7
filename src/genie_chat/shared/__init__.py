"""
목적: shared 패키지의 공개 API를 제공한다.
설명: 하위 공통 모듈에 대한 접근 포인트를 제공한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/shared/exceptions, src/genie_chat/shared/logging, src/genie_chat/shared/runtime
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from genie_chat.shared.exceptions import BaseAppException, ExceptionDetail
from genie_chat.shared.logging import (
    BoundedLogRepository,
    InMemoryLogger,
    InMemoryLogRepository,
    LogContext,
    LogLevel,
    LogRecord,
    Logger,
    LogRepository,
    create_default_logger,
)
from genie_chat.shared.runtime import FixedWindowRateLimiter

if TYPE_CHECKING:
    from genie_chat.shared.chat import (
        BaseChatGraph,
        ChatStorePort,
        ChatStreamExecutor,
        ChatTurnService,
        GraphPort,
        StreamNodeConfig,
    )


_CHAT_EXPORT_NAMES = {
    "StreamNodeConfig",
    "BaseChatGraph",
    "GraphPort",
    "ChatStorePort",
    "ChatTurnService",
    "ChatStreamExecutor",
}


def __getattr__(name: str) -> Any:
    if name in _CHAT_EXPORT_NAMES:
        from genie_chat.shared import chat as _chat

        return getattr(_chat, name)
    raise AttributeError(f"module 'genie_chat.shared' has no attribute '{name}'")


__all__ = [
    "BaseAppException",
    "ExceptionDetail",
    "LogContext",
    "LogLevel",
    "LogRecord",
    "Logger",
    "LogRepository",
    "InMemoryLogRepository",
    "BoundedLogRepository",
    "InMemoryLogger",
    "create_default_logger",
    "FixedWindowRateLimiter",
    "StreamNodeConfig",
    "BaseChatGraph",
    "GraphPort",
    "ChatStorePort",
    "ChatTurnService",
    "ChatStreamExecutor",
]
