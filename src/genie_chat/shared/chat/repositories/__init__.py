"""
목적: 대화 저장소 구현체 공개 API를 제공한다.
설명: 백엔드 이름으로 저장소를 생성하는 팩토리를 함께 제공한다.
디자인 패턴: 파사드 + 팩토리
참조: src/genie_chat/shared/chat/repositories/sqlite_store.py, src/genie_chat/api/chat/services/runtime.py
"""

from __future__ import annotations

from pathlib import Path

from genie_chat.shared.chat.interface import ChatStorePort
from genie_chat.shared.chat.repositories.memory_store import InMemoryChatStore
from genie_chat.shared.chat.repositories.sqlite_store import SqliteChatStore
from genie_chat.shared.logging import Logger


def create_chat_store(backend: str, database_path: str | Path, logger: Logger | None = None) -> ChatStorePort:
    """백엔드 이름(`sqlite`/`memory`)에 맞는 저장소를 생성한다."""

    normalized = backend.strip().lower()
    if normalized == "memory":
        return InMemoryChatStore()
    if normalized == "sqlite":
        return SqliteChatStore(database_path, logger=logger)
    raise ValueError(f"지원하지 않는 CHAT_STORE_BACKEND 값입니다: {backend}")


__all__ = ["InMemoryChatStore", "SqliteChatStore", "create_chat_store"]
