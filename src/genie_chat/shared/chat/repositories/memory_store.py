"""
목적: 인메모리 대화 저장소를 제공한다.
설명: 테스트와 로컬 실행용으로 대화/메시지/문서/제안을 프로세스 메모리에 보관한다.
디자인 패턴: 저장소(Repository)
참조: src/genie_chat/shared/chat/interface/ports.py, src/genie_chat/shared/chat/repositories/sqlite_store.py
"""

from __future__ import annotations

import threading
from collections.abc import Sequence

from genie_chat.core.artifacts.models import Document, Suggestion
from genie_chat.core.chat.models import Chat, ChatMessage


class InMemoryChatStore:
    """프로세스 메모리 기반 저장소."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._chats: dict[str, Chat] = {}
        self._messages: dict[str, ChatMessage] = {}
        self._documents: dict[str, list[Document]] = {}
        self._suggestions: list[Suggestion] = []

    def get_chat(self, chat_id: str) -> Chat | None:
        with self._lock:
            return self._chats.get(chat_id)

    def save_chat(self, chat: Chat) -> None:
        with self._lock:
            self._chats.setdefault(chat.id, chat)

    def delete_chat(self, chat_id: str) -> bool:
        with self._lock:
            if self._chats.pop(chat_id, None) is None:
                return False
            self._messages = {
                key: message for key, message in self._messages.items() if message.chat_id != chat_id
            }
            return True

    def list_chats(self, user_id: str, limit: int, offset: int) -> list[Chat]:
        with self._lock:
            owned = [chat for chat in self._chats.values() if chat.user_id == user_id]
        owned.sort(key=lambda chat: chat.created_at, reverse=True)
        return owned[offset : offset + limit]

    def save_messages(self, messages: Sequence[ChatMessage]) -> None:
        with self._lock:
            for message in messages:
                self._messages.setdefault(message.id, message)

    def list_messages(self, chat_id: str) -> list[ChatMessage]:
        with self._lock:
            items = [message for message in self._messages.values() if message.chat_id == chat_id]
        return sorted(items, key=lambda message: message.created_at)

    def save_document(self, document: Document) -> None:
        with self._lock:
            self._documents.setdefault(document.id, []).append(document)

    def get_document(self, document_id: str) -> Document | None:
        with self._lock:
            versions = self._documents.get(document_id)
            return versions[-1] if versions else None

    def save_suggestions(self, suggestions: Sequence[Suggestion]) -> None:
        with self._lock:
            self._suggestions.extend(suggestions)

    def list_suggestions(self, document_id: str) -> list[Suggestion]:
        with self._lock:
            return [item for item in self._suggestions if item.document_id == document_id]

    def close(self) -> None:
        return None
