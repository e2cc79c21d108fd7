"""
목적: Chat 실행 계층 공통 추상체를 정의한다.
설명: 저장소/제목 생성기/그래프 인터페이스를 Protocol로 제공한다.
디자인 패턴: 포트-어댑터(Port/Protocol)
참조: src/genie_chat/shared/chat/services/chat_service.py, src/genie_chat/shared/chat/repositories/sqlite_store.py
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping, Sequence
from typing import Any, Protocol, TypeAlias

from genie_chat.core.artifacts.models import Document, Suggestion
from genie_chat.core.chat.models import Chat, ChatMessage

StreamNodeConfig: TypeAlias = Mapping[str, str | Sequence[str]]


class ChatStorePort(Protocol):
    """대화/메시지/문서 저장소 포트.

    메시지 저장은 id 기준 insert-or-ignore로 동작해 한 번 저장된 메시지는 바뀌지 않는다.
    """

    def get_chat(self, chat_id: str) -> Chat | None:
        """대화 1건을 조회한다."""

    def save_chat(self, chat: Chat) -> None:
        """대화를 저장한다. 이미 있으면 무시한다."""

    def delete_chat(self, chat_id: str) -> bool:
        """대화와 소속 메시지를 삭제한다."""

    def list_chats(self, user_id: str, limit: int, offset: int) -> list[Chat]:
        """사용자 대화 목록을 최신순으로 조회한다."""

    def save_messages(self, messages: Sequence[ChatMessage]) -> None:
        """메시지를 저장한다."""

    def list_messages(self, chat_id: str) -> list[ChatMessage]:
        """대화 메시지를 생성 시각 순으로 조회한다."""

    def save_document(self, document: Document) -> None:
        """문서 새 버전을 저장한다."""

    def get_document(self, document_id: str) -> Document | None:
        """문서 최신 버전을 조회한다."""

    def save_suggestions(self, suggestions: Sequence[Suggestion]) -> None:
        """제안 목록을 저장한다."""

    def list_suggestions(self, document_id: str) -> list[Suggestion]:
        """문서의 제안 목록을 저장 순으로 조회한다."""

    def close(self) -> None:
        """저장소 리소스를 정리한다."""


class TitleGeneratorPort(Protocol):
    """대화 제목 생성 포트."""

    async def generate(self, message: ChatMessage) -> str:
        """첫 사용자 메시지로 제목을 생성한다."""


class GraphPort(Protocol):
    """Chat 그래프 실행 포트."""

    def set_stream_node(self, stream_node: StreamNodeConfig) -> None:
        """스트림 노드 정책을 교체한다."""

    def astream_events(
        self,
        graph_input: Mapping[str, Any],
        config: dict[str, Any] | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """비동기 스트림 이벤트를 반환한다."""
