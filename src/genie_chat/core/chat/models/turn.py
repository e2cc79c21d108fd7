"""
목적: 채팅 턴 입력/준비 결과 모델을 정의한다.
설명: 클라이언트가 제출한 턴과 인증/대화 확인/사용자 메시지 저장을 마친 준비 상태를 표현한다.
디자인 패턴: 값 객체(Value Object)
참조: src/genie_chat/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from genie_chat.core.chat.const import DEFAULT_CHAT_MODEL_ID
from genie_chat.core.chat.models.entities import Chat, ChatMessage, ChatRole


class ChatTurn(BaseModel):
    """한 번의 사용자 제출 요청."""

    chat_id: str = Field(min_length=1)
    messages: list[ChatMessage] = Field(default_factory=list)
    selected_model_id: str = DEFAULT_CHAT_MODEL_ID

    def most_recent_user_message(self) -> ChatMessage | None:
        """가장 마지막 user 역할 메시지를 반환한다."""

        for message in reversed(self.messages):
            if message.role == ChatRole.USER:
                return message
        return None


class PreparedTurn(BaseModel):
    """스트리밍 직전까지 확정된 턴 상태.

    Args:
        chat: 조회 또는 생성된 대화.
        user_id: 인증된 사용자 식별자.
        user_message: 저장이 끝난(검색 접두어가 제거된) 사용자 메시지.
        messages: 재작성된 사용자 메시지를 포함한 전체 이력.
        selected_model_id: 응답 생성 모델 식별자.
        search_query: 웹 검색 트리거 시 추출한 질의. 없으면 None.
        is_new_chat: 이번 턴에서 대화를 새로 만들었는지 여부.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    chat: Chat
    user_id: str
    user_message: ChatMessage
    messages: list[ChatMessage]
    selected_model_id: str
    search_query: str | None = None
    is_new_chat: bool = False

    @property
    def chat_id(self) -> str:
        return self.chat.id
