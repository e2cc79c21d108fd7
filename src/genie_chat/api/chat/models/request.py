"""
목적: Chat API 요청 모델을 정의한다.
설명: 채팅 턴 제출 본문 `{id, messages[], selectedChatModel}`을 검증한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/genie_chat/api/chat/routers/chat.py
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from genie_chat.core.chat.const import DEFAULT_CHAT_MODEL_ID
from genie_chat.core.chat.models import ChatMessage, ChatTurn


class ChatRequest(BaseModel):
    """채팅 턴 제출 요청 모델."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., min_length=1, description="대화 식별자(클라이언트 생성)")
    messages: list[ChatMessage] = Field(default_factory=list, description="대화 전체 메시지 목록")
    selected_chat_model: str = Field(
        default=DEFAULT_CHAT_MODEL_ID,
        validation_alias=AliasChoices("selectedChatModel", "selected_chat_model"),
        description="응답 생성 모델 식별자",
    )

    def to_turn(self) -> ChatTurn:
        return ChatTurn(chat_id=self.id, messages=self.messages, selected_model_id=self.selected_chat_model)
