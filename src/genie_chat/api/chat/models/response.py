"""
목적: Chat API 응답 모델을 정의한다.
설명: 대화 목록/메시지 목록/모델 목록 응답 본문을 제공한다.
디자인 패턴: 데이터 전송 객체(DTO)
참조: src/genie_chat/api/chat/routers/history.py, src/genie_chat/api/chat/routers/models.py
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from genie_chat.core.chat.models import Chat, ChatVisibility
from genie_chat.integrations.llm import ChatModelInfo


class ChatSummaryResponse(BaseModel):
    """대화 목록 항목."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    user_id: str = Field(serialization_alias="userId")
    visibility: ChatVisibility
    created_at: datetime = Field(serialization_alias="createdAt")

    @classmethod
    def from_chat(cls, chat: Chat) -> "ChatSummaryResponse":
        return cls(
            id=chat.id,
            title=chat.title,
            user_id=chat.user_id,
            visibility=chat.visibility,
            created_at=chat.created_at,
        )


class ChatHistoryResponse(BaseModel):
    """대화 목록 응답."""

    chats: list[ChatSummaryResponse]
    limit: int
    offset: int


class ChatMessagesResponse(BaseModel):
    """대화 메시지 목록 응답. 메시지는 저장 형태(camelCase 사전) 그대로 반환한다."""

    model_config = ConfigDict(populate_by_name=True)

    chat_id: str = Field(serialization_alias="chatId")
    messages: list[dict[str, Any]]


class ChatModelsResponse(BaseModel):
    """선택 가능한 모델 목록 응답."""

    models: list[ChatModelInfo]
    default: str
