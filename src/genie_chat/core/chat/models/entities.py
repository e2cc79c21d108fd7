"""
목적: Chat 도메인 엔티티 모델을 정의한다.
설명: 대화/메시지/파트/첨부 타입과 공통 시간 유틸을 Pydantic 기반으로 제공한다.
디자인 패턴: 엔티티 패턴
참조: src/genie_chat/shared/chat/repositories/memory_store.py, src/genie_chat/shared/chat/repositories/sqlite_store.py
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


def utc_now() -> datetime:
    """UTC 기준 timezone-aware 현재 시각을 반환한다."""

    return datetime.now(timezone.utc)


def new_id() -> str:
    """엔티티 식별자(UUID4 문자열)를 생성한다."""

    return str(uuid4())


class ChatRole(str, Enum):
    """대화 메시지 역할 타입."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class ChatVisibility(str, Enum):
    """대화 공개 범위."""

    PRIVATE = "private"
    PUBLIC = "public"


class MessagePart(BaseModel):
    """메시지 콘텐츠 파트.

    `type="text"`이면 `text`를 사용하고, 도구 호출 파트 등은 추가 키를 그대로 보존한다.
    """

    model_config = ConfigDict(extra="allow")

    type: str = "text"
    text: str | None = None

    @property
    def is_text(self) -> bool:
        return self.type == "text" and isinstance(self.text, str)


class Attachment(BaseModel):
    """메시지 첨부 파일 메타데이터."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    name: str | None = None
    content_type: str | None = Field(
        default=None,
        validation_alias=AliasChoices("content_type", "contentType"),
        serialization_alias="contentType",
    )


class ChatMessage(BaseModel):
    """대화 메시지 엔티티.

    저장 형태는 사용자/어시스턴트 모두 `{id, chatId, role, parts, attachments, createdAt}`로 동일하다.
    파트 없이 `content`만 전달된 클라이언트 메시지는 텍스트 파트 1개로 정규화한다.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id)
    chat_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("chat_id", "chatId"),
        serialization_alias="chatId",
    )
    role: ChatRole
    content: str = Field(default="", exclude=True)
    parts: list[MessagePart] = Field(default_factory=list)
    attachments: list[Attachment] = Field(
        default_factory=list,
        validation_alias=AliasChoices("attachments", "experimental_attachments"),
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    @model_validator(mode="after")
    def _fill_parts_from_content(self) -> "ChatMessage":
        if not self.parts and self.content:
            self.parts = [MessagePart(type="text", text=self.content)]
        return self

    def text_content(self) -> str:
        """텍스트 파트를 순서대로 이어 붙인 문자열을 반환한다."""

        return "".join(part.text or "" for part in self.parts if part.is_text)

    def to_record(self) -> dict[str, Any]:
        """저장/응답용 camelCase 사전을 반환한다."""

        return {
            "id": self.id,
            "chatId": self.chat_id,
            "role": self.role.value,
            "parts": [part.model_dump(exclude_none=True) for part in self.parts],
            "attachments": [item.model_dump(by_alias=True, exclude_none=True) for item in self.attachments],
            "createdAt": self.created_at.isoformat(),
        }


class Chat(BaseModel):
    """대화 엔티티. 최초 턴에서 지연 생성되며 소유자만 접근할 수 있다."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id)
    user_id: str = Field(validation_alias=AliasChoices("user_id", "userId"), serialization_alias="userId")
    title: str
    visibility: ChatVisibility = ChatVisibility.PRIVATE
    created_at: datetime = Field(
        default_factory=utc_now,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id
