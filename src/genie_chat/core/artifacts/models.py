"""
목적: 문서 아티팩트와 글쓰기 제안 엔티티를 정의한다.
설명: 문서는 같은 id로 여러 버전이 저장되며 최신 버전이 유효하다.
디자인 패턴: 엔티티 패턴
참조: src/genie_chat/shared/chat/repositories/sqlite_store.py, src/genie_chat/core/chat/tools/factory.py
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from genie_chat.core.chat.models import new_id, utc_now


class ArtifactKind(str, Enum):
    """문서 아티팩트 종류."""

    TEXT = "text"
    CODE = "code"


class Document(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id)
    user_id: str = Field(validation_alias=AliasChoices("user_id", "userId"), serialization_alias="userId")
    title: str
    kind: ArtifactKind = ArtifactKind.TEXT
    content: str = ""
    created_at: datetime = Field(
        default_factory=utc_now,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )


class Suggestion(BaseModel):
    """문서 문장 단위 수정 제안."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_id)
    document_id: str = Field(
        validation_alias=AliasChoices("document_id", "documentId"),
        serialization_alias="documentId",
    )
    user_id: str = Field(validation_alias=AliasChoices("user_id", "userId"), serialization_alias="userId")
    original_text: str = Field(
        validation_alias=AliasChoices("original_text", "originalText", "originalSentence"),
        serialization_alias="originalText",
    )
    suggested_text: str = Field(
        validation_alias=AliasChoices("suggested_text", "suggestedText", "suggestedSentence"),
        serialization_alias="suggestedText",
    )
    description: str = ""
    is_resolved: bool = Field(default=False, serialization_alias="isResolved")
    created_at: datetime = Field(default_factory=utc_now, serialization_alias="createdAt")

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
