"""
목적: 채팅 도구 입력/구조화 출력 스키마를 정의한다.
설명: 모델이 보는 도구 인자 이름은 camelCase를 그대로 사용한다.
디자인 패턴: 스키마 객체
참조: src/genie_chat/core/chat/tools/factory.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from genie_chat.core.artifacts.models import ArtifactKind


class GetWeatherInput(BaseModel):
    latitude: float
    longitude: float


class CreateDocumentInput(BaseModel):
    title: str
    kind: ArtifactKind = ArtifactKind.TEXT


class UpdateDocumentInput(BaseModel):
    id: str = Field(description="The ID of the document to update")
    description: str = Field(description="The description of changes that need to be made")


class RequestSuggestionsInput(BaseModel):
    documentId: str = Field(description="The ID of the document to request edits")


class WebSearchInput(BaseModel):
    query: str = Field(description="The search query to look up on the web")


class SuggestionDraft(BaseModel):
    originalSentence: str = Field(description="The original sentence")
    suggestedSentence: str = Field(description="The suggested sentence")
    description: str = Field(description="The description of the suggestion")


class SuggestionDraftList(BaseModel):
    suggestions: list[SuggestionDraft] = Field(default_factory=list)
