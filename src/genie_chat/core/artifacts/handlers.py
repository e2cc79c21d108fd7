"""
목적: 문서 아티팩트 종류별 생성/수정 핸들러를 제공한다.
설명: 아티팩트 모델 출력을 스트리밍하면서 text-delta/code-delta 데이터 이벤트를 기록하고 최종 초안을 반환한다.
디자인 패턴: 전략(Strategy)
참조: src/genie_chat/core/artifacts/code_sanitizer.py, src/genie_chat/core/chat/prompts/artifact_prompt.py
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from pydantic import BaseModel, Field

from genie_chat.core.artifacts.code_sanitizer import strip_code_fences
from genie_chat.core.artifacts.models import ArtifactKind, Document
from genie_chat.core.chat.prompts import CODE_PROMPT, TEXT_PROMPT, render_update_prompt

DataWriter = Callable[[dict[str, Any]], None]


class CodeDraft(BaseModel):
    """코드 아티팩트 구조화 출력 스키마."""

    code: str = Field(description="Self-contained code snippet")


class DocumentHandler(ABC):
    """문서 종류별 생성/수정 계약."""

    kind: ArtifactKind

    def __init__(self, model: BaseChatModel) -> None:
        self._model = model

    async def create(self, title: str, writer: DataWriter) -> str:
        return await self._draft(CODE_PROMPT if self.kind == ArtifactKind.CODE else TEXT_PROMPT, title, writer)

    async def update(self, document: Document, description: str, writer: DataWriter) -> str:
        return await self._draft(render_update_prompt(document.content, self.kind.value), description, writer)

    @abstractmethod
    async def _draft(self, system_prompt: str, prompt: str, writer: DataWriter) -> str:
        raise NotImplementedError


class TextDocumentHandler(DocumentHandler):
    """텍스트 문서 핸들러. 토큰 조각마다 text-delta를 기록한다."""

    kind = ArtifactKind.TEXT

    async def _draft(self, system_prompt: str, prompt: str, writer: DataWriter) -> str:
        draft: list[str] = []
        messages = [SystemMessage(content=system_prompt), HumanMessage(content=prompt)]
        async for chunk in self._model.astream(messages):
            text = _content_text(chunk.content)
            if not text:
                continue
            draft.append(text)
            writer({"type": "text-delta", "content": text})
        return "".join(draft)


class CodeDocumentHandler(DocumentHandler):
    """코드 문서 핸들러.

    구조화 출력의 누적 `code` 값을 펜스 제거 후 code-delta로 기록한다. 각 delta는 전체 초안이다.
    """

    kind = ArtifactKind.CODE

    async def _draft(self, system_prompt: str, prompt: str, writer: DataWriter) -> str:
        draft = ""
        structured = self._model.with_structured_output(CodeDraft)
        messages = [SystemMessage(content=system_prompt), HumanMessage(content=prompt)]
        async for partial in structured.astream(messages):
            code = _extract_code(partial)
            if not code:
                continue
            draft = strip_code_fences(code)
            writer({"type": "code-delta", "content": draft})
        return draft


def build_document_handlers(model: BaseChatModel) -> dict[ArtifactKind, DocumentHandler]:
    """종류별 핸들러 사전을 생성한다."""

    return {
        ArtifactKind.TEXT: TextDocumentHandler(model),
        ArtifactKind.CODE: CodeDocumentHandler(model),
    }


def _extract_code(partial: Any) -> str:
    if isinstance(partial, CodeDraft):
        return partial.code
    if isinstance(partial, dict):
        value = partial.get("code")
        return value if isinstance(value, str) else ""
    return ""


def _content_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts: list[str] = []
        for item in content:
            if isinstance(item, str):
                parts.append(item)
            elif isinstance(item, dict) and item.get("type") == "text":
                parts.append(str(item.get("text", "")))
        return "".join(parts)
    return ""
