"""
목적: 턴 단위 채팅 도구 목록을 생성한다.
설명: 사용자 식별자와 데이터 스트림 기록기를 클로저로 묶어 getWeather/createDocument/updateDocument/requestSuggestions/webSearch 도구를 만든다.
디자인 패턴: 팩토리 + 클로저 주입
참조: src/genie_chat/core/chat/nodes/response_node.py, src/genie_chat/core/artifacts/handlers.py, src/genie_chat/core/search/service.py
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_core.tools import BaseTool, StructuredTool

from genie_chat.core.artifacts import (
    ArtifactKind,
    DataWriter,
    Document,
    DocumentHandler,
    Suggestion,
    build_document_handlers,
)
from genie_chat.core.chat.prompts import SUGGESTIONS_PROMPT
from genie_chat.core.chat.tools.schemas import (
    CreateDocumentInput,
    GetWeatherInput,
    RequestSuggestionsInput,
    SuggestionDraftList,
    UpdateDocumentInput,
    WebSearchInput,
)
from genie_chat.core.search import WebSearchService, reasoning_results_message, reasoning_search_message
from genie_chat.integrations.weather import OpenMeteoClient
from genie_chat.shared.chat.interface import ChatStorePort
from genie_chat.shared.logging import Logger, create_default_logger

DOCUMENT_NOT_FOUND = "Document not found"


class ChatToolFactory:
    """채팅 도구 팩토리.

    Args:
        store: 문서/제안 저장소.
        search_service: 웹 검색 서비스.
        weather_client: 날씨 API 클라이언트.
        artifact_model_provider: 문서/제안 생성용 모델 공급 함수. 첫 문서 도구 호출 시점에 모델을 만든다.
        document_handlers: 종류별 문서 핸들러. None이면 artifact 모델로 기본 핸들러를 만든다.
    """

    def __init__(
        self,
        *,
        store: ChatStorePort,
        search_service: WebSearchService,
        weather_client: OpenMeteoClient,
        artifact_model_provider: Callable[[], BaseChatModel],
        document_handlers: dict[ArtifactKind, DocumentHandler] | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._store = store
        self._search_service = search_service
        self._weather_client = weather_client
        self._artifact_model_provider = artifact_model_provider
        self._handlers = document_handlers
        self._logger = logger or create_default_logger("ChatToolFactory")

    def build(self, user_id: str, writer: DataWriter) -> list[BaseTool]:
        """턴 하나에서 사용할 도구 목록을 생성한다."""

        async def get_weather(latitude: float, longitude: float) -> dict[str, Any]:
            return await self._weather_client.forecast(latitude, longitude)

        async def create_document(title: str, kind: ArtifactKind = ArtifactKind.TEXT) -> dict[str, Any]:
            return await self._create_document(user_id, writer, title, ArtifactKind(kind))

        async def update_document(id: str, description: str) -> dict[str, Any]:
            return await self._update_document(user_id, writer, id, description)

        async def request_suggestions(documentId: str) -> dict[str, Any]:
            return await self._request_suggestions(user_id, writer, documentId)

        async def web_search(query: str) -> dict[str, Any]:
            return await self._web_search(writer, query)

        return [
            StructuredTool.from_function(
                coroutine=get_weather,
                name="getWeather",
                description="Get the current weather at a location",
                args_schema=GetWeatherInput,
            ),
            StructuredTool.from_function(
                coroutine=create_document,
                name="createDocument",
                description=(
                    "Create a document for a writing or content creation activities. "
                    "This tool will call other functions that will generate the contents "
                    "of the document based on the title and kind."
                ),
                args_schema=CreateDocumentInput,
            ),
            StructuredTool.from_function(
                coroutine=update_document,
                name="updateDocument",
                description="Update a document with the given description.",
                args_schema=UpdateDocumentInput,
            ),
            StructuredTool.from_function(
                coroutine=request_suggestions,
                name="requestSuggestions",
                description="Request suggestions for a document",
                args_schema=RequestSuggestionsInput,
            ),
            StructuredTool.from_function(
                coroutine=web_search,
                name="webSearch",
                description="Search the web for current information on a topic",
                args_schema=WebSearchInput,
            ),
        ]

    def _handler(self, kind: ArtifactKind) -> DocumentHandler:
        if self._handlers is None:
            self._handlers = build_document_handlers(self._artifact_model_provider())
        return self._handlers[kind]

    async def _create_document(
        self,
        user_id: str,
        writer: DataWriter,
        title: str,
        kind: ArtifactKind,
    ) -> dict[str, Any]:
        document = Document(user_id=user_id, title=title, kind=kind)
        writer({"type": "kind", "content": kind.value})
        writer({"type": "id", "content": document.id})
        writer({"type": "title", "content": title})
        writer({"type": "clear", "content": ""})

        content = await self._handler(kind).create(title, writer)
        self._store.save_document(document.model_copy(update={"content": content}))
        writer({"type": "finish", "content": ""})
        self._logger.info(f"chat.tool.document.created: id={document.id}, kind={kind.value}")
        return {
            "id": document.id,
            "title": title,
            "kind": kind.value,
            "content": "A document was created and is now visible to the user.",
        }

    async def _update_document(
        self,
        user_id: str,
        writer: DataWriter,
        document_id: str,
        description: str,
    ) -> dict[str, Any]:
        document = self._store.get_document(document_id)
        if document is None:
            return {"error": DOCUMENT_NOT_FOUND}

        writer({"type": "clear", "content": document.title})
        content = await self._handler(document.kind).update(document, description, writer)
        self._store.save_document(
            Document(
                id=document.id,
                user_id=user_id,
                title=document.title,
                kind=document.kind,
                content=content,
            )
        )
        writer({"type": "finish", "content": ""})
        self._logger.info(f"chat.tool.document.updated: id={document.id}")
        return {
            "id": document.id,
            "title": document.title,
            "kind": document.kind.value,
            "content": "The document has been updated successfully.",
        }

    async def _request_suggestions(self, user_id: str, writer: DataWriter, document_id: str) -> dict[str, Any]:
        document = self._store.get_document(document_id)
        if document is None or not document.content:
            return {"error": DOCUMENT_NOT_FOUND}

        structured = self._artifact_model_provider().with_structured_output(SuggestionDraftList)
        result = await structured.ainvoke(
            [SystemMessage(content=SUGGESTIONS_PROMPT), HumanMessage(content=document.content)]
        )
        drafts = SuggestionDraftList.model_validate(result)
        suggestions: list[Suggestion] = []
        for draft in drafts.suggestions:
            suggestion = Suggestion(
                document_id=document.id,
                user_id=user_id,
                original_text=draft.originalSentence,
                suggested_text=draft.suggestedSentence,
                description=draft.description,
            )
            writer({"type": "suggestion", "content": suggestion.to_record()})
            suggestions.append(suggestion)

        self._store.save_suggestions(suggestions)
        return {
            "id": document.id,
            "title": document.title,
            "kind": document.kind.value,
            "message": "Suggestions have been added to the document",
        }

    async def _web_search(self, writer: DataWriter, query: str) -> dict[str, Any]:
        writer({"type": "reasoning", "content": reasoning_search_message()})
        results = await self._search_service.search(query)
        writer({"type": "reasoning", "content": reasoning_results_message(len(results), query)})
        return {"query": query, "results": [item.model_dump() for item in results]}
