"""
목적: 턴 단위 채팅 도구의 데이터 이벤트와 저장 동작을 검증한다.
설명: 가짜 아티팩트 모델/검색 클라이언트/날씨 전송 계층으로 도구를 직접 실행한다.
디자인 패턴: 테스트 더블 기반 단위 테스트
참조: src/genie_chat/core/chat/tools/factory.py, src/genie_chat/core/artifacts/handlers.py
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

from _chat_fakes import ScriptedChatModel, StaticSearchClient, search_items
from genie_chat.core.artifacts import ArtifactKind, Document
from genie_chat.core.chat.tools import DOCUMENT_NOT_FOUND, ChatToolFactory, SuggestionDraft, SuggestionDraftList
from genie_chat.core.search import WebSearchService
from genie_chat.integrations.weather import OpenMeteoClient
from genie_chat.shared.chat.repositories import InMemoryChatStore
from genie_chat.shared.runtime import FixedWindowRateLimiter


def _build_tools(
    store: InMemoryChatStore,
    artifact_model: ScriptedChatModel | None = None,
    weather_transport: httpx.MockTransport | None = None,
) -> tuple[dict[str, Any], list[dict[str, Any]]]:
    events: list[dict[str, Any]] = []
    model = artifact_model or ScriptedChatModel()
    factory = ChatToolFactory(
        store=store,
        search_service=WebSearchService(
            client=StaticSearchClient(payload=search_items(2)),
            rate_limiter=FixedWindowRateLimiter(max_queries=10, window_seconds=60),
        ),
        weather_client=OpenMeteoClient(transport=weather_transport),
        artifact_model_provider=lambda: model,
    )
    tools = factory.build(user_id="user-1", writer=events.append)
    return {tool.name: tool for tool in tools}, events


def test_factory_exposes_all_tools() -> None:
    tools, _ = _build_tools(InMemoryChatStore())

    assert sorted(tools) == ["createDocument", "getWeather", "requestSuggestions", "updateDocument", "webSearch"]


@pytest.mark.asyncio
async def test_create_text_document_streams_deltas_and_saves() -> None:
    store = InMemoryChatStore()
    tools, events = _build_tools(store, ScriptedChatModel(["Hello world draft"]))

    result = await tools["createDocument"].ainvoke({"title": "Greeting", "kind": "text"})

    types = [event["type"] for event in events]
    assert types == ["kind", "id", "title", "clear", "text-delta", "text-delta", "text-delta", "finish"]
    assert events[0]["content"] == "text"
    document = store.get_document(result["id"])
    assert document is not None
    assert document.content == "Hello world draft"
    assert document.user_id == "user-1"
    assert result["content"] == "A document was created and is now visible to the user."


@pytest.mark.asyncio
async def test_create_code_document_strips_fences_from_each_delta() -> None:
    store = InMemoryChatStore()
    model = ScriptedChatModel(
        structured_outputs=[
            {"code": "```python\nprint("},
            {"code": "```python\nprint('hi')\n```"},
        ]
    )
    tools, events = _build_tools(store, model)

    result = await tools["createDocument"].ainvoke({"title": "Hello script", "kind": "code"})

    deltas = [event["content"] for event in events if event["type"] == "code-delta"]
    assert deltas == ["print(", "print('hi')"]
    assert store.get_document(result["id"]).content == "print('hi')"


@pytest.mark.asyncio
async def test_update_unknown_document_returns_error_without_events() -> None:
    tools, events = _build_tools(InMemoryChatStore())

    result = await tools["updateDocument"].ainvoke({"id": "missing", "description": "shorter"})

    assert result == {"error": DOCUMENT_NOT_FOUND}
    assert events == []


@pytest.mark.asyncio
async def test_update_document_saves_new_version() -> None:
    store = InMemoryChatStore()
    store.save_document(Document(id="doc-1", user_id="user-1", title="Essay", kind=ArtifactKind.TEXT, content="old"))
    tools, events = _build_tools(store, ScriptedChatModel(["new text"]))

    result = await tools["updateDocument"].ainvoke({"id": "doc-1", "description": "rewrite"})

    assert result["content"] == "The document has been updated successfully."
    assert events[0] == {"type": "clear", "content": "Essay"}
    assert events[-1]["type"] == "finish"
    assert store.get_document("doc-1").content == "new text"


@pytest.mark.asyncio
async def test_request_suggestions_emits_and_saves_each_suggestion() -> None:
    store = InMemoryChatStore()
    store.save_document(Document(id="doc-1", user_id="user-1", title="Essay", content="Its a good day."))
    drafts = SuggestionDraftList(
        suggestions=[
            SuggestionDraft(
                originalSentence="Its a good day.",
                suggestedSentence="It's a good day.",
                description="Fix the contraction",
            )
        ]
    )
    tools, events = _build_tools(store, ScriptedChatModel(structured_outputs=[drafts]))

    result = await tools["requestSuggestions"].ainvoke({"documentId": "doc-1"})

    assert result["message"] == "Suggestions have been added to the document"
    assert [event["type"] for event in events] == ["suggestion"]
    assert events[0]["content"]["originalText"] == "Its a good day."
    saved = store.list_suggestions("doc-1")
    assert len(saved) == 1
    assert saved[0].suggested_text == "It's a good day."


@pytest.mark.asyncio
async def test_web_search_tool_reports_reasoning_progress() -> None:
    tools, events = _build_tools(InMemoryChatStore())

    result = await tools["webSearch"].ainvoke({"query": "python"})

    assert [event["type"] for event in events] == ["reasoning", "reasoning"]
    assert events[1]["content"] == 'I found 2 results from the web about "python". Let me analyze this information...'
    assert [item["title"] for item in result["results"]] == ["Result 1", "Result 2"]


@pytest.mark.asyncio
async def test_get_weather_queries_open_meteo() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"current": {"temperature_2m": 21.5}})

    tools, _ = _build_tools(InMemoryChatStore(), weather_transport=httpx.MockTransport(handler))

    result = await tools["getWeather"].ainvoke({"latitude": 37.56, "longitude": 126.97})

    assert result == {"current": {"temperature_2m": 21.5}}
    assert seen[0].url.params["latitude"] == "37.56"
    assert seen[0].url.params["daily"] == "sunrise,sunset"
