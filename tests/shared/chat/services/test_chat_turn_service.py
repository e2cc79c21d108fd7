"""
목적: ChatTurnService의 턴 준비/스트리밍/삭제/조회 동작을 검증한다.
설명: 인메모리 저장소와 스크립트 그래프로 인증 실패 시 무기록, 제목 1회 생성, 검색 재작성 저장, 응답 병합 저장을 확인한다.
디자인 패턴: 서비스 레이어 단위 테스트
참조: src/genie_chat/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from typing import Any

import pytest

from _chat_fakes import (
    CountingTitleGenerator,
    ScriptedChatModel,
    ScriptedGraph,
    StaticSearchClient,
    build_registry,
    reply_events,
)
from genie_chat.core.chat.const import ChatErrorCode
from genie_chat.core.chat.graphs import build_chat_graph
from genie_chat.core.chat.models import Chat, ChatMessage, ChatRole, ChatTurn
from genie_chat.core.chat.nodes import ResponseNode
from genie_chat.core.search import WebSearchService
from genie_chat.shared.auth import AuthSession
from genie_chat.shared.chat import ChatTurnService, InMemoryChatStore
from genie_chat.shared.exceptions import BaseAppException
from genie_chat.shared.logging import create_default_logger
from genie_chat.shared.runtime import FixedWindowRateLimiter

SESSION = AuthSession(user_id="user-1")


def _turn(text: str = "hello", chat_id: str = "chat-1", model_id: str = "chat-model") -> ChatTurn:
    return ChatTurn(
        chat_id=chat_id,
        messages=[ChatMessage(role=ChatRole.USER, content=text)],
        selected_model_id=model_id,
    )


def _service(
    store: InMemoryChatStore,
    graph: Any = None,
    title_generator: CountingTitleGenerator | None = None,
    model_validator: Any = None,
) -> ChatTurnService:
    return ChatTurnService(
        store=store,
        graph=graph or ScriptedGraph(reply_events("Hi there")),
        title_generator=title_generator or CountingTitleGenerator(),
        model_validator=model_validator,
    )


async def _drain(service: ChatTurnService, prepared) -> list[dict[str, Any]]:
    return [event async for event in service.astream(prepared)]


@pytest.mark.asyncio
async def test_prepare_turn_without_session_writes_nothing() -> None:
    store = InMemoryChatStore()
    titles = CountingTitleGenerator()
    service = _service(store, title_generator=titles)

    with pytest.raises(BaseAppException) as exc_info:
        await service.prepare_turn(_turn(), None)

    assert exc_info.value.detail.code == ChatErrorCode.UNAUTHORIZED
    assert exc_info.value.message == "Unauthorized"
    assert store.get_chat("chat-1") is None
    assert store.list_messages("chat-1") == []
    assert titles.calls == 0


@pytest.mark.asyncio
async def test_prepare_turn_requires_user_message() -> None:
    turn = ChatTurn(chat_id="chat-1", messages=[ChatMessage(role=ChatRole.ASSISTANT, content="hi")])

    with pytest.raises(BaseAppException) as exc_info:
        await _service(InMemoryChatStore()).prepare_turn(turn, SESSION)

    assert exc_info.value.detail.code == ChatErrorCode.USER_MESSAGE_MISSING
    assert exc_info.value.message == "No user message found"


@pytest.mark.asyncio
async def test_prepare_turn_rejects_unknown_model_before_writing() -> None:
    store = InMemoryChatStore()
    service = _service(store, model_validator=lambda model_id: model_id == "chat-model")

    with pytest.raises(BaseAppException) as exc_info:
        await service.prepare_turn(_turn(model_id="gpt-unknown"), SESSION)

    assert exc_info.value.detail.code == ChatErrorCode.MODEL_UNKNOWN
    assert store.get_chat("chat-1") is None


@pytest.mark.asyncio
async def test_prepare_turn_creates_chat_with_single_title_call() -> None:
    store = InMemoryChatStore()
    titles = CountingTitleGenerator("Greetings")
    service = _service(store, title_generator=titles)

    first = await service.prepare_turn(_turn("hello"), SESSION)
    second = await service.prepare_turn(_turn("again"), SESSION)

    assert titles.calls == 1
    assert first.is_new_chat is True
    assert second.is_new_chat is False
    chat = store.get_chat("chat-1")
    assert chat is not None
    assert chat.title == "Greetings"
    assert chat.user_id == "user-1"
    stored = store.list_messages("chat-1")
    assert [message.text_content() for message in stored] == ["hello", "again"]
    assert all(message.chat_id == "chat-1" for message in stored)


@pytest.mark.asyncio
async def test_prepare_turn_on_foreign_chat_is_unauthorized() -> None:
    store = InMemoryChatStore()
    store.save_chat(Chat(id="chat-1", user_id="owner", title="Private"))
    titles = CountingTitleGenerator()

    with pytest.raises(BaseAppException) as exc_info:
        await _service(store, title_generator=titles).prepare_turn(_turn(), SESSION)

    assert exc_info.value.detail.code == ChatErrorCode.UNAUTHORIZED
    assert store.list_messages("chat-1") == []
    assert titles.calls == 0


@pytest.mark.asyncio
async def test_prepare_turn_stores_search_query_without_prefix() -> None:
    store = InMemoryChatStore()
    service = _service(store)

    prepared = await service.prepare_turn(_turn("/web latest python release"), SESSION)

    assert prepared.search_query == "latest python release"
    assert prepared.user_message.text_content() == "latest python release"
    assert prepared.messages[-1] is prepared.user_message
    assert store.list_messages("chat-1")[0].text_content() == "latest python release"


@pytest.mark.asyncio
async def test_astream_forwards_events_and_persists_assistant_message() -> None:
    store = InMemoryChatStore()
    graph = ScriptedGraph(reply_events("Hi there", message_id="ai-1"))
    service = _service(store, graph=graph)
    prepared = await service.prepare_turn(_turn("/web weather"), SESSION)

    events = await _drain(service, prepared)

    assert [event["type"] for event in events] == ["token", "token", "done"]
    assert events[-1] == {"type": "done", "message_id": "ai-1", "data": "Hi there"}
    assert graph.inputs[0]["search_query"] == "weather"
    assert graph.inputs[0]["selected_model_id"] == "chat-model"
    stored = store.list_messages("chat-1")
    assert [message.role for message in stored] == [ChatRole.USER, ChatRole.ASSISTANT]
    assert stored[-1].id == "ai-1"
    assert stored[-1].text_content() == "Hi there"


@pytest.mark.asyncio
async def test_astream_completes_even_if_assistant_persistence_fails() -> None:
    """응답 메시지가 없어 저장에 실패해도 done 이벤트는 보내야 한다."""

    store = InMemoryChatStore()
    events_without_messages = [{"node": "response", "event": "token", "data": "partial"}]
    service = _service(store, graph=ScriptedGraph(events_without_messages))
    prepared = await service.prepare_turn(_turn(), SESSION)

    events = await _drain(service, prepared)

    assert events[-1] == {"type": "done", "message_id": None, "data": "partial"}
    assert [message.role for message in store.list_messages("chat-1")] == [ChatRole.USER]


@pytest.mark.asyncio
async def test_service_log_history_stays_bounded_across_turns() -> None:
    """턴이 계속 반복되어도 서비스 로거 보관 건수는 상한을 넘지 않아야 한다."""

    logger = create_default_logger("ChatTurnService", max_records=20)
    service = ChatTurnService(
        store=InMemoryChatStore(),
        graph=ScriptedGraph(reply_events("Hi there")),
        title_generator=CountingTitleGenerator(),
        logger=logger,
    )

    for index in range(50):
        prepared = await service.prepare_turn(_turn(f"hello {index}", chat_id=f"chat-{index}"), SESSION)
        await _drain(service, prepared)

    records = logger.repository.list()
    assert len(records) == 20
    assert records[-1].message.startswith("chat.persist.saved: chat_id=chat-49")


@pytest.mark.asyncio
async def test_hello_turn_through_real_graph() -> None:
    store = InMemoryChatStore()
    registry = build_registry(ScriptedChatModel(["Hi there"]))
    search_service = WebSearchService(
        client=StaticSearchClient(),
        rate_limiter=FixedWindowRateLimiter(max_queries=1, window_seconds=60),
    )
    graph = build_chat_graph(response_node=ResponseNode(registry=registry), search_service=search_service)
    service = _service(store, graph=graph)
    prepared = await service.prepare_turn(_turn("hello"), SESSION)

    events = await _drain(service, prepared)

    assert "".join(event["data"] for event in events if event["type"] == "token") == "Hi there"
    done = events[-1]
    assert done["type"] == "done"
    assert done["data"] == "Hi there"
    assistant = store.list_messages("chat-1")[-1]
    assert assistant.id == done["message_id"]
    assert assistant.text_content() == "Hi there"


def test_delete_chat_checks_owner_and_existence() -> None:
    store = InMemoryChatStore()
    store.save_chat(Chat(id="chat-1", user_id="user-1", title="Mine"))
    store.save_chat(Chat(id="chat-2", user_id="owner", title="Theirs"))
    store.save_messages([ChatMessage(chat_id="chat-1", role=ChatRole.USER, content="hi")])
    service = _service(store)

    with pytest.raises(BaseAppException) as foreign:
        service.delete_chat("chat-2", SESSION)
    with pytest.raises(BaseAppException) as missing:
        service.delete_chat("nope", SESSION)
    deleted = service.delete_chat("chat-1", SESSION)

    assert foreign.value.detail.code == ChatErrorCode.UNAUTHORIZED
    assert missing.value.detail.code == ChatErrorCode.NOT_FOUND
    assert deleted.id == "chat-1"
    assert store.get_chat("chat-1") is None
    assert store.list_messages("chat-1") == []
    assert store.get_chat("chat-2") is not None


def test_list_chats_and_messages_are_owner_scoped() -> None:
    store = InMemoryChatStore()
    store.save_chat(Chat(id="chat-1", user_id="user-1", title="Mine"))
    store.save_chat(Chat(id="chat-2", user_id="owner", title="Theirs"))
    service = _service(store)

    assert [chat.id for chat in service.list_chats(SESSION, limit=10, offset=0)] == ["chat-1"]
    assert service.list_messages("chat-1", SESSION) == []
    with pytest.raises(BaseAppException):
        service.list_messages("chat-2", SESSION)
    with pytest.raises(BaseAppException):
        service.list_chats(None, limit=10, offset=0)
