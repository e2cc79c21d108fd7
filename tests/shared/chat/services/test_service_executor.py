"""
목적: ChatStreamExecutor의 SSE 프레임 순서와 오류 변환을 검증한다.
설명: start -> token* -> done 순서, 스트리밍 중 실패 시 error 프레임 1건으로 끝나는지 확인한다.
디자인 패턴: 실행 코디네이터 단위 테스트
참조: src/genie_chat/shared/chat/services/service_executor.py
"""

from __future__ import annotations

import json

import pytest

from _chat_fakes import CountingTitleGenerator, ScriptedGraph, reply_events
from genie_chat.core.chat.models import ChatMessage, ChatRole, ChatTurn
from genie_chat.shared.auth import AuthSession
from genie_chat.shared.chat import ChatStreamExecutor, ChatTurnService, InMemoryChatStore


def _extract_payload(raw: str) -> dict:
    for line in str(raw).splitlines():
        if line.startswith("data: "):
            return json.loads(line[len("data: ") :].strip())
    raise AssertionError(f"SSE payload가 없습니다: {raw!r}")


async def _run(graph: ScriptedGraph) -> list[dict]:
    service = ChatTurnService(
        store=InMemoryChatStore(),
        graph=graph,
        title_generator=CountingTitleGenerator(),
    )
    turn = ChatTurn(chat_id="chat-1", messages=[ChatMessage(role=ChatRole.USER, content="hello")])
    prepared = await service.prepare_turn(turn, AuthSession(user_id="user-1"))
    executor = ChatStreamExecutor(service=service)
    return [_extract_payload(frame) async for frame in executor.stream_events(prepared)]


@pytest.mark.asyncio
async def test_stream_events_success_order() -> None:
    """성공 스트림에서 start/token*/done 순서가 유지되는지 검증한다."""

    payloads = await _run(ScriptedGraph(reply_events("Hi there", message_id="ai-9")))

    assert [item["type"] for item in payloads] == ["start", "token", "token", "done"]
    assert payloads[0]["status"] == "RUNNING"
    assert [item["content"] for item in payloads[1:3]] == ["Hi ", "there"]
    assert payloads[-1]["status"] == "COMPLETED"
    assert payloads[-1]["content"] == "Hi there"
    assert payloads[-1]["message_id"] == "ai-9"
    assert all(item["chat_id"] == "chat-1" for item in payloads)


@pytest.mark.asyncio
async def test_stream_events_forwards_data_events() -> None:
    events = [
        {"node": "response", "event": "data", "data": {"type": "reasoning", "content": "searching"}},
        *reply_events("ok"),
    ]

    payloads = await _run(ScriptedGraph(events))

    assert payloads[1]["type"] == "data"
    assert payloads[1]["data"] == {"type": "reasoning", "content": "searching"}


@pytest.mark.asyncio
async def test_stream_events_error_emits_single_error_frame() -> None:
    """스트리밍 중 예외는 error 프레임 1건으로 끝나야 한다."""

    graph = ScriptedGraph([{"node": "response", "event": "token", "data": "Hi "}], error=RuntimeError("boom"))

    payloads = await _run(graph)

    assert [item["type"] for item in payloads] == ["start", "token", "error"]
    assert payloads[-1]["status"] == "FAILED"
    assert payloads[-1]["error_message"] == "Oops, an error occurred!"


@pytest.mark.asyncio
async def test_closed_stream_skips_assistant_persistence() -> None:
    """소비자가 스트림을 중간에 닫으면 assistant 메시지는 저장되지 않아야 한다."""

    store = InMemoryChatStore()
    service = ChatTurnService(
        store=store,
        graph=ScriptedGraph(reply_events("Hi there again")),
        title_generator=CountingTitleGenerator(),
    )
    turn = ChatTurn(chat_id="chat-1", messages=[ChatMessage(role=ChatRole.USER, content="hello")])
    prepared = await service.prepare_turn(turn, AuthSession(user_id="user-1"))
    stream = ChatStreamExecutor(service=service).stream_events(prepared)

    first = _extract_payload(await stream.__anext__())
    second = _extract_payload(await stream.__anext__())
    await stream.aclose()

    assert [first["type"], second["type"]] == ["start", "token"]
    assert [message.role for message in store.list_messages("chat-1")] == [ChatRole.USER]
