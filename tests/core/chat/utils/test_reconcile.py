"""
목적: 응답 메시지 병합과 이력 변환 규칙을 검증한다.
설명: 도구 호출 단계가 섞인 응답이 assistant 메시지 1건으로 합쳐지는지, 이력이 텍스트 파트만 전달되는지 확인한다.
디자인 패턴: 순수 함수 단위 테스트
참조: src/genie_chat/core/chat/utils/reconcile.py, src/genie_chat/core/chat/utils/message_mapper.py
"""

from __future__ import annotations

import pytest
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage, ToolMessage

from genie_chat.core.chat.models import ChatMessage, ChatRole, MessagePart
from genie_chat.core.chat.utils import content_to_text, reconcile_assistant_message, to_langchain_messages
from genie_chat.shared.exceptions import BaseAppException


def test_reconcile_merges_steps_in_order_with_last_message_id() -> None:
    response = [
        AIMessage(
            id="ai-1",
            content="Checking the weather.",
            tool_calls=[{"name": "getWeather", "args": {"latitude": 37.5, "longitude": 127.0}, "id": "call-1"}],
        ),
        ToolMessage(content='{"temperature": 21}', tool_call_id="call-1"),
        AIMessage(id="ai-2", content="It is 21 degrees."),
    ]

    message = reconcile_assistant_message("chat-1", response)

    assert message.id == "ai-2"
    assert message.chat_id == "chat-1"
    assert message.role == ChatRole.ASSISTANT
    dumped = [part.model_dump(exclude_none=True) for part in message.parts]
    assert dumped[0] == {"type": "text", "text": "Checking the weather."}
    assert dumped[1]["type"] == "tool-invocation"
    assert dumped[1]["toolInvocation"] == {
        "state": "result",
        "toolCallId": "call-1",
        "toolName": "getWeather",
        "args": {"latitude": 37.5, "longitude": 127.0},
        "result": {"temperature": 21},
    }
    assert dumped[2] == {"type": "text", "text": "It is 21 degrees."}


def test_reconcile_keeps_plain_tool_output_as_text() -> None:
    response = [
        AIMessage(id="ai-1", content="", tool_calls=[{"name": "webSearch", "args": {"query": "x"}, "id": "c"}]),
        ToolMessage(content="not json", tool_call_id="c"),
        AIMessage(id="ai-2", content="done"),
    ]

    message = reconcile_assistant_message("chat-1", response)

    assert message.parts[0].model_dump()["toolInvocation"]["result"] == "not json"
    assert message.text_content() == "done"


def test_reconcile_without_assistant_message_raises() -> None:
    with pytest.raises(BaseAppException):
        reconcile_assistant_message("chat-1", [HumanMessage(content="hello")])


def test_to_langchain_messages_uses_text_parts_only() -> None:
    history = [
        ChatMessage(role=ChatRole.SYSTEM, content="be nice"),
        ChatMessage(role=ChatRole.USER, content="hello"),
        ChatMessage(
            role=ChatRole.ASSISTANT,
            parts=[
                MessagePart(type="text", text="Hi "),
                MessagePart(type="tool-invocation", toolInvocation={"state": "result"}),
                MessagePart(type="text", text="there"),
            ],
        ),
        ChatMessage(role=ChatRole.ASSISTANT, parts=[MessagePart(type="tool-invocation")]),
    ]

    converted = to_langchain_messages(history)

    assert [type(item) for item in converted] == [SystemMessage, HumanMessage, AIMessage]
    assert converted[2].content == "Hi there"


def test_content_to_text_normalizes_block_lists() -> None:
    content = ["a", {"type": "text", "text": "b"}, {"type": "image_url", "image_url": "x"}]

    assert content_to_text(content) == "ab"
    assert content_to_text(None) == ""
