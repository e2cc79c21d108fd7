"""
목적: 응답 단계 메시지를 저장용 assistant 메시지 1건으로 병합한다.
설명: 여러 도구 호출 단계의 텍스트와 도구 실행 결과를 순서대로 파트로 합치고, 마지막 assistant 메시지 id를 사용한다.
디자인 패턴: 순수 함수
참조: src/genie_chat/shared/chat/services/chat_service.py
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from langchain_core.messages import AIMessage, BaseMessage, ToolMessage

from genie_chat.core.chat.const import ChatErrorCode
from genie_chat.core.chat.models import ChatMessage, ChatRole, MessagePart
from genie_chat.core.chat.utils.message_mapper import content_to_text
from genie_chat.shared.exceptions import BaseAppException, ExceptionDetail


def reconcile_assistant_message(chat_id: str, response_messages: Sequence[BaseMessage]) -> ChatMessage:
    """응답 메시지 목록을 assistant 메시지 1건으로 병합한다.

    Raises:
        BaseAppException: assistant 메시지가 하나도 없는 경우.
    """

    assistant_messages = [item for item in response_messages if isinstance(item, AIMessage)]
    if not assistant_messages or not assistant_messages[-1].id:
        detail = ExceptionDetail(code=ChatErrorCode.STORE_ERROR, cause=f"chat_id={chat_id}")
        raise BaseAppException("No assistant message found!", detail)

    tool_results = {
        item.tool_call_id: _parse_tool_content(item.content)
        for item in response_messages
        if isinstance(item, ToolMessage)
    }
    parts: list[MessagePart] = []
    for message in assistant_messages:
        text = content_to_text(message.content)
        if text:
            parts.append(MessagePart(type="text", text=text))
        for call in message.tool_calls:
            call_id = call.get("id") or ""
            invocation: dict[str, Any] = {
                "state": "result" if call_id in tool_results else "call",
                "toolCallId": call_id,
                "toolName": call.get("name"),
                "args": call.get("args") or {},
            }
            if call_id in tool_results:
                invocation["result"] = tool_results[call_id]
            parts.append(MessagePart(type="tool-invocation", toolInvocation=invocation))

    return ChatMessage(
        id=assistant_messages[-1].id,
        chat_id=chat_id,
        role=ChatRole.ASSISTANT,
        parts=parts,
    )


def _parse_tool_content(content: Any) -> Any:
    text = content_to_text(content)
    try:
        return json.loads(text)
    except ValueError:
        return text
