"""
목적: 도메인 메시지와 LangChain 메시지 간 변환을 제공한다.
설명: 이력은 텍스트 파트만 모델 입력으로 사용하며, 메시지 콘텐츠의 다양한 형태를 문자열로 정규화한다.
디자인 패턴: 매퍼 패턴
참조: src/genie_chat/core/chat/nodes/response_node.py, src/genie_chat/core/chat/utils/reconcile.py
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage

from genie_chat.core.chat.models import ChatMessage, ChatRole


def to_langchain_messages(messages: Sequence[ChatMessage]) -> list[BaseMessage]:
    """도메인 메시지 목록을 LangChain 메시지 목록으로 변환한다. 텍스트가 없는 메시지는 건너뛴다."""

    converted: list[BaseMessage] = []
    for message in messages:
        text = message.text_content()
        if not text:
            continue
        if message.role == ChatRole.USER:
            converted.append(HumanMessage(content=text))
        elif message.role == ChatRole.ASSISTANT:
            converted.append(AIMessage(content=text))
        else:
            converted.append(SystemMessage(content=text))
    return converted


def content_to_text(content: Any) -> str:
    """LangChain 메시지 content를 문자열로 정규화한다."""

    if isinstance(content, str):
        return content
    if isinstance(content, list):
        chunks: list[str] = []
        for item in content:
            if isinstance(item, str):
                chunks.append(item)
            elif isinstance(item, dict):
                if item.get("type", "text") == "text" and item.get("text") is not None:
                    chunks.append(str(item["text"]))
        return "".join(chunks)
    if content is None:
        return ""
    return str(content)
