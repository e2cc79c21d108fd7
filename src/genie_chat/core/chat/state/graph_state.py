"""
목적: Chat LangGraph 상태 타입을 정의한다.
설명: 프롬프트 조립, 검색 컨텍스트, 도구 호출 응답 노드가 공유하는 상태 구조를 제공한다.
디자인 패턴: 상태 객체(State Object)
참조: src/genie_chat/core/chat/graphs/chat_graph.py
"""

from __future__ import annotations

from typing import Any, NotRequired, TypedDict

from langchain_core.messages import BaseMessage

from genie_chat.core.chat.models import ChatMessage


class ChatGraphState(TypedDict):
    """LangGraph 대화 상태 타입."""

    chat_id: str
    user_id: str
    selected_model_id: str
    history: list[ChatMessage]
    search_query: str | None
    system_prompt: NotRequired[str]
    search_results: NotRequired[list[dict[str, Any]]]
    assistant_message: NotRequired[str]
    response_messages: NotRequired[list[BaseMessage]]
