"""
목적: Chat 그래프를 조립한다.
설명: prompt -> (search_context) -> response 흐름을 StateGraph로 선언하고 스트림 노드 정책과 함께 BaseChatGraph로 감싼다.
디자인 패턴: 빌더 함수 + 합성
참조: src/genie_chat/shared/chat/graph/base_chat_graph.py, src/genie_chat/core/chat/nodes/response_node.py
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from langgraph.graph import END, START, StateGraph
from pydantic import BaseModel, ConfigDict

from genie_chat.core.chat.const import DEFAULT_CHAT_MODEL_ID, model_supports_tools
from genie_chat.core.chat.models import ChatMessage
from genie_chat.core.chat.nodes import ResponseNode, build_search_context_node, prompt_node
from genie_chat.core.chat.state import ChatGraphState
from genie_chat.core.search import WebSearchService
from genie_chat.shared.chat.graph import BaseChatGraph
from genie_chat.shared.chat.interface import StreamNodeConfig
from genie_chat.shared.logging import Logger, create_default_logger


class ChatGraphInput(BaseModel):
    """그래프 실행 입력 모델."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    chat_id: str
    user_id: str
    selected_model_id: str = DEFAULT_CHAT_MODEL_ID
    history: list[ChatMessage]
    search_query: str | None = None


# 외부로 내보낼 노드별 이벤트
STREAM_NODE: StreamNodeConfig = {
    "search_context": ["data"],
    "response": ["token", "data", "tool_call", "tool_result", "response_messages"],
}


def route_after_prompt(state: Mapping[str, Any]) -> str:
    """도구 없는 모델의 검색 턴만 사전 검색 노드로 보낸다."""

    model_id = str(state.get("selected_model_id") or DEFAULT_CHAT_MODEL_ID)
    if state.get("search_query") and not model_supports_tools(model_id):
        return "search_context"
    return "response"


def build_chat_graph(
    *,
    response_node: ResponseNode,
    search_service: WebSearchService,
    logger: Logger | None = None,
) -> BaseChatGraph:
    """Chat 그래프를 조립해 반환한다."""

    builder = StateGraph(ChatGraphState)
    builder.add_node("prompt", prompt_node.run)
    builder.add_node("search_context", build_search_context_node(search_service).arun)
    builder.add_node("response", response_node.arun)

    builder.add_edge(START, "prompt")
    builder.add_conditional_edges(
        "prompt",
        route_after_prompt,
        {
            "search_context": "search_context",
            "response": "response",
        },
    )
    builder.add_edge("search_context", "response")
    builder.add_edge("response", END)

    return BaseChatGraph(
        builder=builder,
        stream_node=STREAM_NODE,
        logger=logger or create_default_logger("ChatGraph"),
        input_model=ChatGraphInput,
    )
