"""
목적: 도구를 쓰지 않는 모델을 위한 사전 웹 검색 노드를 제공한다.
설명: 검색 트리거 턴에서 선택 모델이 도구를 받지 못하면 검색을 먼저 수행하고 결과를 시스템 프롬프트에 덧붙인다.
디자인 패턴: 함수 주입 노드
참조: src/genie_chat/core/search/service.py, src/genie_chat/core/chat/graphs/chat_graph.py
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from langgraph.config import get_stream_writer

from genie_chat.core.chat.prompts import render_search_context
from genie_chat.core.search import WebSearchService, reasoning_results_message, reasoning_search_message
from genie_chat.shared.chat.nodes import FunctionNode

NODE_NAME = "search_context"


def build_search_context_node(search_service: WebSearchService) -> FunctionNode:
    """검색 서비스를 주입한 사전 검색 노드를 생성한다."""

    async def _search(state: Mapping[str, Any]) -> dict[str, Any]:
        query = str(state.get("search_query") or "")
        writer = get_stream_writer()
        writer({"node": NODE_NAME, "event": "data", "data": {"type": "reasoning", "content": reasoning_search_message()}})
        results = await search_service.search(query)
        writer(
            {
                "node": NODE_NAME,
                "event": "data",
                "data": {"type": "reasoning", "content": reasoning_results_message(len(results), query)},
            }
        )
        system_prompt = str(state.get("system_prompt") or "") + render_search_context(query, results)
        return {
            "system_prompt": system_prompt,
            "search_results": [item.model_dump() for item in results],
        }

    return FunctionNode(fn=_search, node_name=NODE_NAME)
