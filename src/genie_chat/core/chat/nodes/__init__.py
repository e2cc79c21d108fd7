"""
목적: Chat 노드 공개 API를 제공한다.
설명: 프롬프트/사전 검색/응답 노드를 노출한다.
디자인 패턴: 파사드
참조: src/genie_chat/core/chat/graphs/chat_graph.py
"""

from genie_chat.core.chat.nodes.prompt_node import prompt_node
from genie_chat.core.chat.nodes.response_node import ResponseNode
from genie_chat.core.chat.nodes.search_context_node import build_search_context_node

__all__ = ["ResponseNode", "build_search_context_node", "prompt_node"]
