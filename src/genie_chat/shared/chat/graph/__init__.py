"""Chat 그래프 공통 실행 구현체."""

from genie_chat.shared.chat.graph.base_chat_graph import BaseChatGraph

__all__ = ["BaseChatGraph"]
