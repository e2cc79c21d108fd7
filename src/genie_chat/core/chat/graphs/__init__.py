"""Chat 그래프 조립 모듈."""

from genie_chat.core.chat.graphs.chat_graph import STREAM_NODE, ChatGraphInput, build_chat_graph, route_after_prompt

__all__ = ["ChatGraphInput", "STREAM_NODE", "build_chat_graph", "route_after_prompt"]
