"""
목적: 채팅 그래프 실행 래퍼를 제공한다.
설명: 컴파일된 StateGraph를 custom/updates 모드로 스트리밍하고, 노드별 노출 정책에 맞는 이벤트만 (node, event, data) 형태로 내보낸다.
디자인 패턴: 합성(Builder 주입)
참조: src/genie_chat/core/chat/graphs/chat_graph.py
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator, Mapping, Sequence
from typing import Any

from pydantic import BaseModel

from genie_chat.core.chat.const import ChatErrorCode
from genie_chat.shared.chat.interface import StreamNodeConfig
from genie_chat.shared.exceptions import BaseAppException, ExceptionDetail
from genie_chat.shared.logging import Logger, create_default_logger

_STREAM_MODES = ["custom", "updates"]


def _clean(value: object) -> str:
    return str(value or "").strip()


class BaseChatGraph:
    """정책 필터를 갖춘 채팅 그래프 실행기.

    Args:
        builder: 컴파일 가능한 LangGraph StateGraph.
        stream_node: 노드 이름 -> 노출할 이벤트 이름(들). 등록되지 않은 조합은 버린다.
        input_model: 그래프 입력 검증 모델. 검증 후 필드 객체를 그대로 넘긴다.
    """

    def __init__(
        self,
        *,
        builder: Any,
        checkpointer: object | None = None,
        stream_node: StreamNodeConfig | None = None,
        logger: Logger | None = None,
        input_model: type[BaseModel] | None = None,
    ) -> None:
        self._builder = builder
        self._input_model = input_model
        self._logger = logger or create_default_logger("BaseChatGraph")
        self._policy: dict[str, frozenset[str]] = {}
        self.set_stream_node(stream_node or {})
        self._compiled: Any = self.compile(checkpointer=checkpointer)

    def set_stream_node(self, stream_node: StreamNodeConfig) -> None:
        """노출 정책을 교체한다."""

        policy: dict[str, frozenset[str]] = {}
        for node, events in stream_node.items():
            node_name = _clean(node)
            if node_name:
                policy[node_name] = self._event_names(node_name, events)
        self._policy = policy

    def compile(self, checkpointer: object | None = None) -> Any:
        self._compiled = self._builder.compile(checkpointer=checkpointer)
        return self._compiled

    async def astream_events(
        self,
        graph_input: Mapping[str, Any],
        config: dict[str, Any] | None = None,
    ) -> AsyncIterator[dict[str, Any]]:
        """허용된 그래프 이벤트를 순서대로 내보낸다."""

        thread_id = _clean(((config or {}).get("configurable") or {}).get("thread_id"))
        self._logger.debug(f"chat.graph.start: thread_id={thread_id}")
        emitted = 0
        async for mode, payload in self._compiled.astream(
            self._validated(graph_input),
            config=config,
            stream_mode=_STREAM_MODES,
        ):
            for event in self._expand(mode, payload):
                if event["event"] in self._policy.get(event["node"], frozenset()):
                    emitted += 1
                    yield event
        self._logger.debug(f"chat.graph.done: thread_id={thread_id}, events={emitted}")

    def _expand(self, mode: str, payload: Any) -> Iterator[dict[str, Any]]:
        # custom: 노드가 writer로 직접 보낸 단건, updates: 노드 반환 상태의 키별 분해
        if not isinstance(payload, dict):
            return
        if mode == "custom":
            node, event = _clean(payload.get("node")), _clean(payload.get("event"))
            if node and event:
                yield {"node": node, "event": event, "data": payload.get("data")}
        elif mode == "updates":
            for node_name, delta in payload.items():
                if isinstance(delta, dict):
                    for key, value in delta.items():
                        yield {"node": str(node_name), "event": str(key), "data": value}

    def _validated(self, graph_input: Mapping[str, Any]) -> dict[str, Any]:
        if self._input_model is None:
            return dict(graph_input)
        model = self._input_model.model_validate(dict(graph_input))
        return {name: getattr(model, name) for name in type(model).model_fields}

    @staticmethod
    def _event_names(node_name: str, events: object) -> frozenset[str]:
        if isinstance(events, str):
            candidates: Sequence[object] = [events]
        elif isinstance(events, Sequence):
            candidates = events
        else:
            detail = ExceptionDetail(
                code=ChatErrorCode.STREAM_NODE_INVALID,
                cause=f"node={node_name}, value_type={type(events).__name__}",
            )
            raise BaseAppException("stream_node 설정 형식이 올바르지 않습니다.", detail)
        return frozenset(name for name in map(_clean, candidates) if name)
