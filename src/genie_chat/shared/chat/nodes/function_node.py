"""
목적: 일반 함수를 LangGraph 노드로 감싸는 어댑터를 제공한다.
설명: state를 얕은 Mapping으로 맞춘 뒤 함수를 실행하고, 반환 Mapping을 state 업데이트로 돌려준다. 함수 오류는 CHAT_NODE_FAILED로 감싼다.
디자인 패턴: 함수 주입(Function Injection) + 어댑터
참조: src/genie_chat/core/chat/nodes/prompt_node.py, src/genie_chat/core/chat/nodes/search_context_node.py
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import fields, is_dataclass
from typing import Any, Optional

from langchain_core.runnables.config import RunnableConfig
from pydantic import BaseModel

from genie_chat.core.chat.const import ChatErrorCode
from genie_chat.shared.exceptions import BaseAppException, ExceptionDetail
from genie_chat.shared.logging import Logger, create_default_logger

NodeFunction = Callable[[Mapping[str, Any]], Mapping[str, Any] | Awaitable[Mapping[str, Any]]]


def coerce_state_mapping(state: object) -> dict[str, Any]:
    """TypedDict/dataclass/BaseModel state를 얕은 dict로 변환한다. 값 객체는 그대로 둔다."""

    if isinstance(state, Mapping):
        return {str(key): value for key, value in state.items()}
    if isinstance(state, BaseModel):
        return {name: getattr(state, name) for name in type(state).model_fields}
    if is_dataclass(state) and not isinstance(state, type):
        return {item.name: getattr(state, item.name) for item in fields(state)}
    detail = ExceptionDetail(code=ChatErrorCode.NODE_INPUT_INVALID, cause=f"state_type={type(state).__name__}")
    raise BaseAppException("노드 입력 state 타입이 올바르지 않습니다.", detail)


class FunctionNode:
    """주입 함수 실행 노드.

    Args:
        fn: state Mapping을 받아 업데이트 Mapping(또는 그 awaitable)을 돌려주는 함수.
        node_name: 그래프에 등록할 노드 이름. 로그에도 사용한다.
    """

    def __init__(self, *, fn: NodeFunction, node_name: str, logger: Logger | None = None) -> None:
        name = node_name.strip()
        if not callable(fn) or not name:
            detail = ExceptionDetail(code=ChatErrorCode.NODE_FAILED, cause=f"node_name={node_name!r}, callable={callable(fn)}")
            raise BaseAppException("노드 설정이 올바르지 않습니다.", detail)
        self._fn = fn
        self._node_name = name
        self._logger = logger or create_default_logger(f"FunctionNode:{name}")

    @property
    def node_name(self) -> str:
        return self._node_name

    def run(self, state: object, config: Optional[RunnableConfig] = None) -> dict[str, Any]:
        """동기 진입점. awaitable을 돌려주는 함수는 arun으로 등록해야 한다."""

        result = self._call(state)
        if inspect.isawaitable(result):
            detail = ExceptionDetail(
                code=ChatErrorCode.NODE_FAILED,
                cause=f"node={self._node_name} returned awaitable",
                hint="비동기 함수는 arun으로 등록한다.",
            )
            raise BaseAppException("비동기 함수는 arun으로 실행해야 합니다.", detail)
        return self._as_update(result)

    async def arun(self, state: object, config: Optional[RunnableConfig] = None) -> dict[str, Any]:
        result = self._call(state)
        if inspect.isawaitable(result):
            try:
                result = await result
            except BaseAppException:
                raise
            except Exception as error:  # noqa: BLE001 - 노드 함수 오류를 도메인 예외로 감싼다.
                raise self._failed(error) from error
        return self._as_update(result)

    def _call(self, state: object) -> Any:
        self._logger.debug(f"chat.node.run: node={self._node_name}")
        try:
            return self._fn(coerce_state_mapping(state))
        except BaseAppException:
            raise
        except Exception as error:  # noqa: BLE001 - 노드 함수 오류를 도메인 예외로 감싼다.
            raise self._failed(error) from error

    def _failed(self, error: Exception) -> BaseAppException:
        self._logger.error(f"chat.node.failed: node={self._node_name}, error={error!r}")
        detail = ExceptionDetail(
            code=ChatErrorCode.NODE_FAILED,
            cause=f"node={self._node_name}",
            metadata={"error": repr(error)},
        )
        return BaseAppException("그래프 노드 실행에 실패했습니다.", detail, error)

    def _as_update(self, result: object) -> dict[str, Any]:
        if isinstance(result, Mapping):
            return {str(key): value for key, value in result.items()}
        detail = ExceptionDetail(code=ChatErrorCode.NODE_FAILED, cause=f"output_type={type(result).__name__}")
        raise BaseAppException("노드 출력은 Mapping이어야 합니다.", detail)


__all__ = ["FunctionNode", "NodeFunction", "coerce_state_mapping"]
