"""
목적: 채팅 모델 호출에 로깅과 예외 변환을 덧씌운 래퍼를 제공한다.
설명: 실제 OpenAI 모델(또는 테스트용 가짜 모델)을 감싸 호출 시작/완료/실패를 기록하고, 공급자 오류를 LLM_* 코드의 BaseAppException으로 바꾼다.
디자인 패턴: 프록시
참조: src/genie_chat/integrations/llm/registry.py, src/genie_chat/core/chat/nodes/response_node.py
"""

from __future__ import annotations

import time
from typing import Any, AsyncIterator, Callable, Optional, Sequence

from langchain_core.callbacks import AsyncCallbackManagerForLLMRun, CallbackManagerForLLMRun
from langchain_core.language_models import BaseChatModel
from langchain_core.messages import AIMessageChunk, BaseMessage, BaseMessageChunk
from langchain_core.outputs import ChatGenerationChunk, ChatResult
from langchain_core.utils.function_calling import convert_to_openai_tool
from pydantic import ConfigDict, PrivateAttr

from genie_chat.shared.exceptions import BaseAppException, ExceptionDetail
from genie_chat.shared.logging import LogContext, LogLevel, Logger, create_default_logger

# action -> (에러 코드, 사용자 메시지)
_FAILURES = {
    "invoke": ("LLM_INVOKE_ERROR", "LLM 호출에 실패했습니다."),
    "ainvoke": ("LLM_AINVOKE_ERROR", "LLM 비동기 호출에 실패했습니다."),
    "astream": ("LLM_ASTREAM_ERROR", "LLM 비동기 스트리밍 호출에 실패했습니다."),
}


class LLMClient(BaseChatModel):
    """로깅 프록시 채팅 모델.

    bind_tools는 래퍼 자신에 바인딩하므로 도구 호출 턴도 같은 로그 경로를 지난다.
    with_structured_output은 내부 모델에 그대로 위임한다.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _model: BaseChatModel = PrivateAttr()
    _logger: Logger = PrivateAttr()
    _name: str = PrivateAttr()
    _context_provider: Optional[Callable[[], LogContext]] = PrivateAttr(default=None)

    def __init__(
        self,
        model: BaseChatModel,
        name: str = "llm-client",
        logger: Optional[Logger] = None,
        context_provider: Optional[Callable[[], LogContext]] = None,
    ) -> None:
        super().__init__()
        self._model = model
        self._name = name
        self._logger = logger or create_default_logger(name)
        self._context_provider = context_provider

    @property
    def model_name(self) -> str:
        return self._name

    @property
    def _llm_type(self) -> str:
        return f"logged-{getattr(self._model, '_llm_type', None) or 'chat-model'}"

    def bind_tools(self, tools: Sequence[Any], *, tool_choice: str | None = None, **kwargs: Any) -> Any:
        if tool_choice is not None:
            kwargs["tool_choice"] = tool_choice
        return self.bind(tools=[convert_to_openai_tool(tool) for tool in tools], **kwargs)

    def with_structured_output(self, schema: dict[str, Any] | type, **kwargs: Any) -> Any:
        return self._model.with_structured_output(schema, **kwargs)

    def _generate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: CallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        started = self._started("invoke", messages, kwargs)
        try:
            result = self._model._generate(messages, stop=stop, run_manager=run_manager, **kwargs)
        except Exception as error:  # noqa: BLE001 - 공급자 오류를 도메인 예외로 바꾼다.
            raise self._failed("invoke", started, error) from error
        self._finished("invoke", started)
        return result

    async def _agenerate(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: AsyncCallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> ChatResult:
        started = self._started("ainvoke", messages, kwargs)
        try:
            result = await self._model._agenerate(messages, stop=stop, run_manager=run_manager, **kwargs)
        except Exception as error:  # noqa: BLE001 - 공급자 오류를 도메인 예외로 바꾼다.
            raise self._failed("ainvoke", started, error) from error
        self._finished("ainvoke", started)
        return result

    async def _astream(
        self,
        messages: list[BaseMessage],
        stop: list[str] | None = None,
        run_manager: AsyncCallbackManagerForLLMRun | None = None,
        **kwargs: Any,
    ) -> AsyncIterator[ChatGenerationChunk]:
        started = self._started("astream", messages, kwargs)
        try:
            async for chunk in self._model._astream(messages, stop=stop, run_manager=run_manager, **kwargs):
                if not isinstance(chunk, ChatGenerationChunk):
                    chunk = ChatGenerationChunk(message=_as_message_chunk(chunk))
                yield chunk
        except Exception as error:  # noqa: BLE001 - 공급자 오류를 도메인 예외로 바꾼다.
            raise self._failed("astream", started, error) from error
        self._finished("astream", started)

    def _started(self, action: str, messages: Sequence[BaseMessage], kwargs: dict) -> float:
        self._emit(
            LogLevel.INFO,
            f"llm.{action}.start: model={self._name}",
            action,
            message_count=len(messages),
            tool_count=len(kwargs.get("tools") or []),
        )
        return time.monotonic()

    def _finished(self, action: str, started: float) -> None:
        self._emit(LogLevel.INFO, f"llm.{action}.done: model={self._name}", action, duration_ms=_elapsed_ms(started))

    def _failed(self, action: str, started: float, error: Exception) -> BaseAppException:
        self._emit(
            LogLevel.ERROR,
            f"llm.{action}.failed: model={self._name}, error={error}",
            action,
            duration_ms=_elapsed_ms(started),
            error_type=type(error).__name__,
        )
        if isinstance(error, BaseAppException):
            return error
        code, message = _FAILURES[action]
        return BaseAppException(message, ExceptionDetail(code=code, cause=str(error)), error)

    def _emit(self, level: LogLevel, message: str, action: str, **extra: Any) -> None:
        context = self._context_provider() if self._context_provider is not None else None
        metadata = {"action": action, "model_name": self._name, **extra}
        self._logger.log(level, message, context=context, metadata=metadata)


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)


def _as_message_chunk(chunk: Any) -> BaseMessageChunk:
    if isinstance(chunk, BaseMessageChunk):
        return chunk
    if isinstance(chunk, BaseMessage):
        return AIMessageChunk(content=chunk.content, id=chunk.id)
    return AIMessageChunk(content=str(chunk))
