"""
목적: 도구 호출 루프를 포함한 응답 생성 노드를 제공한다.
설명: 선택 모델로 응답을 스트리밍하고, 도구 호출이 있으면 실행 결과를 대화에 붙여 최대 단계 수까지 반복한다.
디자인 패턴: 전략 주입 + 템플릿 메서드
참조: src/genie_chat/core/chat/graphs/chat_graph.py, src/genie_chat/core/chat/tools/factory.py, src/genie_chat/shared/chat/streaming/smooth.py
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable, Mapping
from typing import Any, Optional

from langchain_core.messages import AIMessage, AIMessageChunk, BaseMessage, SystemMessage, ToolMessage
from langchain_core.runnables.config import RunnableConfig
from langchain_core.tools import BaseTool
from langgraph.config import get_stream_writer

from genie_chat.core.chat.const import DEFAULT_CHAT_MODEL_ID, DEFAULT_MAX_TOOL_STEPS, model_supports_tools
from genie_chat.core.chat.models import new_id
from genie_chat.core.chat.tools import ChatToolFactory
from genie_chat.core.chat.utils import content_to_text, to_langchain_messages
from genie_chat.integrations.llm import ChatModelRegistry
from genie_chat.shared.chat.nodes import coerce_state_mapping
from genie_chat.shared.chat.streaming import WordChunker
from genie_chat.shared.logging import Logger, create_default_logger

NODE_NAME = "response"

StreamWriter = Callable[[dict[str, Any]], None]


class ResponseNode:
    """응답 생성 노드.

    Args:
        registry: 모델 식별자별 클라이언트 레지스트리.
        tool_factory: 턴 단위 도구 생성기. None이면 도구 없이 응답한다.
        max_steps: 모델 호출 최대 횟수. 도구 호출이 남아 있어도 이 횟수에서 멈춘다.
        smooth_delay_ms: 단어 단위 토큰 사이 지연(ms). 0이면 지연 없이 보낸다.
    """

    def __init__(
        self,
        *,
        registry: ChatModelRegistry,
        tool_factory: ChatToolFactory | None = None,
        max_steps: int = DEFAULT_MAX_TOOL_STEPS,
        smooth_delay_ms: int = 0,
        logger: Logger | None = None,
    ) -> None:
        self._registry = registry
        self._tool_factory = tool_factory
        self._max_steps = max(1, int(max_steps))
        self._smooth_delay = max(0, int(smooth_delay_ms)) / 1000
        self._logger = logger or create_default_logger(f"ResponseNode:{NODE_NAME}")

    async def arun(self, state: object, config: Optional[RunnableConfig] = None) -> dict[str, Any]:
        """LangGraph 비동기 노드 진입점."""

        del config
        return await self._arun(coerce_state_mapping(state), writer=get_stream_writer())

    async def _arun(self, state: Mapping[str, Any], *, writer: StreamWriter) -> dict[str, Any]:
        model_id = str(state.get("selected_model_id") or DEFAULT_CHAT_MODEL_ID)
        user_id = str(state.get("user_id") or "")
        model = self._registry.get(model_id)

        tools = self._build_tools(model_id, user_id, writer)
        tools_by_name = {tool.name: tool for tool in tools}
        runnable = model.bind_tools(tools) if tools else model

        messages: list[BaseMessage] = [SystemMessage(content=str(state.get("system_prompt") or ""))]
        messages.extend(to_langchain_messages(list(state.get("history") or [])))

        response_messages: list[BaseMessage] = []
        texts: list[str] = []
        for step in range(self._max_steps):
            ai_message = await self._stream_step(runnable, messages, writer)
            messages.append(ai_message)
            response_messages.append(ai_message)
            text = content_to_text(ai_message.content)
            if text:
                texts.append(text)
            if not ai_message.tool_calls:
                break
            self._logger.info(
                f"chat.response.tool_step: step={step + 1}, "
                f"tools={[call['name'] for call in ai_message.tool_calls]}"
            )
            for call in ai_message.tool_calls:
                tool_message = await self._run_tool(tools_by_name, call, writer)
                messages.append(tool_message)
                response_messages.append(tool_message)

        return {"assistant_message": "".join(texts), "response_messages": response_messages}

    def _build_tools(self, model_id: str, user_id: str, writer: StreamWriter) -> list[BaseTool]:
        if self._tool_factory is None or not model_supports_tools(model_id):
            return []

        def _data_writer(payload: dict[str, Any]) -> None:
            writer({"node": NODE_NAME, "event": "data", "data": payload})

        return self._tool_factory.build(user_id=user_id, writer=_data_writer)

    async def _stream_step(self, runnable: Any, messages: list[BaseMessage], writer: StreamWriter) -> AIMessage:
        aggregated: AIMessageChunk | None = None
        chunker = WordChunker()
        async for chunk in runnable.astream(messages):
            if not isinstance(chunk, AIMessageChunk):
                chunk = AIMessageChunk(content=content_to_text(getattr(chunk, "content", chunk)))
            aggregated = chunk if aggregated is None else aggregated + chunk
            for word in chunker.push(content_to_text(chunk.content)):
                await self._emit_token(word, writer)
        for word in chunker.flush():
            await self._emit_token(word, writer)

        if aggregated is None:
            return AIMessage(content="", id=new_id())
        tool_calls = [
            {**call, "id": call.get("id") or f"call_{new_id()}"}
            for call in aggregated.tool_calls
        ]
        return AIMessage(content=aggregated.content, tool_calls=tool_calls, id=new_id())

    async def _emit_token(self, word: str, writer: StreamWriter) -> None:
        writer({"node": NODE_NAME, "event": "token", "data": word})
        if self._smooth_delay:
            await asyncio.sleep(self._smooth_delay)

    async def _run_tool(
        self,
        tools_by_name: dict[str, BaseTool],
        call: Mapping[str, Any],
        writer: StreamWriter,
    ) -> ToolMessage:
        call_id = str(call.get("id"))
        name = str(call.get("name") or "")
        args = dict(call.get("args") or {})
        writer({"node": NODE_NAME, "event": "tool_call", "data": {"toolCallId": call_id, "toolName": name, "args": args}})

        tool = tools_by_name.get(name)
        if tool is None:
            result: Any = {"error": f"Unknown tool: {name}"}
        else:
            try:
                result = await tool.ainvoke(args)
            except Exception as error:  # noqa: BLE001 - 도구 실패는 모델에게 오류 결과로 전달한다.
                self._logger.warning(f"chat.response.tool_failed: tool={name}, error={error}")
                result = {"error": str(error) or type(error).__name__}

        writer(
            {
                "node": NODE_NAME,
                "event": "tool_result",
                "data": {"toolCallId": call_id, "toolName": name, "result": result},
            }
        )
        content = result if isinstance(result, str) else json.dumps(result, ensure_ascii=False, default=str)
        return ToolMessage(content=content, tool_call_id=call_id, name=name)
