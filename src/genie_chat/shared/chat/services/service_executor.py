"""
목적: 채팅 턴 스트림을 SSE 프레임으로 중계한다.
설명: start -> token/data/tool_call/tool_result -> done 순서를 보장하고, 스트리밍 중 실패는 error 프레임 1건으로 변환한다.
디자인 패턴: 실행 코디네이터
참조: src/genie_chat/shared/chat/services/chat_service.py, src/genie_chat/shared/chat/streaming/sse.py
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import AsyncIterator
from typing import Any

from genie_chat.core.chat.const import ChatResponseMessage
from genie_chat.core.chat.models import PreparedTurn
from genie_chat.shared.chat.services.chat_service import ChatTurnService
from genie_chat.shared.chat.streaming import StreamPayload, build_sse
from genie_chat.shared.logging import Logger, create_default_logger


class ChatStreamExecutor:
    """준비된 턴을 SSE 문자열 스트림으로 실행한다."""

    _SSE_EVENT = "message"

    def __init__(self, service: ChatTurnService, logger: Logger | None = None) -> None:
        self._service = service
        self._logger = logger or create_default_logger("ChatStreamExecutor")

    async def stream_events(self, prepared: PreparedTurn) -> AsyncIterator[str]:
        """턴 실행 SSE 스트림을 생성한다."""

        chat_id = prepared.chat_id
        started_at = time.monotonic()
        token_count = 0
        self._logger.info(f"chat.exec.start: chat_id={chat_id}, model={prepared.selected_model_id}")
        yield self._frame(StreamPayload(chat_id=chat_id, type="start", status="RUNNING"))
        try:
            async for event in self._service.astream(prepared):
                event_type = str(event.get("type") or "")
                if event_type == "token":
                    token_count += 1
                yield self._frame(self._to_payload(chat_id, event_type, event))
        except (asyncio.CancelledError, GeneratorExit):
            self._logger.warning(f"chat.exec.cancelled: chat_id={chat_id}, token_count={token_count}")
            raise
        except Exception as error:  # noqa: BLE001 - 스트림 도중 실패는 error 프레임으로 알린다.
            self._logger.error(f"chat.exec.error: chat_id={chat_id}, error={error}")
            yield self._frame(
                StreamPayload(
                    chat_id=chat_id,
                    type="error",
                    status="FAILED",
                    error_message=ChatResponseMessage.STREAM_FAILED.value,
                )
            )
            return

        elapsed_ms = int((time.monotonic() - started_at) * 1000)
        self._logger.info(f"chat.exec.done: chat_id={chat_id}, elapsed_ms={elapsed_ms}, token_count={token_count}")

    def _to_payload(self, chat_id: str, event_type: str, event: dict[str, Any]) -> StreamPayload:
        data = event.get("data")
        if event_type == "token":
            return StreamPayload(chat_id=chat_id, type="token", content=str(data or ""))
        if event_type == "done":
            return StreamPayload(
                chat_id=chat_id,
                type="done",
                content=str(data or ""),
                message_id=event.get("message_id"),
                status="COMPLETED",
            )
        return StreamPayload(chat_id=chat_id, type=event_type, data=data)

    def _frame(self, payload: StreamPayload) -> str:
        return build_sse(self._SSE_EVENT, payload)
