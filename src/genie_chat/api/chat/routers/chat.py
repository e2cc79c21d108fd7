"""
목적: 채팅 턴 스트리밍/대화 삭제 라우터를 제공한다.
설명: POST는 턴을 준비한 뒤 SSE 스트림을 반환하고, DELETE는 소유자 확인 후 대화를 삭제한다.
디자인 패턴: 라우터 패턴
참조: src/genie_chat/shared/chat/services/chat_service.py, src/genie_chat/shared/chat/services/service_executor.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse, Response, StreamingResponse

from genie_chat.api.auth import get_optional_session
from genie_chat.api.chat.models import ChatRequest
from genie_chat.api.chat.routers.common import request_failed_response, to_error_response
from genie_chat.api.chat.services import get_chat_turn_service, get_stream_executor
from genie_chat.api.const import CHAT_PATH, SSE_HEADERS
from genie_chat.core.chat.const import ChatResponseMessage
from genie_chat.shared.auth import AuthSession
from genie_chat.shared.chat import ChatStreamExecutor, ChatTurnService
from genie_chat.shared.exceptions import BaseAppException
from genie_chat.shared.logging import create_default_logger

router = APIRouter()
_LOGGER = create_default_logger("ChatRouter")


@router.post(CHAT_PATH, summary="채팅 턴을 제출하고 스트리밍 응답을 수신합니다.")
async def stream_chat(
    request: ChatRequest,
    session: AuthSession | None = Depends(get_optional_session),
    service: ChatTurnService = Depends(get_chat_turn_service),
    executor: ChatStreamExecutor = Depends(get_stream_executor),
) -> Response:
    """턴 준비에 성공하면 SSE 스트림을 시작한다."""

    try:
        prepared = await service.prepare_turn(request.to_turn(), session)
    except BaseAppException as error:
        _LOGGER.warning(f"chat.api.rejected: chat_id={request.id}, code={error.code}")
        return to_error_response(error, fallback_status=status.HTTP_404_NOT_FOUND)
    except Exception as error:  # noqa: BLE001 - 스트림 시작 전 실패는 404 평문 응답으로 통일한다.
        _LOGGER.error(f"chat.api.failed: chat_id={request.id}, error={error}")
        return request_failed_response(status.HTTP_404_NOT_FOUND)

    return StreamingResponse(
        executor.stream_events(prepared),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
    )


@router.delete(CHAT_PATH, summary="대화를 삭제합니다.")
def delete_chat(
    id: str | None = Query(default=None),
    session: AuthSession | None = Depends(get_optional_session),
    service: ChatTurnService = Depends(get_chat_turn_service),
) -> Response:
    """대화와 소속 메시지를 삭제한다."""

    if not id:
        return PlainTextResponse(ChatResponseMessage.NOT_FOUND.value, status_code=status.HTTP_404_NOT_FOUND)
    try:
        service.delete_chat(id, session)
    except BaseAppException as error:
        return to_error_response(error)
    except Exception as error:  # noqa: BLE001 - 저장소 실패는 500 평문 응답으로 변환한다.
        _LOGGER.error(f"chat.api.delete_failed: chat_id={id}, error={error}")
        return request_failed_response(status.HTTP_500_INTERNAL_SERVER_ERROR)
    return PlainTextResponse(ChatResponseMessage.CHAT_DELETED.value, status_code=status.HTTP_200_OK)
