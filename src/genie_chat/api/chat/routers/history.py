"""
목적: 대화 목록/메시지 조회 라우터를 제공한다.
설명: 로그인 사용자 소유 대화 목록과 대화별 저장 메시지를 반환한다.
디자인 패턴: 라우터 패턴
참조: src/genie_chat/shared/chat/services/chat_service.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse, Response

from genie_chat.api.auth import get_optional_session
from genie_chat.api.chat.models import ChatHistoryResponse, ChatMessagesResponse, ChatSummaryResponse
from genie_chat.api.chat.routers.common import to_error_response
from genie_chat.api.chat.services import get_chat_turn_service
from genie_chat.api.const import CHAT_MESSAGES_PATH, HISTORY_PATH
from genie_chat.core.chat.const import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from genie_chat.shared.auth import AuthSession
from genie_chat.shared.chat import ChatTurnService
from genie_chat.shared.exceptions import BaseAppException

router = APIRouter()


@router.get(HISTORY_PATH, summary="대화 목록을 조회합니다.")
def list_chats(
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    offset: int = Query(default=0, ge=0),
    session: AuthSession | None = Depends(get_optional_session),
    service: ChatTurnService = Depends(get_chat_turn_service),
) -> Response:
    """최근 대화 목록을 최신순으로 조회한다."""

    try:
        chats = service.list_chats(session, limit=limit, offset=offset)
    except BaseAppException as error:
        return to_error_response(error)
    body = ChatHistoryResponse(
        chats=[ChatSummaryResponse.from_chat(item) for item in chats],
        limit=limit,
        offset=offset,
    )
    return JSONResponse(content=body.model_dump(mode="json", by_alias=True))


@router.get(CHAT_MESSAGES_PATH, summary="대화 메시지 목록을 조회합니다.")
def list_messages(
    chat_id: str,
    session: AuthSession | None = Depends(get_optional_session),
    service: ChatTurnService = Depends(get_chat_turn_service),
) -> Response:
    try:
        messages = service.list_messages(chat_id, session)
    except BaseAppException as error:
        return to_error_response(error)
    body = ChatMessagesResponse(chat_id=chat_id, messages=[item.to_record() for item in messages])
    return JSONResponse(content=body.model_dump(mode="json", by_alias=True))
