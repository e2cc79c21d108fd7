"""
목적: Chat 라우터 공통 유틸을 제공한다.
설명: 도메인 예외를 평문 HTTP 오류 응답으로 변환하는 헬퍼를 제공한다.
디자인 패턴: 유틸리티 모듈
참조: src/genie_chat/api/chat/routers/router.py
"""

from __future__ import annotations

from fastapi import status
from fastapi.responses import PlainTextResponse

from genie_chat.core.chat.const import ChatErrorCode, ChatResponseMessage
from genie_chat.shared.exceptions import BaseAppException

_STATUS_BY_CODE = {
    ChatErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ChatErrorCode.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ChatErrorCode.USER_MESSAGE_MISSING: status.HTTP_400_BAD_REQUEST,
    ChatErrorCode.MODEL_UNKNOWN: status.HTTP_400_BAD_REQUEST,
}


def to_error_response(
    error: BaseAppException,
    fallback_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
) -> PlainTextResponse:
    """도메인 예외를 평문 오류 응답으로 변환한다.

    매핑되지 않은 코드는 `fallback_status`와 공통 실패 문구를 사용한다.
    """

    status_code = _STATUS_BY_CODE.get(error.code)
    if status_code is None:
        return request_failed_response(fallback_status)
    return PlainTextResponse(error.message, status_code=status_code)


def request_failed_response(status_code: int) -> PlainTextResponse:
    return PlainTextResponse(ChatResponseMessage.REQUEST_FAILED.value, status_code=status_code)


def unauthorized_response() -> PlainTextResponse:
    return PlainTextResponse(ChatResponseMessage.UNAUTHORIZED.value, status_code=status.HTTP_401_UNAUTHORIZED)
