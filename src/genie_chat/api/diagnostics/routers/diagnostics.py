"""
목적: 웹 검색 진단 라우터를 제공한다.
설명: 연결성/최근 오류 점검 결과와 자체 도달성 확인용 ping 엔드포인트를 정의한다.
디자인 패턴: 라우터 패턴
참조: src/genie_chat/core/diagnostics/connectivity.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse, Response

from genie_chat.api.auth import get_optional_session
from genie_chat.api.chat.routers.common import unauthorized_response
from genie_chat.api.chat.services import get_web_search_diagnostics
from genie_chat.api.const import API_PREFIX, DIAGNOSTICS_API_TAG, PING_PATH, WEB_SEARCH_DIAGNOSTICS_PATH
from genie_chat.core.diagnostics import WebSearchDiagnostics
from genie_chat.shared.auth import AuthSession

router = APIRouter(prefix=API_PREFIX, tags=[DIAGNOSTICS_API_TAG])


@router.get(WEB_SEARCH_DIAGNOSTICS_PATH, summary="웹 검색 진단을 실행합니다.")
async def run_web_search_diagnostics(
    session: AuthSession | None = Depends(get_optional_session),
    diagnostics: WebSearchDiagnostics = Depends(get_web_search_diagnostics),
) -> Response:
    """네트워크/API 엔드포인트/최근 오류 점검 결과를 반환한다."""

    if session is None:
        return unauthorized_response()
    checks = await diagnostics.run()
    return JSONResponse(
        content={
            "checks": [item.model_dump(mode="json") for item in checks],
            "recentErrors": diagnostics.recent_errors(),
        }
    )


@router.api_route(PING_PATH, methods=["GET", "HEAD"], summary="API 도달 여부를 확인합니다.")
def ping() -> JSONResponse:
    return JSONResponse(content={"status": "ok"}, status_code=status.HTTP_200_OK)
