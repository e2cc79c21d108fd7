"""
목적: 검색 자격 증명 상태 조회 라우터를 제공한다.
설명: 실제 요청 1건으로 자격 증명을 검증하고 결과를 camelCase JSON으로 반환한다. 키 값은 노출하지 않는다.
디자인 패턴: 라우터 패턴
참조: src/genie_chat/core/diagnostics/credential_probe.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from genie_chat.api.auth import get_optional_session
from genie_chat.api.chat.services import get_credential_probe
from genie_chat.api.const import API_PREFIX, CONFIG_API_TAG, SEARCH_STATUS_PATH
from genie_chat.core.chat.const import ChatResponseMessage
from genie_chat.core.diagnostics import SearchCredentialProbe
from genie_chat.shared.auth import AuthSession

router = APIRouter(prefix=API_PREFIX, tags=[CONFIG_API_TAG])


@router.get(SEARCH_STATUS_PATH, summary="웹 검색 자격 증명 상태를 조회합니다.")
async def get_search_status(
    session: AuthSession | None = Depends(get_optional_session),
    probe: SearchCredentialProbe = Depends(get_credential_probe),
) -> JSONResponse:
    if session is None:
        return JSONResponse(
            content={"error": ChatResponseMessage.UNAUTHORIZED.value},
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    result = await probe.probe()
    return JSONResponse(content=result.model_dump(mode="json", by_alias=True))
