"""
목적: 선택 가능한 채팅 모델 목록 라우터를 제공한다.
설명: 설정된 모델 중 클라이언트 노출 대상만 반환한다.
디자인 패턴: 라우터 패턴
참조: src/genie_chat/integrations/llm/registry.py
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from genie_chat.api.chat.models import ChatModelsResponse
from genie_chat.api.chat.services import get_model_registry
from genie_chat.api.const import MODELS_PATH
from genie_chat.core.chat.const import DEFAULT_CHAT_MODEL_ID
from genie_chat.integrations.llm import ChatModelRegistry

router = APIRouter()


@router.get(MODELS_PATH, response_model=ChatModelsResponse, summary="채팅 모델 목록을 조회합니다.")
def list_models(registry: ChatModelRegistry = Depends(get_model_registry)) -> ChatModelsResponse:
    return ChatModelsResponse(models=registry.list_chat_models(), default=DEFAULT_CHAT_MODEL_ID)
