"""
목적: Chat API 라우터 집계를 제공한다.
설명: 엔드포인트별 분리 라우터를 하나의 Chat 라우터로 묶는다.
디자인 패턴: 컴포지트 패턴
참조: src/genie_chat/api/chat/routers/*.py
"""

from __future__ import annotations

from fastapi import APIRouter

from genie_chat.api.chat.routers.chat import router as chat_router
from genie_chat.api.chat.routers.history import router as history_router
from genie_chat.api.chat.routers.models import router as models_router
from genie_chat.api.const import API_PREFIX, CHAT_API_TAG

router = APIRouter(prefix=API_PREFIX, tags=[CHAT_API_TAG])
router.include_router(chat_router)
router.include_router(history_router)
router.include_router(models_router)
