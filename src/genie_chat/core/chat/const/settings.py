"""
목적: Chat 코어의 설정 상수를 정의한다.
설명: 저장 경로, 모델 식별자, 웹 검색 트리거, 기본 페이지네이션 값을 제공한다.
디자인 패턴: 상수 객체 패턴
참조: src/genie_chat/shared/config/settings.py, src/genie_chat/shared/chat/services/chat_service.py
"""

from __future__ import annotations

import os
from pathlib import Path

CHAT_DB_PATH = Path(os.getenv("CHAT_DB_PATH", "data/db/chat/chat_history.sqlite"))

# 클라이언트가 선택할 수 있는 대화 모델 식별자
DEFAULT_CHAT_MODEL_ID = "chat-model"
REASONING_CHAT_MODEL_ID = "chat-model-reasoning"
# 내부 전용 모델 슬롯
TITLE_MODEL_ID = "title-model"
ARTIFACT_MODEL_ID = "artifact-model"

# 도구를 노출하지 않는 모델
TOOLLESS_MODEL_IDS = frozenset({REASONING_CHAT_MODEL_ID})

# 사용자 메시지 첫 텍스트 파트가 이 접두어로 시작하면 웹 검색으로 처리한다.
WEB_SEARCH_PREFIX = "/web "
WEB_SEARCH_RESULT_LIMIT = 5
WEB_SEARCH_ERROR_HISTORY_LIMIT = 10

# 제목 생성 결과 최대 길이
CHAT_TITLE_MAX_LENGTH = 80
# 응답 노드 도구 호출 최대 라운드
DEFAULT_MAX_TOOL_STEPS = 5

DEFAULT_PAGE_SIZE = 50
MAX_PAGE_SIZE = 200


def model_supports_tools(model_id: str) -> bool:
    """모델이 도구 호출을 노출하는지 반환한다."""

    return model_id not in TOOLLESS_MODEL_IDS
