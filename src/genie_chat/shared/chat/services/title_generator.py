"""
목적: 첫 사용자 메시지로 대화 제목을 생성한다.
설명: title-model에 제목 프롬프트를 보내고, 결과가 비면 메시지 앞부분을 제목으로 사용한다.
디자인 패턴: 서비스 객체
참조: src/genie_chat/core/chat/prompts/title_prompt.py, src/genie_chat/shared/chat/services/chat_service.py
"""

from __future__ import annotations

import json
from collections.abc import Callable

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage, SystemMessage

from genie_chat.core.chat.const import CHAT_TITLE_MAX_LENGTH
from genie_chat.core.chat.models import ChatMessage
from genie_chat.core.chat.prompts import TITLE_PROMPT
from genie_chat.core.chat.utils import content_to_text
from genie_chat.shared.logging import Logger, create_default_logger

DEFAULT_TITLE = "New Chat"


class LLMTitleGenerator:
    """LLM 기반 제목 생성기.

    Args:
        model_provider: title-model 공급 함수. 첫 생성 요청 시점에 호출한다.
        max_length: 제목 최대 길이.
    """

    def __init__(
        self,
        model_provider: Callable[[], BaseChatModel],
        max_length: int = CHAT_TITLE_MAX_LENGTH,
        logger: Logger | None = None,
    ) -> None:
        self._model_provider = model_provider
        self._max_length = max_length
        self._logger = logger or create_default_logger("LLMTitleGenerator")

    async def generate(self, message: ChatMessage) -> str:
        payload = json.dumps(message.to_record()["parts"], ensure_ascii=False)
        model = self._model_provider()
        response = await model.ainvoke([SystemMessage(content=TITLE_PROMPT), HumanMessage(content=payload)])
        title = content_to_text(response.content).strip().strip('"').replace(":", "").strip()
        if not title:
            self._logger.warning(f"chat.title.empty: message_id={message.id}")
            title = message.text_content().strip() or DEFAULT_TITLE
        return title[: self._max_length]
