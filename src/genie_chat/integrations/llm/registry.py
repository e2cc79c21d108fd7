"""
목적: 모델 식별자별 LLM 클라이언트 레지스트리를 제공한다.
설명: `chat-model`/`chat-model-reasoning`/`title-model`/`artifact-model` 슬롯을 OpenAI 모델 이름에 매핑하고 지연 생성한다.
디자인 패턴: 레지스트리 + 지연 초기화
참조: src/genie_chat/integrations/llm/client.py, src/genie_chat/api/chat/services/runtime.py
"""

from __future__ import annotations

import threading
from typing import Callable

from langchain_core.language_models import BaseChatModel
from langchain_openai import ChatOpenAI
from pydantic import BaseModel, SecretStr

from genie_chat.core.chat.const import (
    ChatErrorCode,
    ChatResponseMessage,
    DEFAULT_CHAT_MODEL_ID,
    REASONING_CHAT_MODEL_ID,
)
from genie_chat.integrations.llm.client import LLMClient
from genie_chat.shared.exceptions import BaseAppException, ExceptionDetail


class ChatModelInfo(BaseModel):
    """클라이언트에 노출하는 채팅 모델 정보."""

    id: str
    name: str
    description: str


CHAT_MODELS: tuple[ChatModelInfo, ...] = (
    ChatModelInfo(
        id=DEFAULT_CHAT_MODEL_ID,
        name="Genie-01",
        description="Primary model for all-purpose chat",
    ),
    ChatModelInfo(
        id=REASONING_CHAT_MODEL_ID,
        name="Genie-Reasoning",
        description="Uses advanced reasoning",
    ),
)

ModelFactory = Callable[[str, str], BaseChatModel]


def build_openai_chat_model(model_id: str, model_name: str, api_key: SecretStr | None = None) -> BaseChatModel:
    """OpenAI 채팅 모델을 LLMClient로 감싸 생성한다."""

    kwargs: dict = {"model": model_name, "streaming": True}
    if api_key is not None:
        kwargs["api_key"] = api_key
    return LLMClient(model=ChatOpenAI(**kwargs), name=f"{model_id}:{model_name}")


class ChatModelRegistry:
    """모델 식별자 → LLM 클라이언트 레지스트리.

    Args:
        model_names: 모델 식별자별 공급자 모델 이름.
        factory: `(model_id, model_name)`을 받아 모델을 생성하는 함수. 테스트에서 가짜 모델을 주입한다.
    """

    def __init__(self, model_names: dict[str, str], factory: ModelFactory) -> None:
        self._model_names = dict(model_names)
        self._factory = factory
        self._models: dict[str, BaseChatModel] = {}
        self._lock = threading.Lock()

    def get(self, model_id: str) -> BaseChatModel:
        """모델 식별자에 해당하는 클라이언트를 반환한다."""

        model_name = self._model_names.get(model_id)
        if model_name is None:
            detail = ExceptionDetail(
                code=ChatErrorCode.MODEL_UNKNOWN,
                cause=f"model_id={model_id}",
                hint=f"사용 가능한 모델: {', '.join(sorted(self._model_names))}",
            )
            raise BaseAppException(ChatResponseMessage.UNKNOWN_MODEL.value, detail)
        with self._lock:
            model = self._models.get(model_id)
            if model is None:
                model = self._factory(model_id, model_name)
                self._models[model_id] = model
            return model

    def is_known(self, model_id: str) -> bool:
        return model_id in self._model_names

    def list_chat_models(self) -> list[ChatModelInfo]:
        return [item for item in CHAT_MODELS if item.id in self._model_names]
