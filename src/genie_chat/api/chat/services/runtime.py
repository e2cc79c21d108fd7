"""
목적: Chat API 런타임 조립 인스턴스를 제공한다.
설명: 설정/저장소/검색/모델/그래프/서비스/실행기를 모듈 레벨에서 조립해 라우터가 바로 사용할 인스턴스를 노출한다.
디자인 패턴: 모듈 조립 + 싱글턴
참조: src/genie_chat/core/chat/graphs/chat_graph.py, src/genie_chat/shared/config/settings.py
"""

from __future__ import annotations

from functools import partial

from genie_chat.core.chat.const import ARTIFACT_MODEL_ID, TITLE_MODEL_ID
from genie_chat.core.chat.graphs import build_chat_graph
from genie_chat.core.chat.nodes import ResponseNode
from genie_chat.core.chat.tools import ChatToolFactory
from genie_chat.core.diagnostics import SearchCredentialProbe, WebSearchDiagnostics
from genie_chat.core.search import WebSearchService, create_search_error_logger
from genie_chat.integrations.llm import ChatModelRegistry, build_openai_chat_model
from genie_chat.integrations.search import GoogleCustomSearchClient, LoggingRequestObserver
from genie_chat.integrations.weather import OpenMeteoClient
from genie_chat.shared.auth import SessionAuthenticator, StaticTokenAuthenticator
from genie_chat.shared.chat import ChatStreamExecutor, ChatTurnService, LLMTitleGenerator, create_chat_store
from genie_chat.shared.config import AppSettings
from genie_chat.shared.logging import Logger, create_default_logger
from genie_chat.shared.runtime import FixedWindowRateLimiter

# 1) 설정/로깅

# RuntimeEnvironmentLoader가 .env를 로드한 뒤 import되어야 최신 값을 읽는다.
settings = AppSettings.from_env()

# 턴 실행 수명주기 로깅
service_logger: Logger = create_default_logger("ChatTurnService")
# SSE 중계 로깅
executor_logger: Logger = create_default_logger("ChatStreamExecutor")
# 웹 검색 로깅
search_logger: Logger = create_default_logger("WebSearchService")

# 2) 저장소/인증

# CHAT_STORE_BACKEND="sqlite"(기본) | "memory"
chat_store = create_chat_store(
    settings.chat_store_backend,
    settings.chat_db_path,
    logger=service_logger,
)
authenticator: SessionAuthenticator = StaticTokenAuthenticator(settings.auth_tokens)

# 3) 웹 검색
#
# 제한기는 프로세스 전역 1개이며 재시작 시 초기화된다.
# 최근 실패 이력(최대 10건)은 진단 API가 읽는다.
search_client = GoogleCustomSearchClient(
    api_key=settings.search.api_key,
    search_engine_id=settings.search.search_engine_id,
    timeout_seconds=settings.search.timeout_seconds,
    observers=[LoggingRequestObserver()],
)
rate_limiter = FixedWindowRateLimiter(
    max_queries=settings.search.max_queries,
    window_seconds=settings.search.window_seconds,
    logger=search_logger,
)
search_error_logger = create_search_error_logger()
search_service = WebSearchService(
    client=search_client,
    rate_limiter=rate_limiter,
    logger=search_logger,
    error_logger=search_error_logger,
)

# 4) 모델/도구
#
# 모델은 첫 사용 시점에 생성한다. OPENAI_API_KEY 없이도 앱은 기동된다.
model_registry = ChatModelRegistry(
    settings.model_names,
    factory=partial(build_openai_chat_model, api_key=settings.openai_api_key),
)
tool_factory = ChatToolFactory(
    store=chat_store,
    search_service=search_service,
    weather_client=OpenMeteoClient(),
    artifact_model_provider=partial(model_registry.get, ARTIFACT_MODEL_ID),
    logger=service_logger,
)

# 5) 그래프/서비스/실행기 조립

response_node = ResponseNode(
    registry=model_registry,
    tool_factory=tool_factory,
    max_steps=settings.max_tool_steps,
    smooth_delay_ms=settings.stream_smooth_delay_ms,
)
chat_graph = build_chat_graph(response_node=response_node, search_service=search_service)

# ChatTurnService는 턴 준비(인증/대화/사용자 메시지 저장)와 그래프 실행을 담당한다.
chat_service = ChatTurnService(
    store=chat_store,
    graph=chat_graph,
    title_generator=LLMTitleGenerator(partial(model_registry.get, TITLE_MODEL_ID)),
    model_validator=model_registry.is_known,
    logger=service_logger,
)
# ChatStreamExecutor는 ChatTurnService.astream 결과를 SSE 프레임으로 중계한다.
stream_executor = ChatStreamExecutor(service=chat_service, logger=executor_logger)

# 6) 진단

credential_probe = SearchCredentialProbe(search_client)
web_search_diagnostics = WebSearchDiagnostics(
    app_base_url=settings.app_base_url,
    error_repository=search_error_logger.repository,
)

# 7) FastAPI 주입/수명주기 함수
#
# 라우터에서는 FastAPI Depends로 아래 함수만 호출해 의존성을 가져오고,
# 조립/생성 로직은 runtime.py 내부에만 고정한다.


def get_authenticator() -> SessionAuthenticator:
    """FastAPI Depends 경유로 세션 해석기를 반환한다."""

    return authenticator


def get_chat_turn_service() -> ChatTurnService:
    """FastAPI Depends 경유로 ChatTurnService 싱글턴을 반환한다."""

    return chat_service


def get_stream_executor() -> ChatStreamExecutor:
    """FastAPI Depends 경유로 ChatStreamExecutor 싱글턴을 반환한다."""

    return stream_executor


def get_model_registry() -> ChatModelRegistry:
    return model_registry


def get_credential_probe() -> SearchCredentialProbe:
    return credential_probe


def get_web_search_diagnostics() -> WebSearchDiagnostics:
    return web_search_diagnostics


def shutdown_chat_api_service() -> None:
    """앱 종료 시 저장소 연결 리소스를 정리한다."""

    chat_store.close()


__all__ = [
    "chat_service",
    "stream_executor",
    "get_authenticator",
    "get_chat_turn_service",
    "get_stream_executor",
    "get_model_registry",
    "get_credential_probe",
    "get_web_search_diagnostics",
    "shutdown_chat_api_service",
]
