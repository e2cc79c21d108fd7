"""
목적: FastAPI 앱 엔트리 포인트 제공
설명: 헬스체크/Chat/설정/진단 라우터를 등록하고 종료 시 저장소 리소스를 정리한다.
디자인 패턴: 단일 책임 원칙(SRP)
참조: src/genie_chat/api/chat/services/runtime.py
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from genie_chat.shared.config import RuntimeEnvironmentLoader

# 런타임 환경(local/dev/stg/prod)을 판별해 환경 파일을 로드한다.
RUNTIME_ENV = RuntimeEnvironmentLoader().load()

# NOTE:
# .env 로딩 이후에 라우터/서비스를 import해야, import 시점에 조립되는 설정/저장소/검색 클라이언트가
# 최신 환경 변수를 정상적으로 읽을 수 있다.
from genie_chat.api.chat.routers import router as chat_router
from genie_chat.api.chat.services import shutdown_chat_api_service
from genie_chat.api.config.routers import router as config_router
from genie_chat.api.diagnostics.routers import router as diagnostics_router
from genie_chat.api.health.routers.server import router as health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """종료 시 채팅 저장소 연결을 닫는다."""
    try:
        yield
    finally:
        shutdown_chat_api_service()


app = FastAPI(title="genie-chat", lifespan=lifespan)
for _router in (health_router, chat_router, config_router, diagnostics_router):
    app.include_router(_router)


@app.get("/", include_in_schema=False)
def redirect_to_docs():
    return RedirectResponse(url="/docs")
