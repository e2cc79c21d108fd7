"""설정 조회 라우터 모음."""

from genie_chat.api.config.routers.search_status import router

__all__ = ["router"]
