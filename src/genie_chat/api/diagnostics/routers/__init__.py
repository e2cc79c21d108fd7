"""진단 라우터 모음."""

from genie_chat.api.diagnostics.routers.diagnostics import router

__all__ = ["router"]
