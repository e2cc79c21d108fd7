"""
목적: 공통 예외 베이스 클래스를 제공한다.
설명: 사용자에게 돌려줄 메시지와 ExceptionDetail을 함께 보관한다. 라우터는 detail.code로 HTTP 상태를 고른다.
디자인 패턴: 도메인 예외 객체
참조: src/genie_chat/shared/exceptions/models.py, src/genie_chat/api/chat/routers/common.py
"""

from __future__ import annotations

from typing import Any, Optional

from genie_chat.shared.exceptions.models import ExceptionDetail


class BaseAppException(Exception):
    """애플리케이션 공통 예외.

    Args:
        message: 응답 본문에 그대로 실을 수 있는 메시지.
        detail: 코드/원인/힌트 상세.
        original: 감싼 원본 예외.
    """

    def __init__(
        self,
        message: str,
        detail: ExceptionDetail,
        original: Optional[Exception] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail
        self.original = original

    @property
    def code(self) -> str:
        return self.detail.code

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """로그 메타데이터용 사전. 원본 예외는 repr 문자열로 남긴다."""

        payload: dict[str, Any] = {"message": self.message, **self.detail.model_dump(exclude_none=True)}
        if self.original is not None:
            payload["original"] = repr(self.original)
        return payload
