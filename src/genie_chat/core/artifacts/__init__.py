"""
목적: 문서 아티팩트 모듈 공개 API를 제공한다.
설명: 문서/제안 엔티티, 종류별 핸들러, 코드 펜스 제거 함수를 노출한다.
디자인 패턴: 파사드
참조: src/genie_chat/core/artifacts/handlers.py
"""

from genie_chat.core.artifacts.code_sanitizer import strip_code_fences
from genie_chat.core.artifacts.handlers import (
    CodeDocumentHandler,
    CodeDraft,
    DataWriter,
    DocumentHandler,
    TextDocumentHandler,
    build_document_handlers,
)
from genie_chat.core.artifacts.models import ArtifactKind, Document, Suggestion

__all__ = [
    "ArtifactKind",
    "CodeDocumentHandler",
    "CodeDraft",
    "DataWriter",
    "Document",
    "DocumentHandler",
    "Suggestion",
    "TextDocumentHandler",
    "build_document_handlers",
    "strip_code_fences",
]
