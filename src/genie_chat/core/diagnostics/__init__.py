"""
목적: 검색 진단 모듈 공개 API를 제공한다.
설명: 자격 증명 검증기, 연결성 진단기, 결과 모델을 노출한다.
디자인 패턴: 파사드
참조: src/genie_chat/core/diagnostics/credential_probe.py, src/genie_chat/core/diagnostics/connectivity.py
"""

from genie_chat.core.diagnostics.connectivity import NETWORK_PROBE_URL, PING_PATH, WebSearchDiagnostics
from genie_chat.core.diagnostics.credential_probe import SearchCredentialProbe, describe_credential_status
from genie_chat.core.diagnostics.models import (
    CredentialCheck,
    CredentialStatus,
    DiagnosticCheck,
    DiagnosticStatus,
)

__all__ = [
    "CredentialCheck",
    "CredentialStatus",
    "DiagnosticCheck",
    "DiagnosticStatus",
    "NETWORK_PROBE_URL",
    "PING_PATH",
    "SearchCredentialProbe",
    "WebSearchDiagnostics",
    "describe_credential_status",
]
