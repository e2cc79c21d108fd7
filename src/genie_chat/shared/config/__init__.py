"""
목적: 설정 모듈 공개 API를 제공한다.
설명: 런타임 환경 로더와 설정 모델을 노출한다.
디자인 패턴: 퍼사드
참조: src/genie_chat/shared/config/runtime_env_loader.py, src/genie_chat/shared/config/settings.py
"""

from genie_chat.shared.config.runtime_env_loader import RuntimeEnvironmentLoader
from genie_chat.shared.config.settings import AppSettings, SearchSettings, parse_auth_tokens

__all__ = ["AppSettings", "RuntimeEnvironmentLoader", "SearchSettings", "parse_auth_tokens"]
