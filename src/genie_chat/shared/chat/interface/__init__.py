"""Chat 실행 계층 포트 모음."""

from genie_chat.shared.chat.interface.ports import ChatStorePort, GraphPort, StreamNodeConfig, TitleGeneratorPort

__all__ = ["ChatStorePort", "GraphPort", "StreamNodeConfig", "TitleGeneratorPort"]
