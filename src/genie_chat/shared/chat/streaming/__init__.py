"""스트리밍 보조 유틸 모음."""

from genie_chat.shared.chat.streaming.smooth import WordChunker
from genie_chat.shared.chat.streaming.sse import StreamEventType, StreamPayload, build_sse

__all__ = ["StreamEventType", "StreamPayload", "WordChunker", "build_sse"]
