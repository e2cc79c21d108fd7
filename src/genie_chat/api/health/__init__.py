"""헬스체크 API 패키지."""
