"""진단 API 패키지."""
