"""설정 조회 API 패키지."""
