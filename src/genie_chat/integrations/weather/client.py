"""
목적: Open-Meteo 날씨 조회 클라이언트를 제공한다.
설명: 위경도로 현재 기온/일출/일몰 예보 JSON을 조회한다.
디자인 패턴: 어댑터(Adapter)
참조: src/genie_chat/core/chat/tools/factory.py
"""

from __future__ import annotations

from typing import Any

import httpx

OPEN_METEO_FORECAST_URL = "https://api.open-meteo.com/v1/forecast"


class OpenMeteoClient:
    """Open-Meteo 예보 API 어댑터."""

    def __init__(
        self,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout_seconds)
        self._transport = transport

    async def forecast(self, latitude: float, longitude: float) -> dict[str, Any]:
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": "temperature_2m",
            "hourly": "temperature_2m",
            "daily": "sunrise,sunset",
            "timezone": "auto",
        }
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            response = await client.get(OPEN_METEO_FORECAST_URL, params=params)
            response.raise_for_status()
            return response.json()
