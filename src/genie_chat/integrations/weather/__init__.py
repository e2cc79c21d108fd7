"""날씨 공급자 연동 모듈."""

from genie_chat.integrations.weather.client import OPEN_METEO_FORECAST_URL, OpenMeteoClient

__all__ = ["OPEN_METEO_FORECAST_URL", "OpenMeteoClient"]
