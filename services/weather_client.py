"""HTTP client for the OpenWeatherMap current weather endpoint."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

import httpx
from pydantic import ValidationError

from models.openweather import CurrentWeatherPayload
from models.readings import WeatherReading
from settings import DEFAULT_TIMEOUT, get_settings

logger = logging.getLogger(__name__)


class WeatherFetchError(Exception):
    """Raised when current weather for a city could not be obtained."""

    def __init__(self, city: str, reason: str, status_code: Optional[int] = None) -> None:
        super().__init__(f"Could not fetch weather for {city!r}: {reason}")
        self.city = city
        self.reason = reason
        self.status_code = status_code


class WeatherClient:
    """Fetches current conditions for a city and maps them to readings."""

    def __init__(
        self,
        api_key: str,
        base_url: str,
        units: str = "metric",
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.units = units
        self._client = httpx.Client(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "WeatherClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def fetch_reading(self, city: str) -> WeatherReading:
        """Return the current reading for ``city`` or raise ``WeatherFetchError``."""
        name = city.strip()
        if not name:
            raise ValueError("City name must not be empty.")

        try:
            response = self._client.get(
                "/weather",
                params={"q": name, "appid": self.api_key, "units": self.units},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise WeatherFetchError(
                name,
                f"status {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise WeatherFetchError(name, str(exc) or type(exc).__name__) from exc

        try:
            payload = CurrentWeatherPayload.model_validate(response.json())
        except ValidationError as exc:
            raise WeatherFetchError(
                name, "unexpected response payload", status_code=response.status_code
            ) from exc
        except ValueError as exc:
            raise WeatherFetchError(
                name, "response body is not valid JSON", status_code=response.status_code
            ) from exc

        reading = payload.to_reading()
        logger.debug(
            "Fetched current weather",
            extra={"city": name, "location": reading.location_name},
        )
        return reading

    def get_reading(self, city: str) -> Optional[WeatherReading]:
        """Like ``fetch_reading`` but returns ``None`` on fetch failures."""
        try:
            return self.fetch_reading(city)
        except WeatherFetchError as exc:
            logger.warning(
                "Weather fetch failed",
                extra={"city": exc.city, "status_code": exc.status_code, "reason": exc.reason},
            )
            return None


@lru_cache
def build_default_client() -> WeatherClient:
    """Factory that wires the client from environment settings."""
    settings = get_settings()
    if not settings.api_key:
        raise RuntimeError("OPENWEATHER_API_KEY is not configured.")
    return WeatherClient(
        api_key=settings.api_key,
        base_url=settings.base_url,
        units=settings.units,
        timeout=settings.request_timeout,
    )
