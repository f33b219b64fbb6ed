"""Pydantic models for the parts of the OpenWeatherMap payload we read."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from models.readings import WeatherReading


class MainConditions(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    temp: float
    humidity: float


class WindConditions(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    speed: float


class CurrentWeatherPayload(BaseModel):
    """Subset of the ``/weather`` response; unknown fields are ignored."""

    name: str
    main: MainConditions
    wind: WindConditions

    def to_reading(self) -> WeatherReading:
        return WeatherReading(
            location_name=self.name,
            temperature_c=self.main.temp,
            humidity_pct=self.main.humidity,
            wind_speed_ms=self.wind.speed,
        )
