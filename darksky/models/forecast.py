"""Dark Sky forecast data models.

Each record is decoded by explicit key lookup. Keys the API sends but the
models do not name are ignored, and missing keys decode to zero values, so a
field equal to 0 may mean either "measured as zero" or "not reported".
"""

import json
from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from darksky.errors import DecodeError, TimezoneUnavailableError
from darksky.models.common import (
    from_unix,
    read_float,
    read_int,
    read_object,
    read_objects,
    read_str,
    read_strs,
)


@dataclass(frozen=True)
class CurrentConditions:
    time: int = 0
    summary: str = ""
    icon: str = ""
    nearest_storm_distance: int = 0
    nearest_storm_bearing: int = 0
    precip_intensity: float = 0.0
    precip_intensity_error: float = 0.0
    precip_probability: float = 0.0
    precip_type: str = ""
    temperature: float = 0.0  # °F
    apparent_temperature: float = 0.0  # "feels like", °F
    dew_point: float = 0.0
    humidity: float = 0.0
    pressure: float = 0.0
    wind_speed: float = 0.0
    wind_gust: float = 0.0
    wind_bearing: int = 0
    cloud_cover: float = 0.0
    uv_index: int = 0
    visibility: float = 0.0
    ozone: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CurrentConditions":
        return cls(
            time=read_int(data, "time"),
            summary=read_str(data, "summary"),
            icon=read_str(data, "icon"),
            nearest_storm_distance=read_int(data, "nearestStormDistance"),
            nearest_storm_bearing=read_int(data, "nearestStormBearing"),
            precip_intensity=read_float(data, "precipIntensity"),
            precip_intensity_error=read_float(data, "precipIntensityError"),
            precip_probability=read_float(data, "precipProbability"),
            precip_type=read_str(data, "precipType"),
            temperature=read_float(data, "temperature"),
            apparent_temperature=read_float(data, "apparentTemperature"),
            dew_point=read_float(data, "dewPoint"),
            humidity=read_float(data, "humidity"),
            pressure=read_float(data, "pressure"),
            wind_speed=read_float(data, "windSpeed"),
            wind_gust=read_float(data, "windGust"),
            wind_bearing=read_int(data, "windBearing"),
            cloud_cover=read_float(data, "cloudCover"),
            uv_index=read_int(data, "uvIndex"),
            visibility=read_float(data, "visibility"),
            ozone=read_float(data, "ozone"),
        )


@dataclass(frozen=True)
class MinutePoint:
    time: int = 0
    precip_intensity: float = 0.0
    precip_probability: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MinutePoint":
        return cls(
            time=read_int(data, "time"),
            precip_intensity=read_float(data, "precipIntensity"),
            precip_probability=read_float(data, "precipProbability"),
        )


@dataclass(frozen=True)
class MinutelyBlock:
    summary: str = ""
    icon: str = ""
    data: tuple[MinutePoint, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MinutelyBlock":
        return cls(
            summary=read_str(data, "summary"),
            icon=read_str(data, "icon"),
            data=tuple(MinutePoint.from_dict(p) for p in read_objects(data, "data")),
        )


@dataclass(frozen=True)
class HourlyPoint:
    time: int = 0
    summary: str = ""
    icon: str = ""
    precip_intensity: float = 0.0
    precip_probability: float = 0.0
    precip_type: str = ""
    temperature: float = 0.0
    apparent_temperature: float = 0.0
    dew_point: float = 0.0
    humidity: float = 0.0
    pressure: float = 0.0
    wind_speed: float = 0.0
    wind_gust: float = 0.0
    wind_bearing: int = 0
    cloud_cover: float = 0.0
    uv_index: int = 0
    visibility: float = 0.0
    ozone: float = 0.0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HourlyPoint":
        return cls(
            time=read_int(data, "time"),
            summary=read_str(data, "summary"),
            icon=read_str(data, "icon"),
            precip_intensity=read_float(data, "precipIntensity"),
            precip_probability=read_float(data, "precipProbability"),
            precip_type=read_str(data, "precipType"),
            temperature=read_float(data, "temperature"),
            apparent_temperature=read_float(data, "apparentTemperature"),
            dew_point=read_float(data, "dewPoint"),
            humidity=read_float(data, "humidity"),
            pressure=read_float(data, "pressure"),
            wind_speed=read_float(data, "windSpeed"),
            wind_gust=read_float(data, "windGust"),
            wind_bearing=read_int(data, "windBearing"),
            cloud_cover=read_float(data, "cloudCover"),
            uv_index=read_int(data, "uvIndex"),
            visibility=read_float(data, "visibility"),
            ozone=read_float(data, "ozone"),
        )


@dataclass(frozen=True)
class HourlyBlock:
    summary: str = ""
    icon: str = ""
    data: tuple[HourlyPoint, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HourlyBlock":
        return cls(
            summary=read_str(data, "summary"),
            icon=read_str(data, "icon"),
            data=tuple(HourlyPoint.from_dict(p) for p in read_objects(data, "data")),
        )


@dataclass(frozen=True)
class DailyPoint:
    time: int = 0
    summary: str = ""
    icon: str = ""
    sunrise_time: int = 0
    sunset_time: int = 0
    moon_phase: float = 0.0
    precip_intensity: float = 0.0
    precip_intensity_max: float = 0.0
    precip_intensity_max_time: int = 0
    precip_probability: float = 0.0
    precip_type: str = ""
    temperature_high: float = 0.0
    temperature_high_time: int = 0
    temperature_low: float = 0.0
    temperature_low_time: int = 0
    apparent_temperature_high: float = 0.0
    apparent_temperature_high_time: int = 0
    apparent_temperature_low: float = 0.0
    apparent_temperature_low_time: int = 0
    dew_point: float = 0.0
    humidity: float = 0.0
    pressure: float = 0.0
    wind_speed: float = 0.0
    wind_gust: float = 0.0
    wind_gust_time: int = 0
    wind_bearing: int = 0
    cloud_cover: float = 0.0
    uv_index: int = 0
    uv_index_time: int = 0
    visibility: float = 0.0
    ozone: float = 0.0
    temperature_min: float = 0.0
    temperature_min_time: int = 0
    temperature_max: float = 0.0
    temperature_max_time: int = 0
    apparent_temperature_min: float = 0.0
    apparent_temperature_min_time: int = 0
    apparent_temperature_max: float = 0.0
    apparent_temperature_max_time: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyPoint":
        return cls(
            time=read_int(data, "time"),
            summary=read_str(data, "summary"),
            icon=read_str(data, "icon"),
            sunrise_time=read_int(data, "sunriseTime"),
            sunset_time=read_int(data, "sunsetTime"),
            moon_phase=read_float(data, "moonPhase"),
            precip_intensity=read_float(data, "precipIntensity"),
            precip_intensity_max=read_float(data, "precipIntensityMax"),
            precip_intensity_max_time=read_int(data, "precipIntensityMaxTime"),
            precip_probability=read_float(data, "precipProbability"),
            precip_type=read_str(data, "precipType"),
            temperature_high=read_float(data, "temperatureHigh"),
            temperature_high_time=read_int(data, "temperatureHighTime"),
            temperature_low=read_float(data, "temperatureLow"),
            temperature_low_time=read_int(data, "temperatureLowTime"),
            apparent_temperature_high=read_float(data, "apparentTemperatureHigh"),
            apparent_temperature_high_time=read_int(data, "apparentTemperatureHighTime"),
            apparent_temperature_low=read_float(data, "apparentTemperatureLow"),
            apparent_temperature_low_time=read_int(data, "apparentTemperatureLowTime"),
            dew_point=read_float(data, "dewPoint"),
            humidity=read_float(data, "humidity"),
            pressure=read_float(data, "pressure"),
            wind_speed=read_float(data, "windSpeed"),
            wind_gust=read_float(data, "windGust"),
            wind_gust_time=read_int(data, "windGustTime"),
            wind_bearing=read_int(data, "windBearing"),
            cloud_cover=read_float(data, "cloudCover"),
            uv_index=read_int(data, "uvIndex"),
            uv_index_time=read_int(data, "uvIndexTime"),
            visibility=read_float(data, "visibility"),
            ozone=read_float(data, "ozone"),
            temperature_min=read_float(data, "temperatureMin"),
            temperature_min_time=read_int(data, "temperatureMinTime"),
            temperature_max=read_float(data, "temperatureMax"),
            temperature_max_time=read_int(data, "temperatureMaxTime"),
            apparent_temperature_min=read_float(data, "apparentTemperatureMin"),
            apparent_temperature_min_time=read_int(data, "apparentTemperatureMinTime"),
            apparent_temperature_max=read_float(data, "apparentTemperatureMax"),
            apparent_temperature_max_time=read_int(data, "apparentTemperatureMaxTime"),
        )


@dataclass(frozen=True)
class DailyBlock:
    summary: str = ""
    icon: str = ""
    data: tuple[DailyPoint, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DailyBlock":
        return cls(
            summary=read_str(data, "summary"),
            icon=read_str(data, "icon"),
            data=tuple(DailyPoint.from_dict(p) for p in read_objects(data, "data")),
        )


@dataclass(frozen=True)
class Alert:
    title: str = ""
    time: int = 0
    expires: int = 0
    description: str = ""
    uri: str = ""
    severity: str = ""
    regions: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Alert":
        return cls(
            title=read_str(data, "title"),
            time=read_int(data, "time"),
            expires=read_int(data, "expires"),
            description=read_str(data, "description"),
            uri=read_str(data, "uri"),
            severity=read_str(data, "severity"),
            regions=read_strs(data, "regions"),
        )


@dataclass(frozen=True)
class Flags:
    sources: tuple[str, ...] = ()
    nearest_station: float = 0.0
    units: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Flags":
        return cls(
            sources=read_strs(data, "sources"),
            nearest_station=read_float(data, "nearest-station"),
            units=read_str(data, "units"),
        )


@dataclass(frozen=True)
class Forecast:
    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""  # IANA name, e.g. "America/Los_Angeles"
    offset: float = 0.0
    currently: CurrentConditions = field(default_factory=CurrentConditions)
    minutely: MinutelyBlock = field(default_factory=MinutelyBlock)
    hourly: HourlyBlock = field(default_factory=HourlyBlock)
    daily: DailyBlock = field(default_factory=DailyBlock)
    alerts: tuple[Alert, ...] = ()
    flags: Flags = field(default_factory=Flags)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Forecast":
        """Build a Forecast from a decoded API response document."""
        return cls(
            latitude=read_float(data, "latitude"),
            longitude=read_float(data, "longitude"),
            timezone=read_str(data, "timezone"),
            offset=read_float(data, "offset"),
            currently=CurrentConditions.from_dict(read_object(data, "currently")),
            minutely=MinutelyBlock.from_dict(read_object(data, "minutely")),
            hourly=HourlyBlock.from_dict(read_object(data, "hourly")),
            daily=DailyBlock.from_dict(read_object(data, "daily")),
            alerts=tuple(Alert.from_dict(a) for a in read_objects(data, "alerts")),
            flags=Flags.from_dict(read_object(data, "flags")),
        )

    def current_temperature(self) -> float:
        """Current temperature in Fahrenheit, as reported by the API."""
        return self.currently.temperature

    def local_time(self) -> datetime:
        """Time of the forecast, localized to the forecast's timezone.

        Raises TimezoneUnavailableError if the timezone cannot be loaded and
        DecodeError if the timestamp is out of range.
        """
        return self.localize(self.currently.time)

    def localize(self, timestamp: int) -> datetime:
        """Convert a UNIX timestamp from this forecast to local wall-clock time.

        Raises the same errors as local_time.
        """
        return from_unix(timestamp).astimezone(_load_zone(self.timezone))


def decode_forecast(body: bytes | str) -> Forecast:
    """Parse a JSON response body into a Forecast.

    Raises DecodeError for malformed JSON or a document of the wrong shape.
    """
    try:
        data = json.loads(body, parse_constant=_reject_constant)
    except ValueError as e:
        raise DecodeError(f"Invalid forecast JSON: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError("Forecast document must be a JSON object")
    return Forecast.from_dict(data)


def _reject_constant(name: str) -> float:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON token {name!r}")


def _load_zone(name: str) -> tzinfo:
    # An empty name resolves to UTC.
    if not name:
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneUnavailableError(name) from e
