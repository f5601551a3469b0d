from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Tuple

import requests

from . import config

log = logging.getLogger(__name__)


class ClientError(Exception):
    """The weather provider could not be reached or its answer was unusable."""


def _number(obj: Any, key: str) -> float:
    value = obj[key]
    # bool is an int subclass but never a valid reading
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} should be a number, got {value!r}")
    return float(value)


def _text(obj: Any, key: str) -> str:
    value = obj[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} should be a string, got {value!r}")
    return value


@dataclass(frozen=True)
class WeatherQuery:
    city: str
    country_code: str


@dataclass(frozen=True)
class Condition:
    description: str


@dataclass(frozen=True)
class WeatherResponse:
    conditions: Tuple[Condition, ...]
    temperature_c: float
    humidity_pct: float
    pressure_hpa: float
    wind_speed_ms: float
    name: str

    @classmethod
    def from_json(cls, payload: Any) -> "WeatherResponse":
        """Build a response from an OpenWeatherMap current-weather document.

        Raises ClientError when the document lacks the expected fields or has
        no weather conditions. Provider error documents carry a ``message``
        field, which becomes the error text.
        """
        try:
            conditions = tuple(
                Condition(_text(w, "description")) for w in payload["weather"]
            )
            main = payload["main"]
            response = cls(
                conditions=conditions,
                temperature_c=_number(main, "temp"),
                humidity_pct=_number(main, "humidity"),
                pressure_hpa=_number(main, "pressure"),
                wind_speed_ms=_number(payload["wind"], "speed"),
                name=_text(payload, "name"),
            )
        except (KeyError, TypeError, ValueError) as exc:
            if isinstance(payload, dict) and payload.get("message"):
                raise ClientError(str(payload["message"])) from exc
            raise ClientError(f"malformed response: missing or invalid {exc}") from exc
        if not response.conditions:
            raise ClientError("malformed response: no weather conditions")
        return response

    @property
    def description(self) -> str:
        return self.conditions[0].description


def build_url(city: str, country_code: str, api_key: str) -> str:
    # city and country are inserted as typed
    return (
        f"{config.API_URL}?q={city},{country_code}"
        f"&units={config.UNITS}&appid={api_key}"
    )


def fetch_weather(city: str, country_code: str, api_key: str) -> WeatherResponse:
    """Fetch current weather for ``city, country_code`` with one blocking GET."""
    log.debug("requesting weather for %s,%s", city, country_code)
    try:
        resp = requests.get(build_url(city, country_code, api_key))
    except requests.RequestException as exc:
        raise ClientError(str(exc)) from exc
    try:
        payload = resp.json()
    except ValueError as exc:
        raise ClientError(f"invalid JSON in response: {exc}") from exc
    return WeatherResponse.from_json(payload)
