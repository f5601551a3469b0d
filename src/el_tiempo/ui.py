from __future__ import annotations

from rich.text import Text

from . import config
from .client import WeatherResponse
from .icons import classify_temperature
from .translations import translate

# English description -> Rich style for the whole block
CONDITION_STYLES: dict[str, str] = {
    "clear sky": config.STYLE_CLEAR,
    "few clouds": config.STYLE_CLOUDS,
    "scattered clouds": config.STYLE_CLOUDS,
    "broken clouds": config.STYLE_CLOUDS,
    "overcast clouds": config.STYLE_MUTED,
    "mist": config.STYLE_MUTED,
    "haze": config.STYLE_MUTED,
    "smoke": config.STYLE_MUTED,
    "sand": config.STYLE_MUTED,
    "dust": config.STYLE_MUTED,
    "fog": config.STYLE_MUTED,
    "squalls": config.STYLE_MUTED,
    "shower rain": config.STYLE_PRECIPITATION,
    "rain": config.STYLE_PRECIPITATION,
    "thunderstorm": config.STYLE_PRECIPITATION,
    "snow": config.STYLE_PRECIPITATION,
}


def to_kmh(speed_ms: float) -> float:
    return speed_ms * config.KMH_PER_MS


def style_for(description: str) -> str:
    return CONDITION_STYLES.get(description, config.STYLE_DEFAULT)


def format_weather(response: WeatherResponse) -> str:
    description = response.description
    return (
        f"El Tiempo en {response.name}: {translate(description)} "
        f"{classify_temperature(response.temperature_c)}\n"
        f"        > Temperatura: {response.temperature_c:.1f}ºC\n"
        f"        > Humedad: {response.humidity_pct:.1f}%\n"
        f"        > Presión atmosférica: {response.pressure_hpa:.1f} hPa\n"
        f"        > Velocidad del viento: {to_kmh(response.wind_speed_ms):.1f} km/h"
    )


def render(response: WeatherResponse) -> Text:
    """Weather block styled by the untranslated condition description."""
    return Text(format_weather(response), style=style_for(response.description))
