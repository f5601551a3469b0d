from __future__ import annotations

import os

# OpenWeatherMap current weather endpoint
API_URL = "https://api.openweathermap.org/data/2.5/weather"
UNITS = "metric"

# Environment
API_KEY_ENV = "OPENWEATHER_API_KEY"
LOG_LEVEL_ENV = "EL_TIEMPO_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# m/s -> km/h
KMH_PER_MS = 3.6

# Temperature bands (°C), each threshold is the inclusive lower bound of the next band
TEMP_FREEZING_C = 0.0
TEMP_COLD_C = 10.0
TEMP_MILD_C = 20.0
TEMP_WARM_C = 30.0
TEMP_HOT_C = 35.0

# Emoji/temperature mapping
EMOJI_FREEZING = "❄️"
EMOJI_COLD = "☁️"
EMOJI_MILD = "⛅"
EMOJI_WARM = "🌤️"
EMOJI_HOT = "☀️"
EMOJI_SCORCHING = "🔥"

# Rich styles
STYLE_CLEAR = "bright_yellow"
STYLE_CLOUDS = "bright_blue"
STYLE_MUTED = "dim"
STYLE_PRECIPITATION = "bright_cyan"
STYLE_DEFAULT = ""
STYLE_BANNER = "bright_yellow"
STYLE_PROMPT = "bright_magenta"

# Text shown to the user
BANNER = "¡Bienvenide a la Estación Meteorológica!"
PROMPT_CITY = "Por favor introduzca el nombre de la ciudad:"
PROMPT_COUNTRY = (
    "Por favor introduzca el código del país "
    "(por ejemplo 'PS' para Palestina o 'SY' para Siria):"
)
PROMPT_CONTINUE = "¿Quieres ver el tiempo de otra ciudad? (si/no):"
CONTINUE_ANSWER = "si"
FAREWELL = "¡Gracias por usar el programa! :3"
INPUT_ERROR_MESSAGE = "Error de lectura del input :s"


def api_key() -> str | None:
    return os.environ.get(API_KEY_ENV) or None


def log_level() -> str:
    return os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
