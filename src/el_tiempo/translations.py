from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# OpenWeatherMap condition descriptions -> Spanish
TRANSLATIONS: Mapping[str, str] = MappingProxyType(
    {
        "clear sky": "cielo despejado",
        "few clouds": "pocas nubes",
        "scattered clouds": "nubes dispersas",
        "broken clouds": "nubes rotas",
        "overcast clouds": "cielo nublado",
        "mist": "neblina",
        "haze": "calina",
        "smoke": "humo",
        "sand": "arena",
        "dust": "polvo",
        "fog": "niebla",
        "shower rain": "lluvia intensa",
        "rain": "lluvia",
        "thunderstorm": "tormenta eléctrica",
        "snow": "nieve",
        "squalls": "ráfagas de viento",
        "tornado": "tornado",
    }
)


def translate(phrase: str) -> str:
    """Spanish for a known condition phrase, otherwise the phrase itself."""
    return TRANSLATIONS.get(phrase, phrase)
