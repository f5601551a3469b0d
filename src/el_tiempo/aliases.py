from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from .client import WeatherResponse


@dataclass(frozen=True)
class Alias:
    query_city: str
    display_name: str


# Keyed by the lowercased name the user types
ALIASES: Mapping[str, Alias] = MappingProxyType(
    {
        "la farga de bebié": Alias("Ripoll", "La Farga de Bebié"),
        "fraga bby": Alias("Ripoll", "fraga bby"),
    }
)


def lookup(raw_city: str) -> Optional[Alias]:
    return ALIASES.get(raw_city.lower())


def resolve_city(raw_city: str) -> str:
    """City to send to the provider for what the user typed."""
    alias = lookup(raw_city)
    return alias.query_city if alias else raw_city


def apply_display_override(raw_city: str, response: WeatherResponse) -> WeatherResponse:
    alias = lookup(raw_city)
    if alias is None:
        return response
    return dataclasses.replace(response, name=alias.display_name)
