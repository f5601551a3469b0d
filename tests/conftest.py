import io

import pytest
from rich.console import Console

from el_tiempo.client import Condition, WeatherResponse


def make_response(description="clear sky", temp=21.5, name="Madrid", **kwargs):
    fields = dict(
        conditions=(Condition(description),),
        temperature_c=temp,
        humidity_pct=40.0,
        pressure_hpa=1015.0,
        wind_speed_ms=10.0,
        name=name,
    )
    fields.update(kwargs)
    return WeatherResponse(**fields)


def make_payload(description="clear sky", temp=21.5, name="Madrid"):
    return {
        "weather": [{"id": 800, "main": "Clear", "description": description}],
        "main": {"temp": temp, "humidity": 40, "pressure": 1015},
        "wind": {"speed": 10.0},
        "name": name,
    }


@pytest.fixture
def consoles():
    out = Console(file=io.StringIO(), width=200)
    err = Console(file=io.StringIO(), width=200)
    return out, err
