import dataclasses

import pytest

from el_tiempo import config
from el_tiempo.aliases import apply_display_override, resolve_city
from el_tiempo.ui import format_weather, render, style_for, to_kmh

from conftest import make_response


def test_to_kmh():
    assert to_kmh(10.0) == 36.0
    assert to_kmh(0.0) == 0.0


@pytest.mark.parametrize(
    "description, style",
    [
        ("clear sky", config.STYLE_CLEAR),
        ("few clouds", config.STYLE_CLOUDS),
        ("scattered clouds", config.STYLE_CLOUDS),
        ("broken clouds", config.STYLE_CLOUDS),
        ("overcast clouds", config.STYLE_MUTED),
        ("mist", config.STYLE_MUTED),
        ("haze", config.STYLE_MUTED),
        ("smoke", config.STYLE_MUTED),
        ("sand", config.STYLE_MUTED),
        ("dust", config.STYLE_MUTED),
        ("fog", config.STYLE_MUTED),
        ("squalls", config.STYLE_MUTED),
        ("shower rain", config.STYLE_PRECIPITATION),
        ("rain", config.STYLE_PRECIPITATION),
        ("thunderstorm", config.STYLE_PRECIPITATION),
        ("snow", config.STYLE_PRECIPITATION),
        ("tornado", config.STYLE_DEFAULT),
        ("light rain", config.STYLE_DEFAULT),
        ("lluvia", config.STYLE_DEFAULT),
    ],
)
def test_style_for(description, style):
    assert style_for(description) == style


def test_style_depends_on_description_only():
    hot = render(make_response("rain", temp=40.0, name="Sevilla"))
    cold = render(make_response("rain", temp=-5.0, wind_speed_ms=0.0))
    assert hot.style == cold.style == config.STYLE_PRECIPITATION


def test_format_weather():
    text = format_weather(make_response("clear sky", temp=21.5, name="Madrid"))
    assert text.splitlines() == [
        f"El Tiempo en Madrid: cielo despejado {config.EMOJI_WARM}",
        "        > Temperatura: 21.5ºC",
        "        > Humedad: 40.0%",
        "        > Presión atmosférica: 1015.0 hPa",
        "        > Velocidad del viento: 36.0 km/h",
    ]


def test_untranslated_description_is_shown_as_is():
    text = render(make_response("light rain", temp=-1.0)).plain
    assert "light rain " + config.EMOJI_FREEZING in text


@pytest.mark.parametrize("typed", ["fraga bby", "FRAGA BBY", "Fraga Bby"])
def test_alias_queries_ripoll_and_displays_alias(typed):
    assert resolve_city(typed) == "Ripoll"
    resp = make_response(name="Ripoll")
    shown = apply_display_override(typed, resp)
    assert shown.name == "fraga bby"
    assert resp.name == "Ripoll"


def test_farga_alias():
    assert resolve_city("la farga de bebié") == "Ripoll"
    shown = apply_display_override("LA FARGA DE BEBIé", make_response(name="Ripoll"))
    assert shown.name == "La Farga de Bebié"


def test_non_alias_untouched():
    resp = make_response(name="Madrid")
    assert resolve_city("Madrid") == "Madrid"
    assert apply_display_override("Madrid", resp) is resp


def test_response_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        make_response().name = "x"  # type: ignore[misc]
