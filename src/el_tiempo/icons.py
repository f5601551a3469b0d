from __future__ import annotations

from . import config


def classify_temperature(temp_c: float) -> str:
    """Map a temperature in °C to the emoji of its band.

    Bands are half-open, [lower, upper), so every value lands in exactly one.
    """
    if temp_c < config.TEMP_FREEZING_C:
        return config.EMOJI_FREEZING
    if temp_c < config.TEMP_COLD_C:
        return config.EMOJI_COLD
    if temp_c < config.TEMP_MILD_C:
        return config.EMOJI_MILD
    if temp_c < config.TEMP_WARM_C:
        return config.EMOJI_WARM
    if temp_c < config.TEMP_HOT_C:
        return config.EMOJI_HOT
    return config.EMOJI_SCORCHING
