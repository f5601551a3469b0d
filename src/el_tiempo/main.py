from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

from rich.console import Console

from . import config
from .aliases import apply_display_override, resolve_city
from .client import ClientError, WeatherQuery, WeatherResponse, fetch_weather
from .log import setup_logging
from .ui import render

log = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

Fetcher = Callable[[str, str, str], WeatherResponse]


class InputError(Exception):
    """Standard input could not be read."""


def read_stdin_line() -> str:
    """Next line of stdin, "" once it is exhausted."""
    try:
        return sys.stdin.readline()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(config.INPUT_ERROR_MESSAGE) from exc


def ask(prompt: str, read_line: Callable[[], str], out: Console) -> str:
    out.print(prompt, style=config.STYLE_PROMPT, highlight=False)
    return read_line().strip()


def run(
    api_key: str,
    read_line: Callable[[], str] = read_stdin_line,
    fetch: Fetcher = fetch_weather,
    out: Optional[Console] = None,
    err: Optional[Console] = None,
) -> None:
    """Ask for cities until the user stops answering "si".

    Client failures are reported on ``err`` and do not end the loop; input
    failures propagate as InputError.
    """
    if out is None:
        out = console
    if err is None:
        err = err_console

    out.print(config.BANNER, style=config.STYLE_BANNER, highlight=False)
    while True:
        raw_city = ask(config.PROMPT_CITY, read_line, out)
        country_code = ask(config.PROMPT_COUNTRY, read_line, out)
        query = WeatherQuery(resolve_city(raw_city), country_code)

        try:
            response = fetch(query.city, query.country_code, api_key)
        except ClientError as exc:
            log.info("lookup for %s,%s failed: %s", query.city, query.country_code, exc)
            err.print(f"Error: {exc}", markup=False, highlight=False)
        else:
            out.print(render(apply_display_override(raw_city, response)))

        answer = ask(config.PROMPT_CONTINUE, read_line, out).lower()
        if answer != config.CONTINUE_ANSWER:
            out.print(config.FAREWELL, style=config.STYLE_PROMPT, highlight=False)
            return


def main():
    setup_logging()
    api_key = config.api_key()
    if not api_key:
        sys.exit(f"Error: la variable de entorno {config.API_KEY_ENV} no está definida")
    try:
        run(api_key, read_line=read_stdin_line, fetch=fetch_weather)
    except InputError as exc:
        sys.exit(str(exc))
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":  # pragma: no cover
    main()
