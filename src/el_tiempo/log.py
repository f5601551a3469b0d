from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from . import config


def setup_logging(level: Optional[str] = None, console: Optional[Console] = None) -> None:
    """Route log records through Rich on stderr.

    The level comes from EL_TIEMPO_LOG_LEVEL when not given.
    """
    level = (level or config.log_level()).upper()
    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        show_path=False,
        log_time_format=config.LOG_TIME_FORMAT,
    )
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.WARNING))
    # replace any handler from an earlier call
    for h in list(root.handlers):
        if isinstance(h, RichHandler):
            root.removeHandler(h)
    root.addHandler(handler)
    logging.getLogger("urllib3").setLevel(logging.WARNING)
