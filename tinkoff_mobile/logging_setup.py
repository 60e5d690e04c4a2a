"""Logging configuration for the Tinkoff Mobile client."""

import logging

import colorlog

log = logging.getLogger("tinkoff-mobile")


def setup_logging(debug: bool = False) -> None:
    """Attach a coloured console handler to the package logger.

    The library never calls this itself; applications opt in.
    """
    level = logging.DEBUG if debug else logging.INFO
    log.setLevel(level)
    log.handlers.clear()

    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
        datefmt="%H:%M:%S",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "bold_red",
        },
    ))
    log.addHandler(handler)
