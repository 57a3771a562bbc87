"""Logging helper for ftl_i18n.

Only the package logger (``ftl_i18n``) carries a handler and a level; module
loggers stay at NOTSET and propagate to it.
"""
import logging

ROOT_NAME = "ftl_i18n"


def get_logger(name: str = ROOT_NAME) -> logging.Logger:
    root = logging.getLogger(ROOT_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        handler.setFormatter(fmt)
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return logging.getLogger(name)


def set_level(level: str) -> None:
    """Apply a level name (e.g. ``DEBUG``) to every ftl_i18n logger."""
    get_logger().setLevel(level)
