"""Configuration loader for ftl_i18n.

Reads environment variables (and a .env file via python-dotenv). Values are
read when a ``Settings`` instance is created rather than at import time, so
the environment in effect at the first translation request is the one used.
"""
from typing import List, Optional
import logging
import os
from dotenv import load_dotenv

load_dotenv()

DEFAULT_LANG = "en-US"
DEFAULT_DIR = "./assets/locales/"
DEFAULT_LOG_LEVEL = "INFO"


def _env(name: str, default: str) -> str:
    # empty counts as unset
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


class Settings:
    """Resolved i18n settings.

    Attributes:
        I18N_ID: locale identifier of the active language (e.g. ``en-US``).
        I18N_DIR: directory holding one sub-directory of ``.ftl`` files per locale.
        I18N_LOG_LEVEL: level name for the package loggers.
    """

    def __init__(self) -> None:
        self.I18N_ID: str = _env("I18N_ID", DEFAULT_LANG)
        self.I18N_DIR: str = _env("I18N_DIR", DEFAULT_DIR)
        self.I18N_LOG_LEVEL: str = _env("I18N_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    def validate(self, required: Optional[List[str]] = None) -> List[str]:
        """Return the names of settings holding unusable values.

        Only cheap checks happen here (non-empty values, known log level).
        Whether the locale parses and the directory loads is decided when the
        catalog is built.
        """
        if required is None:
            required = ["I18N_ID", "I18N_DIR", "I18N_LOG_LEVEL"]

        bad: List[str] = []
        for name in required:
            val = getattr(self, name, None)
            if val is None or (isinstance(val, str) and not val.strip()):
                bad.append(name)
        if "I18N_LOG_LEVEL" in required and "I18N_LOG_LEVEL" not in bad:
            if not isinstance(logging.getLevelName(self.I18N_LOG_LEVEL), int):
                bad.append("I18N_LOG_LEVEL")
        return bad

    def __repr__(self) -> str:
        return f"Settings(I18N_ID={self.I18N_ID!r}, I18N_DIR={self.I18N_DIR!r})"


def get_settings() -> Settings:
    return Settings()
