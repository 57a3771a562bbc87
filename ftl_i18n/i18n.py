"""Process-wide translation lookups.

The active locale and catalog are resolved once, on first use, from
``I18N_ID`` (default ``en-US``) and ``I18N_DIR`` (default
``./assets/locales/``). After that they never change.

Usage::

    from ftl_i18n import i18n

    i18n.get("hello")                                    # "Hello"
    i18n.new("greeting").set_args("name", "Bob").build()  # "Hello, Bob!"

    builder = i18n.new("user_info").set_args("user", "Carol").set_args("time", "morning")
    builder.args("greeting")   # same arguments, different message
"""
from __future__ import annotations

import threading
from typing import Any, Dict, Optional

from ftl_i18n.config import get_settings
from ftl_i18n.errors import LoaderBuildError, LocaleParseError, CatalogError
from ftl_i18n.utils.catalog import FluentCatalog
from ftl_i18n.utils.locale import locale_tag, parse_locale
from ftl_i18n.utils.logger import get_logger, set_level

logger = get_logger(__name__)


class I18n:
    """Active locale plus the catalog built for it."""

    __slots__ = ("locale", "loader")

    def __init__(self, locale: str, loader: FluentCatalog):
        self.locale = locale
        self.loader = loader

    def __repr__(self) -> str:
        return f"I18n(locale={self.locale!r}, directory={str(self.loader.directory)!r})"


_instance: Optional[I18n] = None
_lock = threading.Lock()


def _load() -> I18n:
    settings = get_settings()
    if not settings.validate(["I18N_LOG_LEVEL"]):
        set_level(settings.I18N_LOG_LEVEL)

    try:
        locale = locale_tag(parse_locale(settings.I18N_ID))
    except ValueError as exc:
        logger.error("invalid I18N_ID %r: %s", settings.I18N_ID, exc)
        raise LocaleParseError() from exc

    try:
        loader = FluentCatalog.build(settings.I18N_DIR, locale, use_isolating=False)
    except CatalogError as exc:
        logger.error("cannot load translations from %s: %s", settings.I18N_DIR, exc)
        raise LoaderBuildError() from exc

    logger.info(
        "i18n ready: locale=%s, %d messages, dir=%s",
        locale, loader.message_count(locale), settings.I18N_DIR,
    )
    return I18n(locale, loader)


def init() -> I18n:
    """Return the process-wide instance, building it on first call.

    Safe to call from several threads at once: exactly one of them builds the
    catalog, the others wait and get the same instance. Call it at start-up to
    surface configuration errors before the first translation is requested.
    Raises LocaleParseError or LoaderBuildError when the configuration is
    unusable; nothing is cached in that case.
    """
    global _instance
    inst = _instance
    if inst is not None:
        return inst
    with _lock:
        if _instance is None:
            _instance = _load()
        return _instance


def current_locale() -> str:
    return init().locale


def get(key: Any) -> str:
    """Translate ``key`` for the active locale without arguments.

    Unknown keys come back unchanged.
    """
    cfg = init()
    return cfg.loader.lookup(cfg.locale, str(key))


class I18nBuilder:
    """Collects named arguments for a parameterized lookup.

    ``set_args`` returns the builder so calls can be chained; ``build`` looks
    up the builder's own key and ``args`` looks up another key with the same
    arguments.
    """

    def __init__(self, key: Any):
        self.key = str(key)
        self._args: Dict[str, str] = {}

    def set_args(self, key: Any, value: Any) -> "I18nBuilder":
        self._args[str(key)] = str(value)
        return self

    def args(self, key: Any) -> str:
        if not self._args:
            return get(key)
        cfg = init()
        return cfg.loader.lookup_with_args(cfg.locale, str(key), self._args)

    def build(self) -> str:
        return self.args(self.key)

    def __repr__(self) -> str:
        return f"I18nBuilder(key={self.key!r}, args={self._args!r})"


def new(key: Any) -> I18nBuilder:
    return I18nBuilder(key)
