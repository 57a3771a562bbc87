"""Exceptions raised by ftl_i18n.

Only start-up problems are errors here: a bad locale identifier or a resource
directory that cannot be loaded. Lookups themselves never raise.
"""
from __future__ import annotations

ERROR_PARSING = "Parsing language failed"
ERROR_BUILDING = "Unable to build loader"


class I18nError(RuntimeError):
    """Base class for fatal i18n configuration errors."""


class LocaleParseError(I18nError):
    def __init__(self, message: str = ERROR_PARSING):
        super().__init__(message)


class LoaderBuildError(I18nError):
    def __init__(self, message: str = ERROR_BUILDING):
        super().__init__(message)


class CatalogError(I18nError):
    """Raised by FluentCatalog.build with the concrete reason."""
