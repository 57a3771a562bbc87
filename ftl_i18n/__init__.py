"""ftl_i18n: process-wide Fluent translations configured from the environment."""
from ftl_i18n.errors import CatalogError, I18nError, LoaderBuildError, LocaleParseError
from ftl_i18n.i18n import I18nBuilder, current_locale, get, init, new

__all__ = [
    "get",
    "new",
    "init",
    "current_locale",
    "I18nBuilder",
    "I18nError",
    "LocaleParseError",
    "LoaderBuildError",
    "CatalogError",
]

__version__ = "0.1.0"
