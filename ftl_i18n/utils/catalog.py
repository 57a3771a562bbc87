"""Fluent-backed translation catalog.

Expected layout on disk::

    <directory>/
        en-US/
            main.ftl
            errors/forms.ftl
        fr-FR/
            main.ftl

Every immediate sub-directory named after a locale holds the ``.ftl`` files of
that locale (searched recursively). Parsing and pattern formatting are done by
``fluent.syntax`` and ``fluent.runtime``; this module only walks the
directory, rejects broken resources and keeps one compiled bundle per locale.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from fluent.runtime import FluentBundle
from fluent.syntax import FluentParser, ast

from ftl_i18n.errors import CatalogError
from ftl_i18n.utils.locale import canonical_tag, parse_locale
from ftl_i18n.utils.logger import get_logger

logger = get_logger(__name__)

RESOURCE_SUFFIX = ".ftl"
# plural rules and number formats for tags CLDR does not know
FORMAT_FALLBACK = "en"


def _junk_errors(path: Path, source: str, resource: ast.Resource) -> List[str]:
    errors: List[str] = []
    for entry in resource.body:
        if not isinstance(entry, ast.Junk):
            continue
        start = entry.span.start if entry.span is not None else 0
        line = source.count("\n", 0, start) + 1
        reason = entry.annotations[0].message if entry.annotations else "invalid syntax"
        errors.append(f"{path}:{line}: {reason}")
    return errors


def _bundle_locales(tag: str) -> List[str]:
    locales = [tag]
    for extra in (parse_locale(tag).language, FORMAT_FALLBACK):
        if extra not in locales:
            locales.append(extra)
    return locales


def _entry_id(entry: Any) -> Optional[str]:
    if isinstance(entry, ast.Message):
        return entry.id.name
    if isinstance(entry, ast.Term):
        return "-" + entry.id.name
    return None


class _LocaleResources:
    """Compiled messages of one locale."""

    def __init__(self, tag: str, use_isolating: bool):
        self.tag = tag
        self.bundle = FluentBundle(_bundle_locales(tag), use_isolating=use_isolating)
        self.files: List[Path] = []
        self._origins: Dict[str, Path] = {}
        self.messages: Dict[str, Any] = {}

    def add_file(self, path: Path, parser: FluentParser) -> None:
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise CatalogError(f"cannot read {path}: {exc}") from exc

        resource = parser.parse(source)
        errors = _junk_errors(path, source, resource)
        if errors:
            raise CatalogError("invalid Fluent syntax:\n" + "\n".join(errors))

        for entry in resource.body:
            entry_id = _entry_id(entry)
            if entry_id is None:
                continue
            if entry_id in self._origins:
                raise CatalogError(
                    f"{self.tag}: {entry_id!r} defined in both "
                    f"{self._origins[entry_id]} and {path}"
                )
            self._origins[entry_id] = path

        self.bundle.add_resource(resource)
        self.files.append(path)

    def compile(self) -> None:
        # messages are compiled here; terms are compiled by the bundle on first reference
        for entry_id in self._origins:
            if entry_id.startswith("-"):
                continue
            self.messages[entry_id] = self.bundle.get_message(entry_id)

    def pattern(self, key: str) -> Any:
        message = self.messages.get(key)
        if message is not None:
            return message.value
        if "." in key:
            message_id, attribute = key.split(".", 1)
            message = self.messages.get(message_id)
            if message is not None:
                return message.attributes.get(attribute)
        return None


class FluentCatalog:
    """Read-only mapping of (locale, key) to formatted Fluent messages.

    Build it with ``FluentCatalog.build``; lookups of unknown locales, messages
    or attributes return the key unchanged.
    """

    def __init__(self, directory: Path, resources: Dict[str, _LocaleResources]):
        self.directory = directory
        self._resources = resources

    @classmethod
    def build(
        cls,
        directory: Union[str, Path],
        locale: str,
        use_isolating: bool = True,
    ) -> "FluentCatalog":
        """Load every locale found under ``directory``.

        ``locale`` is the locale lookups are expected to use; a warning is
        logged when nothing was found for it. Raises CatalogError when the
        directory is missing or a resource is unreadable, malformed or
        redefines a message.
        """
        root = Path(directory)
        if not root.is_dir():
            raise CatalogError(f"locale directory not found: {root}")

        parser = FluentParser()
        resources: Dict[str, _LocaleResources] = {}
        for child in sorted(root.iterdir()):
            if not child.is_dir():
                continue
            try:
                tag = canonical_tag(child.name)
            except ValueError:
                logger.debug("skipping %s: not a locale directory", child)
                continue
            if tag in resources:
                raise CatalogError(f"locale {tag} provided by more than one directory under {root}")

            res = _LocaleResources(tag, use_isolating)
            for path in sorted(child.rglob("*" + RESOURCE_SUFFIX)):
                if path.is_file():
                    res.add_file(path, parser)
            res.compile()
            resources[tag] = res
            logger.debug("loaded %d messages for %s from %d files", len(res.messages), tag, len(res.files))

        wanted = canonical_tag(locale)
        if wanted not in resources or not resources[wanted].messages:
            logger.warning("no messages found for locale %s under %s", wanted, root)

        return cls(root, resources)

    @property
    def locales(self) -> List[str]:
        return sorted(self._resources)

    def message_count(self, locale: str) -> int:
        res = self._resources.get(locale)
        return len(res.messages) if res is not None else 0

    def has_message(self, locale: str, key: str) -> bool:
        res = self._resources.get(locale)
        return res is not None and res.pattern(key) is not None

    def _format(self, locale: str, key: str, args: Optional[Mapping[str, Any]]) -> str:
        res = self._resources.get(locale)
        pattern = res.pattern(key) if res is not None else None
        if pattern is None:
            logger.debug("missing message %r for locale %s", key, locale)
            return key
        value, errors = res.bundle.format_pattern(pattern, args)
        for err in errors:
            logger.debug("formatting %r for %s: %s", key, locale, err)
        return str(value)

    def lookup(self, locale: str, key: str) -> str:
        return self._format(locale, key, None)

    def lookup_with_args(self, locale: str, key: str, args: Mapping[str, Any]) -> str:
        return self._format(locale, key, dict(args))

