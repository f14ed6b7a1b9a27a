"""Translation of labels shown to admins."""

from abc import ABC, abstractmethod
from pathlib import Path

import yaml

TRANSLATIONS_DIR = Path(__file__).parent / "translations"
DEFAULT_LOCALE = "en_US"


class Translator(ABC):
    """Abstract base class for label translators."""

    @abstractmethod
    def translate(
        self,
        key: str,
        substitutions: dict[str, object] | None = None,
        domain: str = "messages",
    ) -> str:
        """
        Translate a message key.

        Args:
            key: Source message, also used as the fallback translation.
            substitutions: Placeholders (e.g. ``%gender%``) and their values.
            domain: Catalog domain the key belongs to.

        Returns:
            The translated message with placeholders replaced.
        """


def substitute(message: str, substitutions: dict[str, object] | None) -> str:
    """Replace ``%placeholder%`` tokens in a message."""
    for placeholder, value in (substitutions or {}).items():
        message = message.replace(placeholder, str(value))
    return message


class CatalogTranslator(Translator):
    """Translator backed by per-domain message catalogs."""

    def __init__(
        self,
        catalogs: dict[str, dict[str, str]] | None = None,
        locale: str = DEFAULT_LOCALE,
    ) -> None:
        self.locale = locale
        self._catalogs: dict[str, dict[str, str]] = catalogs or {}

    def translate(
        self,
        key: str,
        substitutions: dict[str, object] | None = None,
        domain: str = "messages",
    ) -> str:
        message = self._catalogs.get(domain, {}).get(key) or key
        return substitute(message, substitutions)

    def add(self, domain: str, key: str, message: str) -> None:
        """Add or replace one catalog entry."""
        self._catalogs.setdefault(domain, {})[key] = message

    @classmethod
    def from_yaml(cls, path: Path, locale: str = DEFAULT_LOCALE) -> "CatalogTranslator":
        """
        Load catalogs from a YAML file of ``{domain: {key: message}}``.

        A missing file gives a translator that echoes keys back.
        """
        if not path.exists():
            return cls(locale=locale)

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        catalogs = {
            str(domain): {str(k): str(v) for k, v in (messages or {}).items()}
            for domain, messages in data.items()
        }
        return cls(catalogs, locale=locale)

    @classmethod
    def for_locale(
        cls, locale: str = DEFAULT_LOCALE, directory: Path | None = None
    ) -> "CatalogTranslator":
        """Load the catalog file for a locale, e.g. ``translations/fr_FR.yaml``."""
        directory = directory or TRANSLATIONS_DIR
        return cls.from_yaml(directory / f"{locale}.yaml", locale=locale)
