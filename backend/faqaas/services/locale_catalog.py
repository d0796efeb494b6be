# faqaas/services/locale_catalog.py
import logging

from babel import Locale as BabelLocale, UnknownLocaleError
from werkzeug.datastructures import LanguageAccept
from werkzeug.http import parse_accept_header

from faqaas.errors import ConfigError
from faqaas.schemas import Locale

logger = logging.getLogger(__name__)


def parse_locale_codes(raw: str) -> list[str]:
    """Splits the SUPPORTED_LOCALES setting, e.g. "en,de, pt-BR"."""
    return [code.strip() for code in raw.split(",") if code.strip()]


def locale_from_code(code: str) -> Locale:
    """Resolves the English and the self-name of a language tag via CLDR."""
    try:
        tag = BabelLocale.parse(code, sep="-")
    except (ValueError, TypeError, UnknownLocaleError) as e:
        raise ConfigError(f"Invalid locale code {code!r}: {e}") from e

    return Locale(
        code=code,
        name_en=tag.get_display_name("en"),
        name_local=tag.get_display_name(),
    )


def load_supported_locales(codes: list[str]) -> list[Locale]:
    if not codes:
        raise ConfigError("SUPPORTED_LOCALES missing or wrong")
    return [locale_from_code(code) for code in codes]


class LocaleCatalog:
    """
    The configured locales plus best-match negotiation over them.

    Built once at startup and only read afterwards.
    """

    def __init__(self, locales: list[Locale]):
        if not locales:
            raise ConfigError("SUPPORTED_LOCALES missing or wrong")
        self._locales = tuple(locales)
        self._by_code = {loc.code: loc for loc in self._locales}

    @classmethod
    def from_setting(cls, raw: str) -> "LocaleCatalog":
        catalog = cls(load_supported_locales(parse_locale_codes(raw)))
        logger.info("Supported locales: %s", ", ".join(catalog.codes))
        return catalog

    @property
    def locales(self) -> list[Locale]:
        return list(self._locales)

    @property
    def codes(self) -> list[str]:
        return [loc.code for loc in self._locales]

    @property
    def default_locale(self) -> Locale:
        return self._locales[0]

    def get(self, code: str) -> Locale | None:
        return self._by_code.get(code)

    def __contains__(self, code: str) -> bool:
        return code in self._by_code

    def match_locale(self, cookie_value: str | None, accept_header: str | None) -> str:
        """
        Picks the closest supported code. The cookie preference wins over the
        Accept-Language header; without a usable signal the default is used.
        """
        for preference in (cookie_value, accept_header):
            if not preference:
                continue
            accepted = parse_accept_header(preference, LanguageAccept)
            match = accepted.best_match(self.codes)
            if match is not None:
                return match
        return self.default_locale.code
