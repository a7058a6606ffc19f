"""
culturesite/localization/providers.py

Preference sources a request culture can come from. Each source is a
tagged CultureProvider; extract_candidates() dispatches on the tag.
"""
import enum
from dataclasses import dataclass, field
from typing import Callable, Optional

from .culture import RequestCulture

DEFAULT_COOKIE_NAME = ".Culture"
DEFAULT_QUERY_KEY = "culture"
DEFAULT_UI_QUERY_KEY = "ui-culture"
DEFAULT_MAX_ACCEPT_LANGUAGES = 3

_CULTURE_PREFIX = "c="
_UI_CULTURE_PREFIX = "uic="
_COOKIE_SEPARATOR = "|"


class ProviderKind(str, enum.Enum):
    QUERY_STRING = "query_string"
    COOKIE = "cookie"
    ACCEPT_LANGUAGE = "accept_language"
    CUSTOM = "custom"


@dataclass(frozen=True)
class ProviderResult:
    """Candidate tags, best first, as found in the request."""

    cultures: tuple
    ui_cultures: tuple = ()

    def __post_init__(self):
        if not self.ui_cultures:
            object.__setattr__(self, "ui_cultures", tuple(self.cultures))


@dataclass(frozen=True)
class CultureProvider:
    kind: ProviderKind
    query_key: str = DEFAULT_QUERY_KEY
    ui_query_key: str = DEFAULT_UI_QUERY_KEY
    cookie_name: str = DEFAULT_COOKIE_NAME
    max_languages: int = DEFAULT_MAX_ACCEPT_LANGUAGES
    custom: Optional[Callable] = field(default=None, compare=False)

    @property
    def name(self) -> str:
        return self.kind.value


def query_string_provider(query_key=DEFAULT_QUERY_KEY, ui_query_key=DEFAULT_UI_QUERY_KEY):
    return CultureProvider(ProviderKind.QUERY_STRING, query_key=query_key, ui_query_key=ui_query_key)


def cookie_provider(cookie_name=DEFAULT_COOKIE_NAME):
    return CultureProvider(ProviderKind.COOKIE, cookie_name=cookie_name)


def accept_language_provider(max_languages=DEFAULT_MAX_ACCEPT_LANGUAGES):
    return CultureProvider(ProviderKind.ACCEPT_LANGUAGE, max_languages=max_languages)


def custom_provider(func: Callable):
    return CultureProvider(ProviderKind.CUSTOM, custom=func)


def find_cookie_provider(providers):
    """First cookie-capable provider in configured order, or None."""
    return next((p for p in providers if p.kind is ProviderKind.COOKIE), None)


# ── Cookie value codec ─────────────────────────────────────────────────────────

def make_cookie_value(request_culture: RequestCulture) -> str:
    """RequestCulture('fr-FR') -> 'c=fr-FR|uic=fr-FR'"""
    return (
        f"{_CULTURE_PREFIX}{request_culture.culture}"
        f"{_COOKIE_SEPARATOR}"
        f"{_UI_CULTURE_PREFIX}{request_culture.ui_culture}"
    )


def parse_cookie_value(value):
    """
    Inverse of make_cookie_value(). Either half on its own is used for
    both; returns None when the value carries neither.
    """
    if not value:
        return None

    parts = value.split(_COOKIE_SEPARATOR)
    if len(parts) > 2:
        return None

    culture = ui_culture = None
    for part in parts:
        part = part.strip()
        if part.startswith(_UI_CULTURE_PREFIX):
            ui_culture = part[len(_UI_CULTURE_PREFIX):] or None
        elif part.startswith(_CULTURE_PREFIX):
            culture = part[len(_CULTURE_PREFIX):] or None
        else:
            return None

    if culture is None and ui_culture is None:
        return None
    return RequestCulture(culture or ui_culture, ui_culture or culture)


# ── Extraction ─────────────────────────────────────────────────────────────────

def _from_query_string(provider: CultureProvider, request):
    culture = (request.args.get(provider.query_key) or "").strip()
    ui_culture = (request.args.get(provider.ui_query_key) or "").strip()
    if not culture and not ui_culture:
        return None
    culture = culture or ui_culture
    ui_culture = ui_culture or culture
    return ProviderResult((culture,), (ui_culture,))


def _from_cookie(provider: CultureProvider, request):
    parsed = parse_cookie_value(request.cookies.get(provider.cookie_name))
    if parsed is None:
        return None
    return ProviderResult((parsed.culture,), (parsed.ui_culture,))


def _from_accept_language(provider: CultureProvider, request):
    tags = []
    for value, quality in request.accept_languages:
        if value == "*" or quality <= 0:
            continue
        tags.append(value)
        if len(tags) >= provider.max_languages:
            break
    if not tags:
        return None
    return ProviderResult(tuple(tags))


def _from_custom(provider: CultureProvider, request):
    return provider.custom(request)


_EXTRACTORS = {
    ProviderKind.QUERY_STRING: _from_query_string,
    ProviderKind.COOKIE: _from_cookie,
    ProviderKind.ACCEPT_LANGUAGE: _from_accept_language,
    ProviderKind.CUSTOM: _from_custom,
}


def extract_candidates(provider: CultureProvider, request) -> Optional[ProviderResult]:
    return _EXTRACTORS[provider.kind](provider, request)
