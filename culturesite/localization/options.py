"""
culturesite/localization/options.py

Immutable localization settings, built once from app.config in the
app factory and handed to whoever needs them.
"""
from dataclasses import dataclass
from typing import Optional

from .culture import RequestCulture, normalize_tag
from .providers import (
    DEFAULT_COOKIE_NAME,
    DEFAULT_MAX_ACCEPT_LANGUAGES,
    ProviderKind,
    accept_language_provider,
    cookie_provider,
    find_cookie_provider,
    query_string_provider,
)


class LocalizationConfigError(ValueError):
    """Raised at start-up when the localization settings make no sense."""


@dataclass(frozen=True)
class LocalizationOptions:
    default_culture: RequestCulture
    supported_cultures: tuple
    supported_ui_cultures: tuple
    providers: tuple
    fallback_to_parent_cultures: bool = True
    fallback_to_parent_ui_cultures: bool = True
    apply_content_language: bool = False
    cookie_max_age: Optional[int] = None
    cookie_secure: bool = False

    def __post_init__(self):
        if self.default_culture.culture not in self.supported_cultures:
            raise LocalizationConfigError(
                f"Default culture {self.default_culture.culture!r} is not "
                f"one of the supported cultures {list(self.supported_cultures)}."
            )
        if self.default_culture.ui_culture not in self.supported_ui_cultures:
            raise LocalizationConfigError(
                f"Default UI culture {self.default_culture.ui_culture!r} is not "
                f"one of the supported UI cultures {list(self.supported_ui_cultures)}."
            )

    @property
    def cookie_provider(self):
        return find_cookie_provider(self.providers)

    @classmethod
    def from_config(cls, config, providers=None) -> "LocalizationOptions":
        supported = _tags(config.get("SUPPORTED_CULTURES"), "SUPPORTED_CULTURES")
        if not supported:
            raise LocalizationConfigError("SUPPORTED_CULTURES must not be empty.")
        supported_ui = _tags(
            config.get("SUPPORTED_UI_CULTURES") or supported, "SUPPORTED_UI_CULTURES"
        )

        default = _tag(config.get("DEFAULT_CULTURE") or supported[0], "DEFAULT_CULTURE")

        return cls(
            default_culture=RequestCulture.from_tag(default),
            supported_cultures=supported,
            supported_ui_cultures=supported_ui,
            providers=tuple(providers) if providers is not None else _providers(config),
            fallback_to_parent_cultures=config.get("FALLBACK_TO_PARENT_CULTURES", True),
            fallback_to_parent_ui_cultures=config.get("FALLBACK_TO_PARENT_UI_CULTURES", True),
            apply_content_language=config.get("LOCALIZATION_APPLY_CONTENT_LANGUAGE", False),
            cookie_max_age=_int(config, "LOCALIZATION_COOKIE_MAX_AGE", None, minimum=0),
            cookie_secure=config.get("SESSION_COOKIE_SECURE", False),
        )


def _tag(value, setting):
    try:
        return normalize_tag(value)
    except ValueError as exc:
        raise LocalizationConfigError(f"{setting}: {exc}") from exc


def _int(config, setting, default, minimum):
    value = config.get(setting)
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise LocalizationConfigError(
            f"{setting}: expected a whole number, got {value!r}."
        ) from None
    if number < minimum:
        raise LocalizationConfigError(f"{setting}: must be at least {minimum}, got {number}.")
    return number


def _tags(values, setting):
    if isinstance(values, str):
        values = values.split(",")
    result = []
    for value in values or ():
        if not value.strip():
            continue
        tag = _tag(value, setting)
        if tag not in result:
            result.append(tag)
    return tuple(result)


def _providers(config):
    names = config.get("CULTURE_PROVIDERS", ("query_string", "cookie", "accept_language"))
    if isinstance(names, str):
        names = [n.strip() for n in names.split(",") if n.strip()]

    providers = []
    for name in names:
        try:
            kind = ProviderKind(name)
        except ValueError:
            raise LocalizationConfigError(f"Unknown culture provider {name!r}.") from None

        if kind is ProviderKind.QUERY_STRING:
            providers.append(query_string_provider())
        elif kind is ProviderKind.COOKIE:
            providers.append(cookie_provider(config.get("LOCALIZATION_COOKIE_NAME") or DEFAULT_COOKIE_NAME))
        elif kind is ProviderKind.ACCEPT_LANGUAGE:
            providers.append(
                accept_language_provider(
                    _int(
                        config,
                        "ACCEPT_LANGUAGE_MAX_LANGUAGES",
                        DEFAULT_MAX_ACCEPT_LANGUAGES,
                        minimum=1,
                    )
                )
            )
        else:
            # Custom providers need code, not config: pass them to create_app().
            raise LocalizationConfigError(
                "Custom culture providers cannot be configured by name."
            )
    return tuple(providers)
