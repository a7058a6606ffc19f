"""
culturesite/localization/resolver.py

Per-request culture resolution. Providers are tried in configured order;
the first one whose candidates hit a supported culture wins, otherwise the
default culture applies. The result lives on flask.g for the request.

Usage:
    from ..localization.resolver import current_request_culture
"""
from dataclasses import dataclass
from typing import Optional

from babel import Locale, UnknownLocaleError
from flask import current_app, g, has_request_context, request

from .culture import RequestCulture, normalize_tag, parent_tag, to_babel_locale
from .options import LocalizationOptions
from .providers import CultureProvider, extract_candidates

EXTENSION_KEY = "localization"


@dataclass(frozen=True)
class RequestCultureFeature:
    request_culture: RequestCulture
    provider: Optional[CultureProvider] = None

    @property
    def source(self) -> str:
        return self.provider.name if self.provider else "default"


def _match(candidates, supported, fallback_to_parent: bool):
    lookup = {tag.lower(): tag for tag in supported}
    for candidate in candidates:
        try:
            tag = normalize_tag(candidate)
        except ValueError:
            continue

        while tag:
            if tag.lower() in lookup:
                return lookup[tag.lower()]
            tag = parent_tag(tag) if fallback_to_parent else None
    return None


def resolve_request_culture(req, options: LocalizationOptions) -> RequestCultureFeature:
    default = options.default_culture

    for provider in options.providers:
        result = extract_candidates(provider, req)
        if result is None:
            continue

        culture = _match(
            result.cultures, options.supported_cultures, options.fallback_to_parent_cultures
        )
        ui_culture = _match(
            result.ui_cultures,
            options.supported_ui_cultures,
            options.fallback_to_parent_ui_cultures,
        )
        if culture is None and ui_culture is None:
            continue

        return RequestCultureFeature(
            RequestCulture(culture or default.culture, ui_culture or default.ui_culture),
            provider,
        )

    return RequestCultureFeature(default)


def get_options() -> LocalizationOptions:
    return current_app.extensions[EXTENSION_KEY]


def current_request_culture() -> RequestCultureFeature:
    feature = g.get("request_culture")
    if feature is None:
        feature = resolve_request_culture(request, get_options())
        g.request_culture = feature
    return feature


def select_locale() -> str:
    """Flask-Babel locale selector: translations follow the UI culture."""
    if not has_request_context():
        return to_babel_locale(get_options().default_culture.ui_culture)
    return to_babel_locale(current_request_culture().request_culture.ui_culture)


def display_name(tag: str) -> str:
    """Name of a culture in its own language ('fr-FR' -> 'français (France)')."""
    try:
        locale = Locale.parse(to_babel_locale(tag))
    except (ValueError, UnknownLocaleError):
        return tag
    return locale.get_display_name(locale) or tag


def culture_choices(current: RequestCulture, options: LocalizationOptions):
    """
    Options for the culture selector: the default culture first, then every
    supported UI culture, each once, with the current UI culture selected.
    """
    tags = [options.default_culture.ui_culture]
    tags.extend(t for t in options.supported_ui_cultures if t not in tags)
    return [
        {
            "value": tag,
            "name": display_name(tag),
            "selected": tag == current.ui_culture,
        }
        for tag in tags
    ]


def init_localization(app, options: LocalizationOptions):
    app.extensions[EXTENSION_KEY] = options

    @app.before_request
    def resolve_culture():
        g.request_culture = resolve_request_culture(request, options)

    @app.after_request
    def apply_content_language(response):
        if options.apply_content_language and "request_culture" in g:
            response.headers.setdefault(
                "Content-Language", g.request_culture.request_culture.ui_culture
            )
        return response

    @app.context_processor
    def inject_culture():
        feature = current_request_culture()
        return {
            "request_culture": feature.request_culture,
            "culture_source": feature.source,
            "culture_choices": culture_choices(feature.request_culture, options),
        }
