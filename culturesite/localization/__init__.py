from .culture import RequestCulture, normalize_tag
from .options import LocalizationConfigError, LocalizationOptions
from .providers import (
    CultureProvider,
    ProviderKind,
    ProviderResult,
    accept_language_provider,
    cookie_provider,
    custom_provider,
    find_cookie_provider,
    make_cookie_value,
    parse_cookie_value,
    query_string_provider,
)
from .resolver import (
    RequestCultureFeature,
    culture_choices,
    current_request_culture,
    get_options,
    init_localization,
    resolve_request_culture,
    select_locale,
)

__all__ = [
    "RequestCulture",
    "normalize_tag",
    "LocalizationConfigError",
    "LocalizationOptions",
    "CultureProvider",
    "ProviderKind",
    "ProviderResult",
    "accept_language_provider",
    "cookie_provider",
    "custom_provider",
    "find_cookie_provider",
    "make_cookie_value",
    "parse_cookie_value",
    "query_string_provider",
    "RequestCultureFeature",
    "culture_choices",
    "current_request_culture",
    "get_options",
    "init_localization",
    "resolve_request_culture",
    "select_locale",
]
