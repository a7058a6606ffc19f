import os


def _env_list(name: str, default: str) -> list:
    value = os.environ.get(name, default)
    return [item.strip() for item in value.split(",") if item.strip()]


def _env_str(name: str, default=None):
    # Parsed and checked by LocalizationOptions.from_config
    value = os.environ.get(name, "").strip()
    return value or default


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-change-in-prod")
    WTF_CSRF_ENABLED = True
    WTF_CSRF_HEADERS = ["X-CSRFToken"]
    SESSION_COOKIE_SECURE = _env_bool("SESSION_COOKIE_SECURE")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    # ── Localization ───────────────────────────────────────────────────────
    # First supported culture is the default unless DEFAULT_CULTURE says otherwise
    SUPPORTED_CULTURES = _env_list("SUPPORTED_CULTURES", "en-US,fr-FR,de-DE,es-ES,ar-LB")
    SUPPORTED_UI_CULTURES = _env_list("SUPPORTED_UI_CULTURES", "")
    DEFAULT_CULTURE = os.environ.get("DEFAULT_CULTURE", "en-US")
    # Tried in this order on every request
    CULTURE_PROVIDERS = _env_list("CULTURE_PROVIDERS", "query_string,cookie,accept_language")
    LOCALIZATION_COOKIE_NAME = os.environ.get("LOCALIZATION_COOKIE_NAME", ".Culture")
    # None = session cookie; 31536000 keeps the choice for a year
    LOCALIZATION_COOKIE_MAX_AGE = _env_str("LOCALIZATION_COOKIE_MAX_AGE")
    LOCALIZATION_APPLY_CONTENT_LANGUAGE = _env_bool("LOCALIZATION_APPLY_CONTENT_LANGUAGE")
    ACCEPT_LANGUAGE_MAX_LANGUAGES = _env_str("ACCEPT_LANGUAGE_MAX_LANGUAGES", 3)
    FALLBACK_TO_PARENT_CULTURES = True
    FALLBACK_TO_PARENT_UI_CULTURES = True

    BABEL_DEFAULT_LOCALE = "en"
    BABEL_TRANSLATION_DIRECTORIES = "translations"

    # ── Rate limiting ──────────────────────────────────────────────────────
    RATELIMIT_STORAGE_URI = os.environ.get("RATELIMIT_STORAGE_URI", "memory://")
    LANGUAGE_RATE_LIMIT = os.environ.get("LANGUAGE_RATE_LIMIT", "30 per minute")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()


class TestingConfig(BaseConfig):
    TESTING = True
    WTF_CSRF_ENABLED = False
    RATELIMIT_ENABLED = False
    SUPPORTED_CULTURES = ["en-US", "fr-FR", "de-DE", "es-ES", "ar-LB"]
    SUPPORTED_UI_CULTURES = []
    DEFAULT_CULTURE = "en-US"
    CULTURE_PROVIDERS = ["query_string", "cookie", "accept_language"]
    LOCALIZATION_COOKIE_NAME = ".Culture"
    LOCALIZATION_COOKIE_MAX_AGE = None
    LOCALIZATION_APPLY_CONTENT_LANGUAGE = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    SESSION_COOKIE_SECURE = _env_bool("SESSION_COOKIE_SECURE", True)

    # Enforce strong secret key in production
    @classmethod
    def init_app(cls, app):
        secret = os.environ.get("SECRET_KEY", "")
        if not secret or secret == "dev-secret-change-in-prod":
            raise ValueError(
                "SECRET_KEY must be set to a strong random value in production."
            )


config_map = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}
