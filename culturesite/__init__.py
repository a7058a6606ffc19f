import logging
import os

from flask import Flask

from .config import DevelopmentConfig, config_map
from .extensions import babel, csrf, limiter
from .localization import LocalizationOptions, init_localization, select_locale


def create_app(config_name: str = None, test_config: dict = None, culture_providers=None):
    """
    culture_providers overrides CULTURE_PROVIDERS with ready-made
    CultureProvider values, which is the only way to plug in custom ones.
    """
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "development")

    app = Flask(__name__)
    cfg = config_map.get(config_name, DevelopmentConfig)
    app.config.from_object(cfg)
    if test_config:
        app.config.update(test_config)
    if hasattr(cfg, "init_app"):
        cfg.init_app(app)

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    csrf.init_app(app)
    limiter.init_app(app)

    # ── Localization / Babel ─────────────────────────────────────────────────
    options = LocalizationOptions.from_config(app.config, providers=culture_providers)
    init_localization(app, options)
    babel.init_app(app, locale_selector=select_locale)

    app.logger.debug(
        "Localization: default=%s supported=%s providers=%s",
        options.default_culture.culture,
        ",".join(options.supported_cultures),
        ",".join(p.name for p in options.providers),
    )

    # ── Feature blueprints ───────────────────────────────────────────────────
    from .lang.routes import lang_bp
    from .main.routes import main_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(lang_bp)

    return app
