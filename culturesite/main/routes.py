from datetime import date

from babel.dates import format_date
from babel.numbers import format_currency, format_decimal
from flask import Blueprint, render_template

from ..localization import current_request_culture
from ..localization.culture import to_babel_locale

main_bp = Blueprint("main", __name__)

SAMPLE_NUMBER = 1234567.891
SAMPLE_AMOUNT = 42.5
SAMPLE_DATE = date(2024, 3, 14)


def formatting_samples(culture: str) -> dict:
    """Number, currency and date written the way `culture` writes them."""
    locale = to_babel_locale(culture)
    return {
        "number": format_decimal(SAMPLE_NUMBER, locale=locale),
        "currency": format_currency(SAMPLE_AMOUNT, "EUR", locale=locale),
        "date": format_date(SAMPLE_DATE, format="long", locale=locale),
    }


@main_bp.route("/")
def landing():
    feature = current_request_culture()
    return render_template(
        "main/landing.html",
        samples=formatting_samples(feature.request_culture.culture),
    )


@main_bp.route("/privacy")
def privacy():
    return render_template("main/privacy.html")


@main_bp.route("/healthz")
def healthz():
    return {"status": "ok"}, 200
