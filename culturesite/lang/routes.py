"""
culturesite/lang/routes.py

Language switching: records the chosen culture in the cookie the cookie
provider reads on later requests, then sends the visitor back.
"""
from flask import Blueprint, current_app, redirect, render_template, request

from ..extensions import csrf, limiter
from ..localization import RequestCulture, get_options
from .forms import LanguageForm
from .helpers import ROOT, safe_return_target, write_culture_cookie

lang_bp = Blueprint("lang", __name__)


def _requested_return_url(form: LanguageForm):
    return (
        form.return_url.data
        or request.args.get("returnUrl")
        or request.args.get("return_url")
    )


@lang_bp.route("/language", methods=["GET"])
def language():
    form = LanguageForm()
    form.return_url.data = safe_return_target(_requested_return_url(form))
    return render_template("lang/language.html", form=form)


@lang_bp.route("/language", methods=["POST"])
@csrf.exempt
@limiter.limit(lambda: current_app.config["LANGUAGE_RATE_LIMIT"])
def set_language():
    form = LanguageForm()

    if not form.validate_on_submit():
        current_app.logger.warning(
            "Language change rejected, invalid form: %s", form.errors
        )
        return redirect(ROOT)

    options = get_options()
    provider = options.cookie_provider
    target = safe_return_target(_requested_return_url(form))
    response = redirect(target)

    if provider is None:
        current_app.logger.warning(
            "No cookie culture provider configured; language choice not stored"
        )
        return response

    lang = form.lang.data
    request_culture = RequestCulture.from_tag(lang) if lang else options.default_culture
    write_culture_cookie(response, provider.cookie_name, request_culture, options)
    current_app.logger.debug(
        "Stored culture %s/%s in cookie %s",
        request_culture.culture,
        request_culture.ui_culture,
        provider.cookie_name,
    )
    return response
