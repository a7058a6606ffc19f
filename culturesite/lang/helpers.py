"""
culturesite/lang/helpers.py

Return-target checks and the culture preference cookie.

Usage:
    from .helpers import safe_return_target, write_culture_cookie
"""
from flask import current_app

from ..localization import RequestCulture, make_cookie_value

ROOT = "/"


def is_local_url(url) -> bool:
    """
    True for same-origin relative paths only: "/privacy", "/?culture=fr".
    Rejects absolute URLs, scheme-relative "//host" and "/\\host" forms and
    anything carrying control characters a browser would strip.
    """
    if not url or not url.startswith("/"):
        return False
    if any(ord(ch) < 0x20 or ch == "\x7f" for ch in url):
        return False
    if len(url) == 1:
        return True
    return url[1] not in ("/", "\\")


def safe_return_target(url) -> str:
    if not url:
        return ROOT
    if is_local_url(url):
        return url
    current_app.logger.info("Rejected non-local return target %r", url)
    return ROOT


def write_culture_cookie(response, cookie_name: str, request_culture: RequestCulture, options):
    response.set_cookie(
        cookie_name,
        make_cookie_value(request_culture),
        max_age=options.cookie_max_age,
        path="/",
        secure=options.cookie_secure,
        httponly=False,
        samesite="Lax",
    )
    return response
