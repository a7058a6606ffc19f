"""
Language switching: cookie written through the cookie provider, then a
redirect to a local return target.
"""
import logging

import pytest

from conftest import CULTURE_COOKIE, culture_cookie, set_cookie_headers


def test_selection_sets_cookie_and_redirects(client):
    r = client.post('/language', data={'lang': 'fr-FR', 'return_url': '/privacy'})
    assert r.status_code == 302
    assert r.headers['Location'] == '/privacy'
    assert culture_cookie(client) == 'c=fr-FR|uic=fr-FR'


def test_missing_lang_uses_default_culture(make_app):
    client = make_app(DEFAULT_CULTURE='de-DE').test_client()
    r = client.post('/language', data={'return_url': '/'})
    assert r.status_code == 302
    assert culture_cookie(client) == 'c=de-DE|uic=de-DE'


def test_blank_lang_uses_default_culture(client):
    client.post('/language', data={'lang': '   '})
    assert culture_cookie(client) == 'c=en-US|uic=en-US'


def test_invalid_form_redirects_to_root_without_cookie(client, caplog):
    with caplog.at_level(logging.WARNING):
        r = client.post('/language', data={'lang': 'not a tag!', 'return_url': '/privacy'})
    assert r.status_code == 302
    assert r.headers['Location'] == '/'
    assert set_cookie_headers(r) == []
    assert culture_cookie(client) is None
    assert 'invalid form' in caplog.text


def test_private_use_tag_is_rejected(client):
    r = client.post('/language', data={'lang': 'en-US-x-foo', 'return_url': '/privacy'})
    assert r.headers['Location'] == '/'
    assert culture_cookie(client) is None


def test_missing_csrf_token_redirects_to_root_without_cookie(make_app):
    client = make_app(WTF_CSRF_ENABLED=True).test_client()
    r = client.post('/language', data={'lang': 'fr-FR', 'return_url': '/privacy'})
    assert r.status_code == 302
    assert r.headers['Location'] == '/'
    assert culture_cookie(client) is None


def test_missing_return_url_redirects_to_root(client):
    r = client.post('/language', data={'lang': 'es-ES'})
    assert r.headers['Location'] == '/'
    assert culture_cookie(client) == 'c=es-ES|uic=es-ES'


def test_return_url_from_query_string(client):
    r = client.post('/language?returnUrl=/privacy', data={'lang': 'es-ES'})
    assert r.headers['Location'] == '/privacy'


@pytest.mark.parametrize('target', [
    'https://evil.example/',
    '//evil.example/',
    '/\\evil.example/',
    'evil.example',
    '/\t/evil.example/',
    'javascript:alert(1)',
])
def test_non_local_return_url_goes_to_root(client, target):
    r = client.post('/language', data={'lang': 'fr-FR', 'return_url': target})
    assert r.status_code == 302
    assert r.headers['Location'] == '/'
    assert culture_cookie(client) == 'c=fr-FR|uic=fr-FR'


def test_local_return_url_keeps_query(client):
    r = client.post('/language', data={'lang': 'de-DE', 'return_url': '/privacy?x=1'})
    assert r.headers['Location'] == '/privacy?x=1'


def test_second_selection_overwrites_first(client):
    client.post('/language', data={'lang': 'fr-FR'})
    client.post('/language', data={'lang': 'de-DE'})
    assert culture_cookie(client) == 'c=de-DE|uic=de-DE'


def test_unsupported_tag_is_stored_as_given(client):
    # Resolution ignores it later; the handler does not second-guess the tag.
    client.post('/language', data={'lang': 'it-IT'})
    assert culture_cookie(client) == 'c=it-IT|uic=it-IT'
    r = client.get('/')
    assert b'id="culture">en-US<' in r.data


def test_cookie_is_session_scoped_by_default(client):
    r = client.post('/language', data={'lang': 'fr-FR'})
    (header,) = set_cookie_headers(r)
    assert 'Max-Age' not in header
    assert 'Expires' not in header
    assert 'Path=/' in header
    assert 'SameSite=Lax' in header


def test_cookie_max_age_is_configurable(make_app):
    client = make_app(LOCALIZATION_COOKIE_MAX_AGE=31536000).test_client()
    r = client.post('/language', data={'lang': 'fr-FR'})
    (header,) = set_cookie_headers(r)
    assert 'Max-Age=31536000' in header


def test_custom_cookie_name(make_app):
    client = make_app(LOCALIZATION_COOKIE_NAME='lang-pref').test_client()
    client.post('/language', data={'lang': 'ar-LB'})
    assert culture_cookie(client, 'lang-pref') == 'c=ar-LB|uic=ar-LB'
    assert culture_cookie(client, CULTURE_COOKIE) is None


def test_without_cookie_provider_only_redirects(make_app, caplog):
    client = make_app(CULTURE_PROVIDERS=['query_string', 'accept_language']).test_client()
    with caplog.at_level(logging.WARNING):
        r = client.post('/language', data={'lang': 'fr-FR', 'return_url': '/privacy'})
    assert r.status_code == 302
    assert r.headers['Location'] == '/privacy'
    assert set_cookie_headers(r) == []
    assert 'No cookie culture provider' in caplog.text


def test_cookie_provider_found_behind_other_providers(make_app):
    client = make_app(CULTURE_PROVIDERS=['accept_language', 'query_string', 'cookie']).test_client()
    client.post('/language', data={'lang': 'fr-FR'})
    assert culture_cookie(client) == 'c=fr-FR|uic=fr-FR'


def test_stored_choice_drives_next_request(client):
    client.post('/language', data={'lang': 'de-DE'})
    r = client.get('/')
    assert b'id="culture">de-DE<' in r.data
    assert b'id="culture-source">cookie<' in r.data
    assert b'<option value="de-DE" selected>' in r.data


def test_rate_limit(make_app):
    client = make_app(RATELIMIT_ENABLED=True, LANGUAGE_RATE_LIMIT='2 per minute').test_client()
    assert client.post('/language', data={'lang': 'fr-FR'}).status_code == 302
    assert client.post('/language', data={'lang': 'fr-FR'}).status_code == 302
    assert client.post('/language', data={'lang': 'fr-FR'}).status_code == 429
