"""
Smoke tests — verify the app starts and core routes respond.
"""

RETURN_FIELD = b'id="return_url" name="return_url" type="hidden" value="%s"'


def test_landing_page(client):
    r = client.get('/')
    assert r.status_code == 200
    assert b'id="culture">en-US<' in r.data


def test_privacy_page(client):
    r = client.get('/privacy')
    assert r.status_code == 200


def test_language_page(client):
    r = client.get('/language?returnUrl=/privacy')
    assert r.status_code == 200
    assert RETURN_FIELD % b'/privacy' in r.data


def test_language_page_drops_foreign_return_url(client):
    r = client.get('/language?returnUrl=https://evil.example/')
    assert r.status_code == 200
    assert RETURN_FIELD % b'/' in r.data


def test_selector_lists_supported_cultures(client):
    r = client.get('/')
    for tag in (b'en-US', b'fr-FR', b'de-DE', b'es-ES', b'ar-LB'):
        assert b'<option value="' + tag + b'"' in r.data


def test_healthz(client):
    r = client.get('/healthz')
    assert r.status_code == 200
    assert r.get_json() == {'status': 'ok'}


def test_404_handled(client):
    r = client.get('/this-does-not-exist')
    assert r.status_code == 404
