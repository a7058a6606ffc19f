import os

import pytest

os.environ.setdefault('SECRET_KEY', 'test-secret-key')
os.environ.setdefault('FLASK_ENV', 'testing')

CULTURE_COOKIE = '.Culture'


@pytest.fixture
def make_app():
    from culturesite import create_app

    def _make(culture_providers=None, **overrides):
        return create_app('testing', test_config=overrides, culture_providers=culture_providers)

    return _make


@pytest.fixture
def app(make_app):
    yield make_app()


@pytest.fixture
def client(app):
    return app.test_client()


def culture_cookie(client, name=CULTURE_COOKIE):
    cookie = client.get_cookie(name)
    return cookie.value if cookie is not None else None


def set_cookie_headers(response, name=CULTURE_COOKIE):
    return [h for h in response.headers.getlist('Set-Cookie') if h.startswith(name + '=')]
