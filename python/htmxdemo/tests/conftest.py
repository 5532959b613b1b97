import pytest

from htmxdemo.app import create_app
from htmxdemo.config import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(secret_key="test-secret", log_level="DEBUG")


@pytest.fixture
def app(settings):
    app = create_app(settings)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return app.extensions["htmxdemo"]
