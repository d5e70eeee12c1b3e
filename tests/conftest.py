# tests/conftest.py
import os, sys
from types import SimpleNamespace
from urllib.parse import urlsplit

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ["APP_ENV"] = "test"

from flask_jwt_extended import create_access_token

from tidydesk import create_app
from tidydesk.extensions import db, summarizer

SUMMARY_FIXTURE = "Buy milk and eggs tomorrow. Add both to your shopping list today."


@pytest.fixture()
def app():
    # base SQLite en mémoire neuve pour chaque test
    app = create_app()
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def auth_headers(app):
    """Fabrique d'en-têtes Bearer: l'émission des jetons est externe à l'API."""
    def _make(email):
        with app.app_context():
            token = create_access_token(identity=email)
        return {"Authorization": f"Bearer {token}"}
    return _make


class FakeModel:
    """Tient lieu de genai.Client: client.models.generate_content(...)."""

    def __init__(self, text=SUMMARY_FIXTURE, error=None):
        self.text = text
        self.error = error
        self.prompts = []
        self.configs = []
        self.calls = []
        self.models = self

    def generate_content(self, model=None, contents=None, config=None):
        self.calls.append(model)
        self.prompts.append(contents)
        self.configs.append(config)
        if self.error:
            raise self.error
        return SimpleNamespace(text=self.text)


@pytest.fixture()
def fake_model(app, monkeypatch):
    model = FakeModel()
    monkeypatch.setattr(summarizer, "_model", lambda: model)
    return model


class FlaskSession:
    """Adaptateur requests.Session -> client de test Flask."""

    def __init__(self, test_client):
        self.test_client = test_client
        self.calls = []

    def request(self, method, url, json=None, headers=None, timeout=None):
        path = urlsplit(url).path
        self.calls.append((method, path))
        resp = self.test_client.open(path, method=method, json=json, headers=headers)
        body = resp.get_data(as_text=True)
        return SimpleNamespace(
            status_code=resp.status_code,
            text=body,
            json=lambda: resp.get_json(),
        )


@pytest.fixture()
def flask_session(client):
    return FlaskSession(client)
