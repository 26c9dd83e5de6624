import sys, pathlib, json
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1]))

import pytest
import requests
from services import backend, recaptcha
from models import RiskAssessment


class FakeResponse:
    def __init__(self, status_code=200, body=""):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)
        self.closed = False

    def json(self):
        return json.loads(self.text)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class FakeSession:
    """Stands in for the backend session; routes (method, path) to canned responses."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []

    def _handle(self, method, url, **kwargs):
        path = url[len(backend.BACKEND_URL):]
        self.calls.append((method, path, kwargs))
        resp = self.routes.get((method, path))
        if resp is None:
            raise AssertionError(f"unexpected {method} {path}")
        if isinstance(resp, Exception):
            raise resp
        return resp

    def get(self, url, **kwargs):
        return self._handle("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._handle("POST", url, **kwargs)

    def paths(self, method=None):
        return [p for m, p, _ in self.calls if method is None or m == method]


BLOG = {
    "id": 42,
    "owner_username": "ada",
    "title": "Pour over",
    "content": "<p>Bloom the grounds for <em>30 seconds</em>.</p>",
    "created_at": "2024-03-01T09:15:00.123456789Z",
    "updated_at": "2024-03-02T10:00:00Z",
}


@pytest.fixture
def fake_backend(monkeypatch):
    session = FakeSession()
    monkeypatch.setattr(backend, "_session", session)
    return session


@pytest.fixture
def fake_score(monkeypatch):
    """Make the risk check return a fixed score; set ``fake_score.score`` per test."""
    class Scorer:
        score = 0.9
        calls = []

        def __call__(self, project_id, site_key, token, expected_action):
            self.calls.append((token, expected_action))
            return RiskAssessment(valid=True, action=expected_action, score=self.score)

    scorer = Scorer()
    scorer.calls = []
    monkeypatch.setattr(recaptcha, "assess", scorer)
    return scorer


@pytest.fixture
def client():
    from app import create_app
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def transport_error():
    return requests.ConnectionError("connection refused")
