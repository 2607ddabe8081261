from datetime import datetime
from types import SimpleNamespace

import pytest
from flask_jwt_extended import create_access_token

from config import TestConfig
from zengym import create_app, db
from zengym.activity import ActivityAggregator
from zengym.assistant import AnswerProvider
from zengym.storage import InMemoryStore

# Wednesday afternoon, UTC
NOW = datetime(2025, 11, 19, 15, 30)


def fixed_clock():
    return NOW


class RaisingCompletions:
    def __init__(self):
        self.calls = 0

    def create(self, **kwargs):
        self.calls += 1
        raise RuntimeError("upstream unavailable")


class StaticCompletions:
    def __init__(self, content):
        self.content = content
        self.last_kwargs = None

    def create(self, **kwargs):
        self.last_kwargs = kwargs
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_openai(completions):
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def aggregator(store):
    return ActivityAggregator(store, clock=fixed_clock)


@pytest.fixture
def app():
    provider = AnswerProvider(client=fake_openai(RaisingCompletions()))
    app = create_app(TestConfig, answer_provider=provider, clock=fixed_clock)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _make_user(app, username):
    from zengym.models.user import User

    with app.app_context():
        user = User(email=f"{username}@example.com", username=username)
        user.set_password("secret123")
        db.session.add(user)
        db.session.commit()
        return user.id


def _headers_for(app, user_id):
    with app.app_context():
        token = create_access_token(identity=str(user_id))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_id(app):
    return _make_user(app, "alice")


@pytest.fixture
def auth_headers(app, user_id):
    return _headers_for(app, user_id)


@pytest.fixture
def other_auth_headers(app):
    return _headers_for(app, _make_user(app, "bob"))
