import itertools

import pytest

from nomadia.api.models import PreferenceSet, TripRequest


@pytest.fixture
def cycle_source():
    """Factory for random sources that repeat the given values forever."""
    def _make(*values):
        it = itertools.cycle(values)
        return lambda: next(it)
    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("NOMADIA_MAP_EMBED_URL", "NOMADIA_MAP_LAYER", "NOMADIA_SHARE_URL"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def europe_request():
    return TripRequest(
        days=5,
        region="Europe",
        style="backpack",
        prefs=PreferenceSet(nature=80, culture=60, people=50, remote=50, challenge=40),
    )


@pytest.fixture
def app():
    from main import app as flask_app

    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture
def client(app):
    return app.test_client()
