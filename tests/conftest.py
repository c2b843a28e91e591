import pytest
import sprig


@pytest.fixture(autouse=True)
def print_limits(monkeypatch):
    """Start each test from the default abbreviation limits."""
    monkeypatch.delenv(sprig._config.ENV_LIST_ELEMENTS_COUNT, raising=False)
    monkeypatch.delenv(sprig._config.ENV_LIST_ELEMENTS_LENGTH, raising=False)
    sprig.reset_print_limits()
    yield sprig.print_limits()
    sprig.reset_print_limits()


@pytest.fixture
def env():
    """Environment with a cancel token and a couple of bindings."""
    return sprig.Environment({"x": 1, "name": "sprig"}, name="test", cancel=sprig.CancelToken())
