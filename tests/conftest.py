import pytest

# Side-effect tracing for combinator tests: `trace.show(x)` records x and returns it,
# so a transform can be observed without changing the values flowing through.


class Trace:
    def __init__(self):
        self.events = []

    def show(self, value):
        self.events.append(value)
        return value

    def record(self, event):
        self.events.append(event)


@pytest.fixture
def trace():
    return Trace()


@pytest.fixture(autouse=True)
def _default_separator(monkeypatch):
    # Keep tests independent of the caller's environment
    monkeypatch.delenv("KAPPA_JOIN_SEPARATOR", raising=False)
