import pytest

from kappa.resources import use, using
from kappa.errors import KappaTypeError


class Resource:
    def __init__(self, trace, fail_on_close=False):
        self.trace = trace
        self.fail_on_close = fail_on_close
        self.closed = 0

    def read(self):
        self.trace.record("read")
        return "data"

    def close(self):
        self.closed += 1
        self.trace.record("close")
        if self.fail_on_close:
            raise OSError("close failed")


def test_release_after_block(trace):
    resource = Resource(trace)
    assert use(resource, lambda r: r.read()) == "data"
    assert resource.closed == 1
    assert trace.events == ["read", "close"]


def test_release_when_block_raises(trace):
    resource = Resource(trace)

    def block(r):
        r.read()
        raise ValueError("boom")

    with pytest.raises(ValueError, match="boom"):
        use(resource, block)
    assert resource.closed == 1
    assert trace.events == ["read", "close"]


def test_block_error_wins_over_close_error(trace):
    resource = Resource(trace, fail_on_close=True)

    def block(r):
        raise ValueError("boom")

    with pytest.raises(ValueError) as exc:
        use(resource, block)
    assert isinstance(exc.value.__context__, OSError)
    assert resource.closed == 1


def test_close_error_surfaces_after_success(trace):
    resource = Resource(trace, fail_on_close=True)
    with pytest.raises(OSError):
        use(resource, lambda r: r.read())
    assert resource.closed == 1


def test_requires_close_method():
    with pytest.raises(KappaTypeError):
        use(object(), lambda r: r)


def test_context_manager_form(trace):
    resource = Resource(trace)
    with pytest.raises(RuntimeError):
        with using(resource) as r:
            r.read()
            raise RuntimeError("inside")
    assert resource.closed == 1
    assert trace.events == ["read", "close"]


def test_context_manager_releases_once_on_success(trace):
    resource = Resource(trace)
    with using(resource) as r:
        assert r.read() == "data"
        assert resource.closed == 0
    assert resource.closed == 1
    assert trace.events == ["read", "close"]
