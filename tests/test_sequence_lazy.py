import pytest

from kappa.collections import as_sequence, join_to_string


def test_lazy_pipeline_does_no_work_until_terminal(trace):
    seq = as_sequence([10, 12, 31, 1, 4]).filter(lambda x: x % 2 == 0).map(trace.show)
    assert trace.events == []

    result = seq.join_to_string()
    assert trace.events == [10, 12, 4]
    assert result == "10, 12, 4"


def test_lazy_pipeline_interleaves_per_element(trace):
    def check(x):
        trace.record(("filter", x))
        return x % 2 == 0

    def show(x):
        trace.record(("map", x))
        return x

    seq = as_sequence([1, 2, 4]).filter(check).map(show)
    assert seq.to_list() == [2, 4]
    assert trace.events == [
        ("filter", 1),
        ("filter", 2),
        ("map", 2),
        ("filter", 4),
        ("map", 4),
    ]


def test_first_stops_pulling(trace):
    seq = as_sequence([1, 2, 3, 4]).map(trace.show)
    assert seq.first(lambda x: x > 1) == 2
    assert trace.events == [1, 2]


def test_first_without_match_is_none():
    assert as_sequence([1, 3]).filter(lambda x: x > 5).first() is None


def test_sequence_is_immutable_and_reforceable(trace):
    base = as_sequence([1, 2, 3])
    doubled = base.map(lambda x: x * 2)
    assert base.to_list() == [1, 2, 3]
    assert doubled.to_list() == [2, 4, 6]
    # A list source can be forced again
    assert doubled.to_list() == [2, 4, 6]


def test_sequence_join_matches_eager_join():
    words = ["cats", "dogs"]
    assert as_sequence(words).join_to_string() == join_to_string(words)


def test_error_in_lazy_stage_surfaces_at_terminal():
    seq = as_sequence([1, 0]).map(lambda x: 1 / x)
    with pytest.raises(ZeroDivisionError):
        seq.to_list()


def test_repr_names_stages():
    seq = as_sequence([]).filter(bool).map(str)
    assert repr(seq) == "<Sequence filter -> map>"
