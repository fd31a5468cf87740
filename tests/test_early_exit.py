import pytest

from kappa.collections import for_each
from kappa.control import returning, for_each_labeled
from kappa.errors import KappaEscapeError


PEOPLE = ["Bob", "Alice", "Carol"]


def test_non_local_return_ends_whole_traversal(trace):
    def look_for_alice(ret):
        def check(name):
            trace.record(name)
            if name == "Alice":
                ret("Found!")
        for_each(PEOPLE, check)
        return "Alice is not found"

    assert returning(look_for_alice) == "Found!"
    # Carol is never visited
    assert trace.events == ["Bob", "Alice"]


def test_returning_without_exit_returns_body_result():
    assert returning(lambda ret: 7) == 7


def test_labelled_local_return_skips_only_current_element(trace):
    def check(name, label):
        if name == "Alice":
            label.exit()
        trace.record(name)

    for_each_labeled(PEOPLE, check)
    trace.record("Alice might be somewhere")
    assert trace.events == ["Bob", "Carol", "Alice might be somewhere"]


def test_outer_label_exit_from_inner_traversal(trace):
    def outer_block(row, outer):
        def inner_block(cell, inner):
            if cell < 0:
                outer.exit()
            trace.record(cell)
        for_each_labeled(row, inner_block, label="inner")
        trace.record("row done")

    for_each_labeled([[1, -1, 2], [3]], outer_block, label="outer")
    assert trace.events == [1, 3, "row done"]


def test_nested_boundaries_only_catch_their_own_signal():
    def outer_body(outer_ret):
        returning(lambda inner_ret: outer_ret("outer"))
        return "not reached"

    assert returning(outer_body) == "outer"


def test_return_function_cannot_escape_its_boundary():
    saved = []
    returning(lambda ret: saved.append(ret))
    with pytest.raises(KappaEscapeError):
        saved[0]("late")


def test_errors_pass_through_boundaries():
    def body(ret):
        raise ValueError("real failure")

    with pytest.raises(ValueError, match="real failure"):
        returning(body)
    with pytest.raises(ValueError):
        for_each_labeled([1], lambda item, label: body(None))


def test_label_cannot_exit_after_its_traversal():
    saved = []
    for_each_labeled([1], lambda item, label: saved.append(label))
    with pytest.raises(KappaEscapeError):
        saved[0].exit()
