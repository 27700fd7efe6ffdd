"""
Tests for the advance/retreat entry points against an editor environment.
"""

import pytest

from namecycle.cycle.schemas import Direction
from namecycle.cycle.session import advance, retreat, cycle, CycleCommands
from namecycle.workspace.workspace import Workspace

SCENARIO = ["/i/foo.h", "/s/foo.c", "/d/foo.org", "/x/bar.txt"]


class RecordingEnvironment:
    """Editor stand-in over plain strings that records activations."""

    def __init__(self, documents, current, fail_activation=False):
        self.documents = list(documents)
        self.current = current
        self.activated = []
        self.fail_activation = fail_activation

    def get_identity(self, doc):
        return doc

    def list_open_documents(self):
        return list(self.documents)

    def get_current_document(self):
        return self.current

    def activate_document(self, doc):
        if self.fail_activation:
            raise RuntimeError("window is dedicated")
        self.activated.append(doc)
        self.current = doc


def current(workspace):
    return workspace.get_current_document().identity


class TestScenario:
    """The foo.h / foo.c / foo.org walk-through."""

    def setup_method(self):
        self.workspace = Workspace(SCENARIO)

    def test_starts_on_first_opened(self):
        assert current(self.workspace) == "/i/foo.h"

    def test_advance_walks_group_and_wraps(self):
        visited = []
        for _ in range(3):
            advance(self.workspace)
            visited.append(current(self.workspace))
        assert visited == ["/s/foo.c", "/d/foo.org", "/i/foo.h"]

    def test_retreat_from_start(self):
        retreat(self.workspace)
        assert current(self.workspace) == "/d/foo.org"

    def test_advance_then_retreat_returns(self):
        for start in ["/i/foo.h", "/s/foo.c", "/d/foo.org"]:
            self.workspace.activate_document(start)
            advance(self.workspace)
            retreat(self.workspace)
            assert current(self.workspace) == start

    def test_cycle_closure(self):
        for _ in range(3):
            advance(self.workspace)
        assert current(self.workspace) == "/i/foo.h"
        for _ in range(3):
            retreat(self.workspace)
        assert current(self.workspace) == "/i/foo.h"

    def test_unrelated_document_is_never_visited(self):
        for _ in range(6):
            advance(self.workspace)
            assert current(self.workspace) != "/x/bar.txt"

    def test_singleton_group_is_a_no_op(self):
        self.workspace.activate_document("/x/bar.txt")
        advance(self.workspace)
        assert current(self.workspace) == "/x/bar.txt"
        retreat(self.workspace)
        assert current(self.workspace) == "/x/bar.txt"


def test_cycle_returns_activated_document():
    env = RecordingEnvironment(SCENARIO, "/i/foo.h")
    assert cycle(env, Direction.FORWARD) == "/s/foo.c"
    assert env.activated == ["/s/foo.c"]


def test_singleton_does_not_request_activation():
    env = RecordingEnvironment(SCENARIO, "/x/bar.txt")
    assert cycle(env, Direction.FORWARD) is None
    advance(env)
    retreat(env)
    assert env.activated == []


def test_current_document_missing_from_list_still_cycles():
    env = RecordingEnvironment(["/a/foo.c", "/b/foo.h"], "/c/foo.el")
    advance(env)
    assert env.current == "/a/foo.c"


def test_activation_errors_propagate():
    env = RecordingEnvironment(SCENARIO, "/i/foo.h", fail_activation=True)
    with pytest.raises(RuntimeError):
        advance(env)
    assert env.current == "/i/foo.h"


def test_changes_between_calls_are_picked_up():
    workspace = Workspace(["/a/foo.c", "/b/foo.h"])
    advance(workspace)
    assert current(workspace) == "/b/foo.h"

    workspace.open("/c/foo.py")
    advance(workspace)
    assert current(workspace) == "/c/foo.py"

    workspace.close("/a/foo.c")
    advance(workspace)
    assert current(workspace) == "/b/foo.h"

    workspace.rename("/b/foo.h", "/b/bar.h")
    advance(workspace)
    assert current(workspace) == "/b/bar.h"


def test_cycle_commands_take_no_arguments():
    workspace = Workspace(SCENARIO)
    commands = CycleCommands(workspace)
    commands.advance()
    assert current(workspace) == "/s/foo.c"
    commands.retreat()
    commands.retreat()
    assert current(workspace) == "/d/foo.org"
