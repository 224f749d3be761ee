"""Tests for Person — rename, undo and lazily created history."""

from __future__ import annotations

from beforehand.aop import advice_chain
from beforehand.domain import Person, UndoStack, ensure_undo_stack


class TestRenameUndo:
    def test_round_trip(self):
        p = Person("barak", "obama")
        p.rename("Barak", "Obama")
        assert p.full_name() == "Barak Obama"
        p.undo()
        assert p.full_name() == "barak obama"

    def test_multiple_renames_unwind_in_reverse(self):
        p = Person("a", "b")
        p.rename("c", "d")
        p.rename("e", "f")
        p.undo()
        assert p.full_name() == "c d"
        p.undo()
        assert p.full_name() == "a b"

    def test_undo_without_rename_is_noop(self):
        p = Person("a", "b")
        p.undo()
        assert p.full_name() == "a b"

    def test_undo_past_history_is_noop(self):
        p = Person("a", "b")
        p.rename("c", "d")
        p.undo().undo().undo()
        assert p.full_name() == "a b"

    def test_methods_return_receiver_for_chaining(self):
        p = Person("a", "b")
        assert p.rename("c", "d") is p
        assert p.undo() is p
        assert p.rename("x", "y").rename("z", "w").undo().full_name() == "x y"


class TestFullName:
    def test_single_space_no_trimming(self):
        assert Person(" a", "b ").full_name() == " a b "

    def test_empty_names(self):
        assert Person("", "").full_name() == " "


class TestLazyUndoStack:
    def test_absent_until_first_decorated_call(self):
        p = Person("a", "b")
        assert p._undo_stack is None
        p.full_name()
        assert p._undo_stack is None

    def test_undo_creates_empty_stack(self):
        p = Person("a", "b")
        p.undo()
        assert isinstance(p._undo_stack, UndoStack)
        assert len(p._undo_stack) == 0

    def test_rename_creates_stack_and_records_snapshot(self):
        p = Person("a", "b")
        p.rename("c", "d")
        assert [(s.first_name, s.last_name) for s in p._undo_stack] == [("a", "b")]

    def test_rename_and_undo_carry_the_hook(self):
        assert advice_chain(Person.rename) == (ensure_undo_stack,)
        assert advice_chain(Person.undo) == (ensure_undo_stack,)
        assert advice_chain(Person.full_name) == ()

    def test_decorated_methods_keep_their_names(self):
        assert Person.rename.__name__ == "rename"
        assert Person.undo.__name__ == "undo"


class TestCanUndo:
    def test_false_before_stack_exists_and_does_not_create_it(self):
        p = Person("a", "b")
        assert p.can_undo() is False
        assert p._undo_stack is None

    def test_tracks_history(self):
        p = Person("a", "b")
        p.rename("c", "d")
        assert p.can_undo() is True
        p.undo()
        assert p.can_undo() is False


def test_repr_shows_current_names():
    p = Person("a", "b").rename("c", "d")
    assert repr(p) == "Person(first_name='c', last_name='d')"
