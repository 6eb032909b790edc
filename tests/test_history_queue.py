# tests/test_history_queue.py

"""
Unit tests for the HistoryQueue class.

This file verifies that:
1. HistoryQueue inherits add() from Queue unchanged.
2. remove() reveals items in order by advancing a cursor, and never
   drops anything from storage.
3. show() lists every stored item with its 1-based position and
   announces the next position to be removed.
4. An exhausted history queue returns None from remove().
"""

import io

import pytest

from oop_examples import HistoryQueue, Queue


@pytest.fixture
def history() -> HistoryQueue:
    """Returns a HistoryQueue built from (5, 6, "foo")."""
    return HistoryQueue(5, 6, "foo")


def test_initialization(history: HistoryQueue):
    """Test the starting cursor and the inheritance relationship."""
    assert isinstance(history, Queue)
    assert history.cursor == 0
    assert history._length() == 3


def test_add_is_inherited():
    """Test that HistoryQueue does not override add()."""
    assert HistoryQueue.add is Queue.add
    assert HistoryQueue.remove is not Queue.remove


def test_remove_advances_cursor(history: HistoryQueue):
    """
    Test the documented walk-through:
    - first remove() returns 5, cursor becomes 1
    - second remove() returns 6, cursor becomes 2
    """
    assert history.remove() == 5
    assert history.cursor == 1

    assert history.remove() == 6
    assert history.cursor == 2


def test_remove_keeps_items(history: HistoryQueue):
    """Test that removal never shrinks the underlying storage."""
    history.remove()
    history.remove()

    assert history._length() == 3
    assert list(history._items) == [5, 6, "foo"]


def test_show_after_one_remove(history: HistoryQueue, capsys):
    """Test show() output after the first remove()."""
    history.remove()

    history.show()

    captured = capsys.readouterr()
    assert captured.out == (
        "1: 5\n"
        "2: 6\n"
        "3: foo\n"
        "Next to remove: 2\n"
    )


def test_show_writes_to_given_stream(history: HistoryQueue):
    """Test that show() honours the file argument."""
    buffer = io.StringIO()

    history.show(file=buffer)

    assert buffer.getvalue().splitlines()[-1] == "Next to remove: 1"


def test_exhausted_queue(history: HistoryQueue):
    """Test that remove() returns None once every item has been revealed."""
    assert [history.remove() for _ in range(3)] == [5, 6, "foo"]
    assert history.cursor == 3

    assert history.remove() is None
    assert history.remove() is None
    # The cursor never passes the number of stored items
    assert history.cursor == 3


def test_show_after_exhaustion_lists_everything(history: HistoryQueue):
    """Test that the full history is still listed after exhaustion."""
    for _ in range(4):
        history.remove()

    assert str(history) == (
        "1: 5\n"
        "2: 6\n"
        "3: foo\n"
        "Nothing left to remove."
    )


def test_add_after_exhaustion():
    """Test that adding to an exhausted queue makes remove() productive again."""
    history = HistoryQueue("only")
    assert history.remove() == "only"
    assert history.remove() is None

    history.add("late")

    assert history.remove() == "late"
    assert history.cursor == 2


def test_empty_history_queue():
    """Test an empty HistoryQueue: nothing to remove, nothing to list."""
    history = HistoryQueue()

    assert history.remove() is None
    assert history.cursor == 0
    assert str(history) == "Nothing left to remove."


def test_tracker_counts_removal_outcomes(history: HistoryQueue):
    """Test that the tracker counts reveals and exhausted removals."""
    for _ in range(4):
        history.remove()

    removals = history.get_summary()["removals"]

    assert removals["attempts"] == 4
    assert removals["total_removed"] == 3
    assert removals["total_empty_removals"] == 1


def test_length_not_reported_by_tracker_or_summary(history: HistoryQueue):
    """
    Test that neither the public attributes nor the summary give away
    the number of stored items (3 here, after a single reveal).
    """
    history.remove()

    public_numbers = [
        getattr(obj, name)
        for obj in (history, history.tracker)
        for name in dir(obj)
        if not name.startswith("_")
        and isinstance(getattr(obj, name), int)
    ]
    summary_numbers = list(history.get_summary()["removals"].values())

    assert history._length() == 3
    assert 3 not in public_numbers
    assert 3 not in summary_numbers


def test_exhausted_remove_is_not_a_warning(caplog):
    """Test that remove() on an exhausted history queue logs at DEBUG."""
    history = HistoryQueue()

    with caplog.at_level("DEBUG", logger="oop_examples"):
        assert history.remove() is None

    assert not any(record.levelno >= 30 for record in caplog.records)
