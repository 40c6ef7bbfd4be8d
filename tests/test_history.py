"""History engine: inverse law, cap, redo invalidation, boundary no-ops."""

from floorplan.core.history import MAX_HISTORY, HistoryEngine
from floorplan.models import Floorplan, Point, Wall


def test_undo_then_redo_restores_exact_document(editor):
    wall_id = editor.add_wall(Point(x=0, y=0), Point(x=120, y=0))
    editor.add_door(wall_id, 0.5)
    item_id = editor.add_furniture("desk", Point(x=10, y=10), 60, 30)
    editor.update_furniture(item_id, {"rotation": 45})
    editor.add_room("Study", "office", [wall_id])
    editor.remove_wall(wall_id)
    final = editor.document
    steps = 6

    for _ in range(steps):
        assert editor.undo()
    assert editor.document.element_count() == 0
    for _ in range(steps):
        assert editor.redo()

    assert editor.document == final


def test_history_is_capped_and_oldest_snapshots_are_lost(editor):
    for i in range(MAX_HISTORY + 5):
        editor.add_wall(Point(x=0, y=i * 12), Point(x=120, y=i * 12))

    assert editor.history.past_length == MAX_HISTORY

    undone = 0
    while editor.undo():
        undone += 1
    assert undone == MAX_HISTORY
    # The first five walls can no longer be undone
    assert len(editor.document.walls) == 5


def test_new_edit_after_undo_discards_future(editor):
    editor.add_wall(Point(x=0, y=0), Point(x=120, y=0))
    editor.add_wall(Point(x=120, y=0), Point(x=120, y=96))
    editor.undo()
    assert editor.can_redo()

    editor.add_wall(Point(x=0, y=0), Point(x=0, y=96))

    assert not editor.can_redo()
    assert editor.history.future_length == 0
    assert editor.redo() is False


def test_boundary_undo_redo_are_silent_noops(editor):
    before = editor.document
    assert editor.undo() is False
    assert editor.redo() is False
    assert editor.document == before
    assert not editor.can_undo()
    assert not editor.can_redo()


def test_present_is_a_copy():
    history = HistoryEngine(Floorplan.create())
    snapshot = history.present
    snapshot.name = "Changed outside"
    snapshot.walls.append(Wall(id="w", start=Point(x=0, y=0), end=Point(x=1, y=0)))
    assert history.present.name == "Untitled Floorplan"
    assert history.present.walls == []


def test_mutation_reporting_no_change_is_not_recorded():
    history = HistoryEngine(Floorplan.create())
    assert history.record(lambda doc: False) is False
    assert history.past_length == 0


def test_record_pushes_previous_present_and_clears_future():
    history = HistoryEngine(Floorplan.create())
    history.record(lambda doc: setattr(doc, "name", "A"))
    history.record(lambda doc: setattr(doc, "name", "B"))
    history.undo()
    assert [d.name for d in history.future] == ["B"]

    history.record(lambda doc: setattr(doc, "name", "C"))
    assert [d.name for d in history.past] == ["Untitled Floorplan", "A"]
    assert history.future == []


def test_custom_limit():
    history = HistoryEngine(Floorplan.create(), limit=3)
    for name in "abcde":
        history.record(lambda doc, n=name: setattr(doc, "name", n))
    assert [d.name for d in history.past] == ["b", "c", "d"]


def test_rename_is_not_an_undo_step(editor):
    editor.set_name("Ground floor")
    assert editor.document.name == "Ground floor"
    assert not editor.can_undo()
