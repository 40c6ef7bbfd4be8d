import pytest

from floorplan.io.serialization import (
    MalformedFloorplanError, dump_floorplan, load_floorplan,
    load_floorplan_file, save_floorplan_file,
)
from floorplan.models import Floorplan


def document(**overrides):
    data = {
        "id": "fp-1",
        "walls": [{"id": "w1", "start": {"x": 0, "y": 0}, "end": {"x": 120, "y": 0}}],
        "doors": [{"id": "d1", "wall_id": "w1", "position": 0.5}],
        "windows": [],
    }
    data.update(overrides)
    return data


def test_export_then_import_preserves_document(editor, wall_with_openings):
    original = editor.document
    assert load_floorplan(dump_floorplan(original)) == original


def test_file_helpers(tmp_path, editor, wall_with_openings):
    path = tmp_path / "plan.json"
    save_floorplan_file(editor.document, path)
    assert load_floorplan_file(path) == editor.document


def test_accepts_mapping():
    floorplan = load_floorplan(document())
    assert isinstance(floorplan, Floorplan)
    assert floorplan.doors[0].wall_id == "w1"


def test_rejects_door_on_missing_wall():
    bad = document(doors=[{"id": "d1", "wall_id": "w404", "position": 0.5}])
    with pytest.raises(MalformedFloorplanError, match="missing wall w404"):
        load_floorplan(bad)


def test_rejects_window_on_missing_wall():
    bad = document(windows=[{"id": "n1", "wall_id": "w404", "position": 0.5}])
    with pytest.raises(MalformedFloorplanError):
        load_floorplan(bad)


def test_rejects_duplicate_ids():
    bad = document(furniture=[{
        "id": "w1", "type": "chair", "position": {"x": 0, "y": 0}, "width": 20, "height": 20,
    }])
    with pytest.raises(MalformedFloorplanError, match="Duplicate element id w1"):
        load_floorplan(bad)


def test_rejects_schema_errors():
    with pytest.raises(MalformedFloorplanError):
        load_floorplan('{"id": "fp", "walls": [{"id": "w"}]}')
    with pytest.raises(MalformedFloorplanError):
        load_floorplan("not json")
    with pytest.raises(MalformedFloorplanError):
        load_floorplan(document(doors=[{"id": "d1", "wall_id": "w1", "position": 1.5}]))


def test_malformed_error_is_a_value_error():
    assert issubclass(MalformedFloorplanError, ValueError)


@pytest.mark.parametrize("field", ["scale", "grid_size"])
@pytest.mark.parametrize("value", [0, -10])
def test_rejects_non_positive_scale_and_grid(field, value):
    with pytest.raises(MalformedFloorplanError, match=field):
        load_floorplan(document(**{field: value}))
