"""Context text handed to the agent."""

from floorplan.agent.context import generate_floorplan_context
from floorplan.models import Floorplan


def sample_document():
    return Floorplan.model_validate({
        "id": "fp-1",
        "name": "Cabin",
        "walls": [
            {"id": "w1", "start": {"x": 0, "y": 0}, "end": {"x": 120, "y": 0}},
            {"id": "w2", "start": {"x": 120, "y": 0}, "end": {"x": 120, "y": 90.5}, "thickness": 4.5},
        ],
        "doors": [{"id": "d1", "wall_id": "w1", "position": 0.5}],
        "windows": [{"id": "n1", "wall_id": "w2", "position": 0.25}],
        "rooms": [{"id": "r1", "name": "Main", "type": "living", "wall_ids": ["w1", "w2"]}],
        "furniture": [{
            "id": "f1", "type": "sofa-3", "position": {"x": 10, "y": 20},
            "rotation": 90, "width": 84, "height": 36,
        }],
    })


def test_empty_document():
    text = generate_floorplan_context(Floorplan.create())
    assert "- No walls (empty floorplan)" in text
    assert "Doors" not in text


def test_lists_every_element():
    text = generate_floorplan_context(sample_document())
    assert 'ID: w1, from (0", 0") to (120", 0"), length: 120", thickness: 6"' in text
    assert 'to (120", 90.5"), length: 90", thickness: 4.5"' in text
    assert 'ID: d1, on wall w1, position: 50%, width: 32"' in text
    assert 'ID: n1, on wall w2, position: 25%, size: 36"x48"' in text
    assert 'ID: f1, type: sofa-3, at (10", 20"), 84"x36", rotation: 90°' in text
    assert 'ID: r1, "Main" (living), walls: [w1, w2]' in text
    assert "Walls (2):" in text and "Furniture (1):" in text


def test_output_is_deterministic():
    first = generate_floorplan_context(sample_document())
    generate_floorplan_context(Floorplan.create())
    second = generate_floorplan_context(sample_document())
    assert first == second
