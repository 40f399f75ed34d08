import json

import pytest

from gravity import presets_loader
from gravity.presets_loader import default_scene, list_templates, load_scene, load_template
from gravity.vector_utils import Vector2


@pytest.fixture
def templates_dir(tmp_path):
    (tmp_path / "pair.json").write_text(json.dumps({
        "name": "A pair",
        "bodies": [
            {"x": 1, "y": 2, "radius": 3, "velocity": [0.5, -0.5], "color": [300, 20, -4]},
            {"x": 10, "y": 20, "radius": 30, "color": "#00ff7f"},
        ],
    }), encoding="utf-8")
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
    (tmp_path / "partial.json").write_text(json.dumps({
        "bodies": [{"x": 1, "radius": 2}, {"x": 0, "y": 0, "radius": 1}],
    }), encoding="utf-8")
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")
    return tmp_path


def test_list_templates(templates_dir):
    assert list_templates(templates_dir) == [
        ("broken", "broken"),
        ("pair", "A pair"),
        ("partial", "partial"),
    ]


def test_list_templates_missing_dir(tmp_path):
    assert list_templates(tmp_path / "nope") == []


def test_load_template(templates_dir):
    bodies = load_template("pair", templates_dir)
    assert len(bodies) == 2
    a, b = bodies
    assert a.position == Vector2(1, 2)
    assert a.velocity == Vector2(0.5, -0.5)
    assert a.fill_color == (255, 20, 0)
    assert b.velocity == Vector2(0, 0)
    assert b.fill_color == (0, 255, 127)


def test_load_template_accepts_file_name(templates_dir):
    assert len(load_template("pair.json", templates_dir)) == 2


def test_malformed_bodies_are_skipped(templates_dir):
    bodies = load_template("partial", templates_dir)
    assert len(bodies) == 1
    assert bodies[0].radius == 1


def test_unreadable_template_returns_none(templates_dir):
    assert load_template("broken", templates_dir) is None
    assert load_template("missing", templates_dir) is None


def test_load_scene_falls_back_to_default(templates_dir):
    bodies = load_scene("missing", templates_dir)
    assert [b.radius for b in bodies] == [b.radius for b in default_scene()]


def test_default_scene():
    bodies = default_scene()
    assert [(b.x, b.y, b.radius) for b in bodies] == [
        (300, 300, 50),
        (100, 200, 10),
        (290, 100, 14.99),
        (290, 500, 4),
    ]
    assert [b.velocity for b in bodies] == [
        Vector2(0, 0), Vector2(1.2, -2), Vector2(4, 0), Vector2(4, 1),
    ]


def test_bundled_default_template_matches_builtin_scene():
    bodies = load_template("default", presets_loader.TEMPLATES_DIR)
    assert [(b.x, b.y, b.radius, b.velocity) for b in bodies] == [
        (b.x, b.y, b.radius, b.velocity) for b in default_scene()
    ]
