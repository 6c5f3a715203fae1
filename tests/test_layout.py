"""Tests for season field layouts."""

import pytest

from competition_field import (
    CompetitionField,
    ConfigError,
    FieldLayout,
    OpponentRobotOnField,
    Pose2d,
    load_field_layout,
)
from competition_field.layout import DEFAULT_LAYOUT_YAML

LAYOUT_YAML = """
season: test
game_pieces:
  Note:
    - [1.0, 2.0]
    - [3.0, 4.0, 90]
  Cube:
    - [5.0, 5.0, 0]
opponents:
  - [15.0, 4.0, 180]
  - [15.0, 2.0, 180]
"""


@pytest.fixture
def layout(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text(LAYOUT_YAML)
    return load_field_layout(path)


class TestLoadFieldLayout:
    def test_parses_pieces(self, layout):
        assert layout.season == "test"
        assert layout.game_pieces["Note"] == [(1.0, 2.0, 0.0), (3.0, 4.0, 90.0)]
        assert layout.game_pieces["Cube"] == [(5.0, 5.0, 0.0)]
        assert len(layout.opponents) == 2

    def test_bad_pose(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("game_pieces:\n  Note:\n    - [1.0]\n")
        with pytest.raises(ConfigError):
            load_field_layout(path)

    def test_non_numeric_pose(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("game_pieces:\n  Note:\n    - [a, b]\n")
        with pytest.raises(ConfigError):
            load_field_layout(path)

    def test_game_pieces_as_list_rejected(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("game_pieces:\n  - [1.0, 2.0]\n")
        with pytest.raises(ConfigError):
            load_field_layout(path)

    def test_scalar_under_piece_type_rejected(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("game_pieces:\n  Note: 5\n")
        with pytest.raises(ConfigError):
            load_field_layout(path)

    def test_opponents_as_mapping_rejected(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("opponents:\n  red: [15.0, 4.0, 180]\n")
        with pytest.raises(ConfigError):
            load_field_layout(path)

    def test_empty_piece_type_allowed(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("game_pieces:\n  Note:\n")
        assert load_field_layout(path).game_pieces == {"Note": []}

    def test_default_layout(self):
        if not DEFAULT_LAYOUT_YAML.exists():
            pytest.skip("default layout not available")
        layout = load_field_layout(DEFAULT_LAYOUT_YAML)
        assert layout.season == "crescendo2024"
        assert len(layout.game_pieces["Note"]) == 11


class TestPlacement:
    def test_place_game_pieces(self, layout, field):
        placed = layout.place_game_pieces(field)
        assert len(placed) == 3
        assert len(field.objects_with_type("Note")) == 2
        poses = {p.pose2d() for p in field.objects_with_type("Note")}
        assert Pose2d(1.0, 2.0, 0.0) in poses

    def test_reset_restores_layout(self, layout, field):
        layout.place_game_pieces(field)
        note = next(iter(field.objects_with_type("Note")))
        field.delete_object(note)
        note.set_pose(Pose2d(9, 9))

        layout.reset_game_pieces(field)
        assert len(field.objects_with_type("Note")) == 2
        assert len(field.objects_with_type("Cube")) == 1

    def test_reset_keeps_other_types(self, layout, field):
        layout.place_game_pieces(field)
        opponents = layout.add_opponents(field)
        layout.reset_game_pieces(field)
        assert set(field.objects_with_type("OpponentRobot")) == set(opponents)

    def test_add_opponents(self, layout, field):
        opponents = layout.add_opponents(field)
        assert [o.robot_id for o in opponents] == [0, 1]
        assert all(isinstance(o, OpponentRobotOnField) for o in opponents)

    def test_publish_after_place(self, layout, field, dashboard, telemetry):
        layout.place_game_pieces(field)
        field.publish()
        assert len(dashboard.get_object("Note")) == 2
        assert len(telemetry.latest("/Field/Cube")) == 1

    def test_from_dict_empty(self):
        layout = FieldLayout.from_dict({})
        assert layout.game_pieces == {}
        assert layout.place_game_pieces(
            CompetitionField(OpponentRobotOnField(0, Pose2d()))
        ) == []
