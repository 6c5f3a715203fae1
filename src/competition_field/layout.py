"""Season field layouts: where game pieces and opponents start."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Tuple

import yaml

from competition_field.core.errors import ConfigError
from competition_field.core.geometry import Pose2d
from competition_field.core.objects import GamePieceOnField, OpponentRobotOnField
from competition_field.field import CompetitionField

logger = logging.getLogger(__name__)

# (x meters, y meters, heading degrees)
PoseTuple = Tuple[float, float, float]


def _parse_pose(raw, where: str) -> PoseTuple:
    if not isinstance(raw, (list, tuple)) or len(raw) not in (2, 3):
        raise ConfigError(f"{where}: expected [x, y] or [x, y, heading_deg], got {raw!r}")
    try:
        values = [float(v) for v in raw]
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{where}: {e}") from e
    if len(values) == 2:
        values.append(0.0)
    return values[0], values[1], values[2]


@dataclass
class FieldLayout:
    """Starting positions for one competition season."""

    season: str = ""
    game_pieces: Dict[str, List[PoseTuple]] = field(default_factory=dict)
    opponents: List[PoseTuple] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict, source: str = "<layout>") -> FieldLayout:
        raw_pieces = data.get("game_pieces") or {}
        if not isinstance(raw_pieces, dict):
            raise ConfigError(f"{source}: game_pieces must map type names to pose lists")
        raw_opponents = data.get("opponents") or []
        if not isinstance(raw_opponents, list):
            raise ConfigError(f"{source}: opponents must be a list of poses")

        pieces: Dict[str, List[PoseTuple]] = {}
        for type_name, poses in raw_pieces.items():
            if not type_name:
                raise ConfigError(f"{source}: game piece type name must be non-empty")
            poses = poses or []
            if not isinstance(poses, list):
                raise ConfigError(f"{source}: game_pieces.{type_name} must be a list of poses")
            pieces[str(type_name)] = [
                _parse_pose(p, f"{source}: game_pieces.{type_name}[{i}]")
                for i, p in enumerate(poses)
            ]
        opponents = [
            _parse_pose(p, f"{source}: opponents[{i}]")
            for i, p in enumerate(raw_opponents)
        ]
        return cls(season=str(data.get("season", "")), game_pieces=pieces, opponents=opponents)

    def place_game_pieces(self, competition_field: CompetitionField) -> List[GamePieceOnField]:
        """Register a game piece at every starting position."""
        placed = []
        for type_name, poses in self.game_pieces.items():
            for x, y, heading_deg in poses:
                piece = GamePieceOnField(type_name, Pose2d.from_degrees(x, y, heading_deg))
                placed.append(competition_field.add_object(piece))
        logger.info("Placed %d game piece(s) for %s", len(placed), self.season or "layout")
        return placed

    def reset_game_pieces(self, competition_field: CompetitionField) -> List[GamePieceOnField]:
        """Remove all game pieces of the layout's types, then place them again."""
        removed = 0
        for type_name in self.game_pieces:
            removed += len(competition_field.clear_objects_with_type(type_name))
        logger.debug("Reset removed %d game piece(s)", removed)
        return self.place_game_pieces(competition_field)

    def add_opponents(self, competition_field: CompetitionField) -> List[OpponentRobotOnField]:
        """Register one opponent robot per starting position."""
        return [
            competition_field.add_object(
                OpponentRobotOnField(robot_id, Pose2d.from_degrees(x, y, heading_deg))
            )
            for robot_id, (x, y, heading_deg) in enumerate(self.opponents)
        ]


def load_field_layout(yaml_path: Path) -> FieldLayout:
    """Load a field layout from YAML.

    Args:
        yaml_path: Path to layout file

    Returns:
        Parsed FieldLayout
    """
    with open(yaml_path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigError(f"{yaml_path}: expected a mapping at top level")
    return FieldLayout.from_dict(data, source=str(yaml_path))


# Default path: <repo>/config/layouts/crescendo2024.yaml
DEFAULT_LAYOUT_YAML = Path(__file__).parent.parent.parent / "config" / "layouts" / "crescendo2024.yaml"
