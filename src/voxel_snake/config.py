"""Game configuration for the terminal host."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from voxel_snake.coords import Vec3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Settings for one game session.

    Grid dimensions left as ``None`` are derived from the terminal size.
    Supports JSON serialization so a level setup can be replayed.
    """

    # Frame loop
    fps: int = 20

    # Level
    grid_x: int | None = None
    grid_y: int | None = None
    grid_z: int | None = None
    start: Vec3 = (0, 0, 1)
    food: Vec3 | None = None

    # Rendering
    skip_void: bool = True
    border: bool = True

    def __post_init__(self) -> None:
        if self.fps < 1:
            raise ValueError("fps must be at least 1.")
        dims = (self.grid_x, self.grid_y, self.grid_z)
        if any(d is not None for d in dims) and any(d is None for d in dims):
            raise ValueError("grid_x, grid_y and grid_z must be set together.")
        if self.grid_x is not None and (
            self.grid_x < 1 or self.grid_y < 1 or self.grid_z < 2
        ):
            raise ValueError(
                "Grid must be at least 1x1 with two layers (floor + play)."
            )
        if len(self.start) != 3:
            raise ValueError("start must be an (x, y, z) triple.")
        if self.food is not None and len(self.food) != 3:
            raise ValueError("food must be an (x, y, z) triple.")

    @property
    def dims(self) -> Vec3 | None:
        """Configured grid dimensions, or ``None`` to fit the window."""
        if self.grid_x is None:
            return None
        return self.grid_x, self.grid_y, self.grid_z

    def to_dict(self) -> dict:
        """Serialize to a plain dict (tuples become lists)."""
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file."""
        raw = json.loads(Path(path).read_text())
        return cls.from_dict(raw)

    @classmethod
    def from_dict(cls, raw: dict) -> GameConfig:
        data = dict(raw)
        for key in ("start", "food"):
            if data.get(key) is not None:
                data[key] = tuple(data[key])
        return cls(**data)
