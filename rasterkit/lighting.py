"""State of a lit-sphere scene: shading model, light, material and controls."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Vector = tuple[float, float, float]

MOVE_STEP = 0.1


class ShadingModel(Enum):
    """Shading model selected from the keyboard."""

    GOURAUD = "gouraud"
    PHONG = "phong"


class SpecialKey(Enum):
    """Special keys that move the light."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    F1 = "f1"
    F2 = "f2"


_MOVES: dict[SpecialKey, Vector] = {
    SpecialKey.UP: (0.0, MOVE_STEP, 0.0),
    SpecialKey.DOWN: (0.0, -MOVE_STEP, 0.0),
    SpecialKey.LEFT: (-MOVE_STEP, 0.0, 0.0),
    SpecialKey.RIGHT: (MOVE_STEP, 0.0, 0.0),
    SpecialKey.F1: (0.0, 0.0, MOVE_STEP),
    SpecialKey.F2: (0.0, 0.0, -MOVE_STEP),
}


@dataclass
class Material:
    """Reflectance of the sphere's front faces."""

    ambient: float = 0.8
    diffuse: float = 0.2
    specular: float = 1.0
    shininess: float = 50.0


@dataclass
class Light:
    """A point light with its intensities and spot settings."""

    position: Vector = (-3.0, -1.0, 9.0)
    diffuse: float = 1.0
    specular: float = 2.0
    ambient: float = 0.2
    spot_direction: Vector = (-3.0, -1.0, -9.0)
    spot_cutoff: float = 120.0


@dataclass
class LightingScene:
    """Interactive scene state driven by key presses."""

    model: ShadingModel = ShadingModel.GOURAUD
    light: Light = field(default_factory=Light)
    material: Material = field(default_factory=Material)
    ball_position: Vector = (1.0, 0.0, -6.0)
    size: float = 10.0
    background: Vector = (0.0, 0.0, 0.0)
    eye: Vector = (0.0, 0.0, 10.0)
    rotation: tuple[float, float] = (0.0, 0.0)
    running: bool = True

    @property
    def ball_radii(self) -> Vector:
        """Semi-axes of the sphere after its z stretch."""
        radius = 0.3 * self.size
        return (radius, radius, 3.0 * radius)

    def key(self, key: str) -> bool:
        """Handle a character key; return whether the scene must be redrawn."""
        if key == "x":
            self.running = False
            return False
        if key == "g":
            self.model = ShadingModel.GOURAUD
            return True
        if key == "p":
            self.model = ShadingModel.PHONG
            return True
        return False

    def special_key(self, key: SpecialKey | str) -> bool:
        """Move the light one step for an arrow or F1/F2 key; always redraw."""
        try:
            move = _MOVES[SpecialKey(key)]
        except ValueError:
            return True
        self.light.position = tuple(p + d for p, d in zip(self.light.position, move))
        return True

    def projection(self, width: int, height: int) -> tuple[float, float, float, float]:
        """Perspective parameters (fovy, aspect, near, far) for a viewport."""
        if height == 0:
            raise ValueError("viewport height must not be zero")
        return (45.0, width / height, 0.1, 100.0)

    def shade_mode(self) -> str:
        """Rasterizer shade mode for the current model."""
        return "smooth" if self.model is ShadingModel.GOURAUD else "flat"