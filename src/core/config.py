# core/config.py
"""
Startup configuration: image size, initial camera state, control speeds and
the sphere list. Defaults reproduce the built-in demo scene; a TOML file can
override any of them:

    [image]
    width = 800
    aspect_ratio = 1.7777

    [camera]
    origin = [0.0, 0.0, 0.0]
    yaw = 5.0
    pitch = 1.0
    focal_length = 1.0

    [controls]
    move_speed = 0.1

    [renderer]
    backend = "auto"

    [[spheres]]
    center = [0.0, 1.0, 0.0]
    radius = 0.5
"""
import logging
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from camera.camera import Camera
from camera.controls import CameraController
from core.vector import Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList

logger = logging.getLogger(__name__)

Triple = Tuple[float, float, float]

_FLOAT_FIELDS = ("aspect_ratio", "yaw", "pitch", "focal_length", "viewport_height",
                 "move_speed", "rotation_speed", "zoom_speed")


def _check_int(value: Any, name: str):
    # bool is an int subclass; TOML true/false is never a size
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _check_number(value: Any, name: str):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{name} must be a number, got {value!r}")


@dataclass(frozen=True)
class SphereConfig:
    center: Triple
    radius: float

    def __post_init__(self):
        _check_number(self.radius, "spheres.radius")
        if not self.radius > 0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")

    def build(self) -> Sphere:
        return Sphere(Vector3(*self.center), self.radius)


DEFAULT_SPHERES = (
    SphereConfig(center=(0.0, 1.0, 0.0), radius=0.5),
    SphereConfig(center=(1.0, 1.0, 0.0), radius=0.4),
)


@dataclass(frozen=True)
class RenderConfig:
    width: int = 800
    aspect_ratio: float = 16.0 / 9.0
    height: Optional[int] = None
    title: str = "Ray Tracing"

    origin: Triple = (0.0, 0.0, 0.0)
    yaw: float = 5.0
    pitch: float = 1.0
    focal_length: float = 1.0
    viewport_height: float = 2.0

    move_speed: float = 0.1
    rotation_speed: float = 0.02
    zoom_speed: float = 0.1

    backend: str = "auto"
    target_fps: int = 60

    spheres: Tuple[SphereConfig, ...] = DEFAULT_SPHERES

    def __post_init__(self):
        for name in ("width", "target_fps"):
            _check_int(getattr(self, name), name)
        if self.height is not None:
            _check_int(self.height, "height")
        for name in _FLOAT_FIELDS:
            _check_number(getattr(self, name), name)
        if not isinstance(self.title, str):
            raise ValueError(f"title must be a string, got {self.title!r}")
        if not self.aspect_ratio > 0:
            raise ValueError(f"aspect_ratio must be positive, got {self.aspect_ratio}")
        if self.width < 2 or self.image_height < 2:
            raise ValueError(
                f"Image must be at least 2x2 pixels, got {self.width}x{self.image_height}")
        if self.backend not in ("auto", "python", "numba"):
            raise ValueError(f"Unknown backend {self.backend!r}")

    @property
    def image_height(self) -> int:
        if self.height is not None:
            return self.height
        return int(self.width / self.aspect_ratio)

    def build_camera(self) -> Camera:
        # Aspect from the integer image size, not the requested ratio
        return Camera(
            origin=Vector3(*self.origin),
            yaw=self.yaw,
            pitch=self.pitch,
            focal_length=self.focal_length,
            aspect_ratio=self.width / self.image_height,
            viewport_height=self.viewport_height,
        )

    def build_controller(self) -> CameraController:
        return CameraController(self.move_speed, self.rotation_speed, self.zoom_speed)

    def build_world(self) -> HittableList:
        world = HittableList(sphere.build() for sphere in self.spheres)
        logger.info("Built scene with %d spheres", len(world))
        return world


# TOML table -> RenderConfig fields accepted in it
_TABLES = {
    "image": ("width", "height", "aspect_ratio", "title"),
    "camera": ("origin", "yaw", "pitch", "focal_length", "viewport_height"),
    "controls": ("move_speed", "rotation_speed", "zoom_speed"),
    "renderer": ("backend", "target_fps"),
}


def _triple(value: Any, name: str) -> Triple:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"{name} must be a list of three numbers, got {value!r}")
    for component in value:
        _check_number(component, name)
    return (float(value[0]), float(value[1]), float(value[2]))


def config_from_dict(data: Mapping[str, Any],
                     base: RenderConfig = RenderConfig()) -> RenderConfig:
    """
    Builds a RenderConfig from parsed TOML data, starting from base.

    Raises:
        ValueError: On unknown tables or keys, or invalid values.
    """
    unknown = set(data) - set(_TABLES) - {"spheres"}
    if unknown:
        raise ValueError(f"Unknown config tables: {sorted(unknown)}")

    overrides: Dict[str, Any] = {}
    for table, keys in _TABLES.items():
        section = data.get(table, {})
        if not isinstance(section, Mapping):
            raise ValueError(f"[{table}] must be a table, got {section!r}")
        bad = set(section) - set(keys)
        if bad:
            raise ValueError(f"Unknown keys in [{table}]: {sorted(bad)}")
        overrides.update(section)

    if "origin" in overrides:
        overrides["origin"] = _triple(overrides["origin"], "camera.origin")

    if "spheres" in data:
        entries = data["spheres"]
        if not isinstance(entries, list):
            raise ValueError(f"spheres must be an array of tables, got {entries!r}")
        spheres = []
        for entry in entries:
            if not isinstance(entry, Mapping):
                raise ValueError(f"Each [[spheres]] entry must be a table, got {entry!r}")
            bad = set(entry) - {"center", "radius"}
            if bad:
                raise ValueError(f"Unknown keys in [[spheres]]: {sorted(bad)}")
            spheres.append(SphereConfig(
                center=_triple(entry.get("center"), "spheres.center"),
                radius=entry.get("radius", 0.0),
            ))
        overrides["spheres"] = tuple(spheres)

    return replace(base, **overrides)


def load_config(path: Union[str, Path]) -> RenderConfig:
    """
    Loads a RenderConfig from a TOML file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid TOML or has invalid settings.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML in {path}: {e}") from e
    logger.info("Loaded config from %s", path)
    return config_from_dict(data)
