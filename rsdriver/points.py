"""Point types, point clouds and field assignment that tolerates missing fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Iterator, List, TypeVar


@dataclass
class PointXYZI:
    """A point with position and intensity."""

    __slots__ = ("x", "y", "z", "intensity")

    x: float
    y: float
    z: float
    intensity: float

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, intensity: float = 0.0
    ) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.intensity = intensity


@dataclass
class PointXYZIRT:
    """A point with position, intensity, laser ring and timestamp."""

    __slots__ = ("x", "y", "z", "intensity", "ring", "timestamp")

    x: float
    y: float
    z: float
    intensity: int
    ring: int
    timestamp: float

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        z: float = 0.0,
        intensity: int = 0,
        ring: int = 0,
        timestamp: float = 0.0,
    ) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.intensity = intensity
        self.ring = ring
        self.timestamp = timestamp


P = TypeVar("P")


def assign_fields(point: P, **kwargs: Any) -> P:
    """Set each given field that ``point`` has; silently skip the others."""
    for name, value in kwargs.items():
        if hasattr(point, name):
            setattr(point, name, value)
    return point


@dataclass
class PointCloud(Generic[P]):
    """A frame of points with its timestamp and sequence number."""

    points: List[P] = field(default_factory=list)
    timestamp: float = 0.0
    seq: int = 0

    def append(self, point: P) -> None:
        """Add a point to the end of the cloud."""
        self.points.append(point)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[P]:
        return iter(self.points)