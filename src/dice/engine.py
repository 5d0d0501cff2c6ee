"""Core math utilities and wireframe rendering engine for the terminal d20."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .framebuffer import FrameBuffer


@dataclass(frozen=True, slots=True)
class Vec3:
    """Lightweight immutable 3D vector."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vec3":
        if not isinstance(scalar, (int, float)):
            raise TypeError("Vec3 can only be multiplied by a scalar")
        return Vec3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> "Vec3":
        if scalar == 0:
            raise ZeroDivisionError("Division by zero in Vec3")
        return Vec3(self.x / scalar, self.y / scalar, self.z / scalar)

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))


Face = Tuple[int, int, int]
Edge = Tuple[int, int]


@dataclass(frozen=True, slots=True)
class ProjectedPoint:
    """Screen cell produced by the projector; only usable when ``valid``."""

    x: int
    y: int
    valid: bool


_INVALID = ProjectedPoint(0, 0, False)


def build_edges(faces: Sequence[Face]) -> Tuple[Edge, ...]:
    """Collect the unique edges of ``faces`` as sorted ``(low, high)`` pairs."""

    edges = set()
    for face in faces:
        for i in range(3):
            a, b = face[i], face[(i + 1) % 3]
            edges.add((a, b) if a < b else (b, a))
    return tuple(sorted(edges))


def face_centroids(vertices: Sequence[Vec3], faces: Sequence[Face]) -> Tuple[Vec3, ...]:
    return tuple((vertices[a] + vertices[b] + vertices[c]) / 3.0 for a, b, c in faces)


class WireMesh:
    """Triangle mesh drawn as a wireframe with one label per face."""

    def __init__(self, vertices: Sequence[Vec3], faces: Sequence[Face]):
        self._vertices: Tuple[Vec3, ...] = tuple(vertices)
        self._faces: Tuple[Face, ...] = tuple(tuple(face) for face in faces)  # type: ignore[misc]
        if not self._faces:
            raise ValueError("WireMesh requires at least one face")
        count = len(self._vertices)
        for face in self._faces:
            if len(face) != 3:
                raise ValueError(f"Face {face!r} is not a triangle")
            if any(index < 0 or index >= count for index in face):
                raise ValueError(f"Face {face!r} references a vertex outside 0..{count - 1}")
        self._edges = build_edges(self._faces)
        self._centroids = face_centroids(self._vertices, self._faces)

    @property
    def vertices(self) -> Tuple[Vec3, ...]:
        return self._vertices

    @property
    def faces(self) -> Tuple[Face, ...]:
        return self._faces

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    @property
    def centroids(self) -> Tuple[Vec3, ...]:
        return self._centroids


def rotate_x(vertex: Vec3, angle: float) -> Vec3:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Vec3(
        vertex.x,
        vertex.y * cos_a - vertex.z * sin_a,
        vertex.y * sin_a + vertex.z * cos_a,
    )


def rotate_y(vertex: Vec3, angle: float) -> Vec3:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Vec3(
        vertex.x * cos_a + vertex.z * sin_a,
        vertex.y,
        -vertex.x * sin_a + vertex.z * cos_a,
    )


def rotate_z(vertex: Vec3, angle: float) -> Vec3:
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return Vec3(
        vertex.x * cos_a - vertex.y * sin_a,
        vertex.x * sin_a + vertex.y * cos_a,
        vertex.z,
    )


def apply_rotation(vertex: Vec3, rotation: Vec3) -> Vec3:
    """Rotate about X, then Y, then Z by the components of ``rotation``."""

    return rotate_z(rotate_y(rotate_x(vertex, rotation.x), rotation.y), rotation.z)


def face_label(index: int) -> str:
    """Single-digit label for the zero-based face ``index`` (faces 10 and 20 read ``0``)."""

    return str((index + 1) % 10)


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class RenderEngine:
    """Software wireframe renderer producing plain-text frames for terminal output."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        fov_degrees: float = 60.0,
        camera_distance: float = 4.0,
        near_clip: float = 0.1,
        axis_speeds: Tuple[float, float, float] = (0.8, 1.1, 0.6),
        edge_char: str = "#",
        blank_char: str = " ",
    ) -> None:
        if width < 2 or height < 2:
            raise ValueError("RenderEngine requires width and height >= 2")
        if not 0.0 < fov_degrees < 180.0:
            raise ValueError("fov_degrees must lie strictly between 0 and 180")
        if len(edge_char) != 1:
            raise ValueError("edge_char must be a single character")
        self.width = width
        self.height = height
        self._fov_degrees = fov_degrees
        self._fov_radians = math.radians(fov_degrees)
        self._projection_scale = 1.0 / math.tan(self._fov_radians / 2.0)
        self.camera_distance = camera_distance
        self.near_clip = near_clip
        self.axis_speeds = Vec3(*axis_speeds)
        self.edge_char = edge_char
        self.blank_char = blank_char

    def rotation_for(self, angle: float) -> Vec3:
        return self.axis_speeds * angle

    def transform(self, vertex: Vec3, angle: float) -> Vec3:
        return apply_rotation(vertex, self.rotation_for(angle))

    def project_point(self, vertex: Vec3) -> ProjectedPoint:
        depth = vertex.z + self.camera_distance
        if depth <= self.near_clip:
            return _INVALID
        x_ndc = vertex.x * self._projection_scale / depth
        y_ndc = vertex.y * self._projection_scale / depth

        # Rows grow downward while model Y grows upward.
        x_screen = _round_half_up((x_ndc + 1.0) * 0.5 * (self.width - 1))
        y_screen = _round_half_up((1.0 - (y_ndc + 1.0) * 0.5) * (self.height - 1))
        if not (0 <= x_screen < self.width and 0 <= y_screen < self.height):
            return _INVALID
        return ProjectedPoint(x_screen, y_screen, True)

    def render(
        self,
        mesh: WireMesh,
        angle: float,
        *,
        output_format: str = "text",
    ) -> Union[str, FrameBuffer]:
        if output_format not in ("text", "buffer"):
            raise ValueError(f"Unsupported output_format '{output_format}'")

        buffer = FrameBuffer(self.width, self.height, self.blank_char)
        rotation = self.rotation_for(angle)

        projected: List[ProjectedPoint] = [
            self.project_point(apply_rotation(vertex, rotation)) for vertex in mesh.vertices
        ]
        for a, b in mesh.edges:
            start, end = projected[a], projected[b]
            if not (start.valid and end.valid):
                continue
            buffer.draw_line(start.x, start.y, end.x, end.y, self.edge_char)

        for index, centroid in enumerate(mesh.centroids):
            point = self.project_point(apply_rotation(centroid, rotation))
            if point.valid:
                buffer.plot(point.x, point.y, face_label(index))

        if output_format == "buffer":
            return buffer
        return buffer.to_text()
