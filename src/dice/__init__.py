"""Terminal wireframe toolkit for the spinning d20."""

from .engine import ProjectedPoint, RenderEngine, Vec3, WireMesh, apply_rotation, face_label
from .framebuffer import FrameBuffer
from .objects import ICOSAHEDRON_FACES, icosahedron_mesh
from .terminal import TerminalController

__all__ = [
    "FrameBuffer",
    "ICOSAHEDRON_FACES",
    "ProjectedPoint",
    "RenderEngine",
    "TerminalController",
    "Vec3",
    "WireMesh",
    "apply_rotation",
    "face_label",
    "icosahedron_mesh",
]
