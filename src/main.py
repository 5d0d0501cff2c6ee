"""Entry point for the spinning terminal d20."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence, Tuple, cast

from .dice.engine import RenderEngine, WireMesh
from .dice.objects import icosahedron_mesh
from .dice.terminal import TerminalController


class FrameDisplay(Protocol):
    def draw(self, frame: str) -> None: ...


@dataclass(frozen=True)
class RuntimeConfig:
    width: int = 80
    height: int = 30
    fov_degrees: float = 60.0
    camera_distance: float = 4.0
    near_clip: float = 0.1
    model_scale: float = 1.0
    frame_delay: float = 0.03
    angle_step: float = 0.05
    axis_speeds: Tuple[float, float, float] = (0.8, 1.1, 0.6)
    edge_char: str = "#"


def _emit_warnings(warnings: Sequence[str]) -> None:
    if not warnings:
        return
    for warning in warnings:
        sys.stderr.write(f"[ascii-d20] {warning}\n")
    sys.stderr.flush()


def _terminal_warnings(config: RuntimeConfig, size: Tuple[int, int]) -> list[str]:
    columns, lines = size
    if columns >= config.width and lines >= config.height:
        return []
    return [
        f"terminal is {columns}x{lines}; frames are {config.width}x{config.height} and will wrap or scroll"
    ]


def _create_engine(config: RuntimeConfig) -> RenderEngine:
    return RenderEngine(
        config.width,
        config.height,
        fov_degrees=config.fov_degrees,
        camera_distance=config.camera_distance,
        near_clip=config.near_clip,
        axis_speeds=config.axis_speeds,
        edge_char=config.edge_char,
    )


def run_animation(
    engine: RenderEngine,
    mesh: WireMesh,
    display: FrameDisplay,
    config: RuntimeConfig,
    *,
    sleep: Callable[[float], None] = time.sleep,
    max_frames: Optional[int] = None,
    start_angle: float = 0.0,
) -> float:
    """Render, draw, advance and pause until ``max_frames`` frames are shown.

    With ``max_frames=None`` the loop only ends when the process does.
    Returns the angle the next frame would have used.
    """

    angle = start_angle
    frame_counter = 0
    while max_frames is None or frame_counter < max_frames:
        frame = cast(str, engine.render(mesh, angle))
        display.draw(frame)
        angle += config.angle_step
        frame_counter += 1
        sleep(config.frame_delay)
    return angle


def run(config: Optional[RuntimeConfig] = None) -> None:
    config = config or RuntimeConfig()
    mesh = icosahedron_mesh(config.model_scale)
    engine = _create_engine(config)

    with TerminalController(fallback=(config.width, config.height)) as controller:
        _emit_warnings(_terminal_warnings(config, controller.size_tuple()))
        try:
            run_animation(engine, mesh, controller, config)
        except KeyboardInterrupt:  # pragma: no cover - interactive loop
            return


def main() -> None:
    run()


if __name__ == "__main__":
    main()
