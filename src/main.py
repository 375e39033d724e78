"""Entry point for the animated terminal shapes demo."""

from __future__ import annotations

import argparse
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from .shapes.engine import Camera, Viewport
from .shapes.scene import demo_scene
from .shapes.terminal import TerminalController


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Spinning cube and torus in your terminal")
    parser.add_argument("--fps", type=float, default=30.0, help="Target frames per second, 0 = uncapped (default: 30)")
    parser.add_argument(
        "--frames",
        type=int,
        default=0,
        help="Run for a fixed number of frames (0 = infinite)",
    )
    parser.add_argument("--width", type=int, default=80, help="Viewport width in characters (default: 80)")
    parser.add_argument("--height", type=int, default=40, help="Viewport height in characters (default: 40)")
    parser.add_argument(
        "--fit",
        action="store_true",
        help="Size the viewport to the current terminal instead of --width/--height",
    )
    parser.add_argument(
        "--focal-length",
        type=float,
        default=0.5,
        help="Distance from the focal point to the image plane (default: 0.5)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=1.0,
        help="Multiplier for the animation clock",
    )
    return parser.parse_args(argv)


@dataclass
class RuntimeConfig:
    viewport: Viewport
    warnings: list[str]
    frame_duration: float
    speed: float
    frames: int


def _setup_runtime(args: argparse.Namespace, controller: Optional[TerminalController] = None) -> RuntimeConfig:
    warnings: list[str] = []

    width, height = args.width, args.height
    if args.fit:
        columns, lines = (controller or TerminalController()).size_tuple()
        # One line is left free so the trailing newline does not scroll.
        width, height = columns, max(1, lines - 1)

    if width < 1 or height < 1:
        warnings.append(f"Viewport {width}x{height} too small; using 80x40")
        width, height = 80, 40

    focal_length = args.focal_length
    if focal_length <= 0.0:
        warnings.append("Focal length must be positive; using 0.5")
        focal_length = 0.5

    frame_duration = 0.0
    if args.fps > 0:
        frame_duration = 1.0 / args.fps
    elif args.fps < 0:
        warnings.append("Negative --fps ignored; running uncapped")

    return RuntimeConfig(
        viewport=Viewport(width, height, Camera(focal_length=focal_length)),
        warnings=warnings,
        frame_duration=frame_duration,
        speed=args.speed,
        frames=max(0, args.frames),
    )


def _emit_warnings(warnings: Sequence[str]) -> None:
    if not warnings:
        return
    for warning in warnings:
        sys.stderr.write(f"[shapes] {warning}\n")
    sys.stderr.flush()


def _run_loop(config: RuntimeConfig, controller: TerminalController) -> int:
    frame_counter = 0
    start = time.perf_counter()

    with controller as terminal:
        try:
            while True:
                frame_start = time.perf_counter()
                elapsed_ms = (frame_start - start) * 1000.0 * config.speed

                terminal.draw(config.viewport.render(demo_scene(elapsed_ms)))

                frame_counter += 1
                if config.frames and frame_counter >= config.frames:
                    break

                sleep_time = config.frame_duration - (time.perf_counter() - frame_start)
                if sleep_time > 0:
                    time.sleep(sleep_time)
        except KeyboardInterrupt:  # pragma: no cover - interactive loop
            terminal.restore()
            sys.stdout.write("\nInterrupted. Bye!\n")
            sys.stdout.flush()

    return frame_counter


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_arguments(argv)
    controller = TerminalController()
    config = _setup_runtime(args, controller)
    _emit_warnings(config.warnings)
    return _run_loop(config, controller)


def main() -> None:
    run()


if __name__ == "__main__":
    main()
