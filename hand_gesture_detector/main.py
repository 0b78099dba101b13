# main.py
"""
Live hand gesture detector with debug window.

Pipeline (one tick per display refresh):
    Camera -> FrameSampler -> GestureClassifier -> DetectionSnapshot -> overlay

Keys in the window:
    s       start / stop detection
    q, Esc  quit
"""

import argparse
import time
from typing import List, Optional

import cv2

from .camera_module import CameraConfig
from .config import DetectorConfig
from .overlay import draw_overlay
from .session import DetectionSession


KEY_ESC = 27


def positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return number


def get_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="hand-gesture-detector",
        description="Classify webcam hand gestures with a skin-tone ratio heuristic.",
    )
    p.add_argument("--device", type=int, default=0, help="camera index")
    p.add_argument("--width", type=int, default=640)
    p.add_argument("--height", type=int, default=480)
    p.add_argument("--no-mirror", action="store_true", help="do not flip frames horizontally")
    p.add_argument("--fps", type=positive_float, default=30.0, help="loop rate")
    p.add_argument("--no-window", action="store_true", help="print gestures only")
    p.add_argument("--max-ticks", type=int, default=None)
    p.add_argument("--max-runtime", type=float, default=None, help="seconds")
    p.add_argument("--quiet", action="store_true", help="only print errors")
    return p.parse_args(argv)


def build_config(args: argparse.Namespace) -> DetectorConfig:
    camera = CameraConfig(
        camera_index=args.device,
        width=args.width,
        height=args.height,
        mirror=not args.no_mirror,
        target_fps=max(1, int(args.fps)),
        verbose=not args.quiet,
    )
    return DetectorConfig(
        camera=camera,
        target_fps=args.fps,
        max_ticks=args.max_ticks,
        max_runtime=args.max_runtime,
        show_window=not args.no_window,
        verbose=not args.quiet,
        print_changes=not args.quiet,
    )


def _render(session: DetectionSession, config: DetectorConfig) -> None:
    preview = None
    if session.preview is not None:
        preview = cv2.cvtColor(session.preview.pixels[..., :3], cv2.COLOR_RGB2BGR)

    canvas = draw_overlay(
        preview,
        session.snapshot,
        size=(config.camera.width, config.camera.height),
    )
    cv2.imshow(config.window_name, canvas)


def run_detector(
    config: Optional[DetectorConfig] = None,
    session: Optional[DetectionSession] = None,
) -> int:
    """
    Run the detection loop until quit, a tick/time limit, or camera loss.

    Returns:
        Process exit status: 0 on a clean exit, 1 if the camera failed
    """
    config = config or DetectorConfig()
    session = session or DetectionSession(
        camera_config=config.camera,
        verbose=config.verbose,
    )

    snapshot = session.start()
    if snapshot.error:
        print(f"[SYSTEM] {snapshot.error}")
        return 1

    if config.verbose:
        if config.show_window:
            print("[SYSTEM] Press 's' to start/stop, 'q' to quit.")
        else:
            print("[SYSTEM] Running without a window. Press Ctrl+C to quit.")

    dt_target = 1.0 / config.target_fps
    start_time = time.time()
    ticks = 0
    last_gesture = None
    last_error = ""

    try:
        while True:
            loop_start = time.time()

            if config.max_ticks is not None and ticks >= config.max_ticks:
                break
            if config.max_runtime is not None and loop_start - start_time >= config.max_runtime:
                break

            snapshot = session.tick()
            ticks += 1

            if snapshot.error and snapshot.error != last_error:
                print(f"[SYSTEM] {snapshot.error}")
                if not config.show_window:
                    return 1
            last_error = snapshot.error

            if config.print_changes and snapshot.is_active and snapshot.gesture != last_gesture:
                print(f"[GESTURE] {snapshot.gesture} ({snapshot.confidence}%)")
                last_gesture = snapshot.gesture

            if config.show_window:
                _render(session, config)
                key = cv2.waitKey(1) & 0xFF
                if key in (ord("q"), KEY_ESC):
                    if config.verbose:
                        print("[SYSTEM] Quit requested.")
                    break
                if key == ord("s"):
                    session.toggle()
                    last_gesture = None

            elapsed = time.time() - loop_start
            if elapsed < dt_target:
                time.sleep(dt_target - elapsed)

    except KeyboardInterrupt:
        if config.verbose:
            print("\n[SYSTEM] Interrupted.")
    finally:
        session.stop()
        if config.show_window:
            cv2.destroyAllWindows()

    if config.verbose:
        print(f"[SYSTEM] Done after {ticks} ticks.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    return run_detector(build_config(get_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())
