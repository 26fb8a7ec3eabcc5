"""Camera Stylizer - Main entry point."""

import argparse
import logging
import sys

from models import StylizeMode

logger = logging.getLogger("camera_stylizer")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Stylize a live camera feed into blocks, dots or a Voronoi mosaic."
    )
    parser.add_argument("--camera", type=int, help="Capture device index")
    parser.add_argument("--image", help="Stylize a still image instead of a camera")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in StylizeMode],
        help="Initial style",
    )
    parser.add_argument("--block-size", type=int, help="Block size in pixels")
    parser.add_argument("--palette", action="store_true", help="Quantize to the pop-art palette")
    parser.add_argument(
        "--export",
        metavar="PATH",
        help="Render --image headless to PATH (.svg or .png) and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def apply_overrides(config, args: argparse.Namespace):
    """Apply command line overrides on top of the saved configuration."""
    if args.camera is not None:
        config.camera_index = args.camera
    if args.mode:
        config.mode = StylizeMode(args.mode)
    if args.block_size is not None:
        if args.block_size < 1:
            raise SystemExit("--block-size must be positive")
        config.block_size = args.block_size
    if args.palette:
        config.use_palette = True
    return config


def export(args: argparse.Namespace, config) -> int:
    """Headless path: stylize one still image and write it to disk."""
    from stylizer import FrameStylizer, save_frame

    if not args.image:
        logger.error("--export needs --image")
        return 2

    stylizer = FrameStylizer(config)
    try:
        grid = stylizer.load_image(args.image)
        frame = stylizer.process(grid)
        save_frame(frame, args.export)
    except ValueError as e:
        logger.error("%s", e)
        return 1

    return 0


def main(argv=None):
    """Launch the camera stylizer application."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from config_manager import ConfigManager

    config_manager = ConfigManager()

    if args.export:
        config = apply_overrides(config_manager.load(), args)
        sys.exit(export(args, config))

    from PyQt6.QtWidgets import QApplication

    from capture_thread import StaticFrameSource
    from ui.main_window import StylizerWindow

    app = QApplication(sys.argv)
    app.setApplicationDisplayName("Camera Stylizer")
    app.setApplicationName("CameraStylizer")

    static_source = None
    if args.image:
        try:
            static_source = StaticFrameSource(args.image)
        except ValueError as e:
            logger.error("%s", e)
            sys.exit(1)

    config = apply_overrides(config_manager.load(), args)
    window = StylizerWindow(config_manager, static_source, config)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
