"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from rookery.settings import AppSettings

_LOGGER = logging.getLogger(__name__)
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings) -> None:
    """Send the package's log records to ``settings.log_file``."""
    if settings.log_file is None:
        return
    handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logger = logging.getLogger("rookery")
    logger.setLevel(settings.log_level.upper())
    logger.addHandler(handler)
    _LOGGER.info("Initialized logging")


def _parse_args(argv: list[str]) -> tuple[argparse.Namespace, list[str]]:
    defaults = AppSettings()
    parser = argparse.ArgumentParser(prog="rookery", description="Play chess.")
    parser.add_argument(
        "--text",
        action="store_true",
        help="play in the terminal instead of opening a window",
    )
    parser.add_argument("--log-file", default=defaults.log_file)
    parser.add_argument(
        "--log-level",
        default=defaults.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )
    parser.add_argument("--flip", action="store_true", help="show Black at the bottom")
    return parser.parse_known_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Launch Rookery in a window, or in the terminal with ``--text``."""
    args, qt_args = _parse_args(sys.argv[1:] if argv is None else argv)
    settings = AppSettings(
        log_file=args.log_file or None,
        log_level=args.log_level,
        flip_board=args.flip,
    )
    configure_logging(settings)

    if args.text:
        from rookery.game.driver import run_text_game

        run_text_game(colored=sys.stdout.isatty())
        return

    from rookery.ui.bootstrap import run_application

    sys.exit(run_application([sys.argv[0], *qt_args], settings))


if __name__ == "__main__":
    main()
