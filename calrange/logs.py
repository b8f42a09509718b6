"""Shared logging helpers for calrange."""

import logging


def configure_logging(*, level: int | str = logging.WARNING, force: bool = False) -> None:
    """Initialise the root logger with a terse format suitable for CLI output.

    Args:
        level: Level number or name (e.g. "DEBUG").
        force: Reconfigure even if handlers are already installed.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
