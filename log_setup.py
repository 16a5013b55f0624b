import logging

from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _install(name: str, factory, level: int) -> None:
    """
    Add a named handler to the root logger unless one with this name exists.
    """
    root = logging.getLogger()
    for handler in root.handlers:
        if handler.get_name() == name:
            handler.setLevel(level)
            return

    handler = factory()
    handler.set_name(name)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> None:
    """
    Log to the console and, optionally, to a file.
    Repeated calls reuse the installed handlers and only adjust the level.
    """
    logging.getLogger().setLevel(level)
    _install("convex_hull.console", logging.StreamHandler, level)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        _install("convex_hull.file", lambda: logging.FileHandler(log_file, encoding="utf-8"), level)
