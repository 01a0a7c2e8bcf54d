import logging
from typing import Union


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Route log records to stderr. Only entry points call this; library modules never do."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level!r}")
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )
