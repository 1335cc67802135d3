import logging
import os
import sys

LOG_LEVEL = os.environ.get("VALUEGRAD_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logger(name, level=None):
    """
    Attach a stdout handler to the `valuegrad` loggers and return the logger
    for `name`. The level defaults to $VALUEGRAD_LOG_LEVEL.
    """
    root = logging.getLogger("valuegrad")
    root.setLevel(level or LOG_LEVEL)

    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    if name == "valuegrad" or name.startswith("valuegrad."):
        return logging.getLogger(name)
    return logging.getLogger(f"valuegrad.{name}")
