import logging

from rich.logging import RichHandler


def setup_logging(console=None, level=logging.WARNING):
    """Route the ``vpet`` loggers through rich, onto the game's console."""
    logger = logging.getLogger("vpet")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=console, show_path=False, markup=False, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
